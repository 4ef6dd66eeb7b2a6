"""SRT document parser and serializer."""

from datetime import timedelta

import structlog

from srtspan.core.assembler import SubtitleIterator
from srtspan.core.subtitle import Subtitle, SubtitleTrack
from srtspan.errors import SrtError, SubtitleError, SubtitleErrorKind

logger = structlog.get_logger()


def parse_srt(content: str) -> SubtitleTrack:
    """Parse SRT format string into a SubtitleTrack.

    Args:
        content: SRT format string content

    Returns:
        SubtitleTrack containing every block in document order

    Raises:
        SrtError: On the first malformed block or a repeated counter
    """
    track = SubtitleTrack(list(SubtitleIterator(content)))
    logger.debug("srt_parsed", subtitles=len(track))
    return track


def parse_srt_lenient(content: str) -> tuple[SubtitleTrack, list[SrtError]]:
    """Parse SRT content, collecting errors instead of stopping at the first.

    Malformed blocks and blocks reusing an earlier counter are skipped; each
    one is logged and returned alongside the track.

    Args:
        content: SRT format string content

    Returns:
        Tuple of the track built from the valid blocks and the errors
        encountered, in document order
    """
    subtitles = SubtitleIterator(content)
    entries: list[Subtitle] = []
    errors: list[SrtError] = []
    counters: set[int] = set()

    while True:
        try:
            subtitle = next(subtitles)
        except StopIteration:
            break
        except SrtError as e:
            logger.warning(
                "subtitle_skipped", kind=str(e.kind), span=repr(e.span), error=str(e)
            )
            errors.append(e)
            continue

        if subtitle.counter in counters:
            error = SubtitleError(
                SubtitleErrorKind.DUPLICATE_COUNTER,
                span=subtitle.text.span,
                detail=f"counter {subtitle.counter}",
            )
            logger.warning(
                "subtitle_skipped",
                kind=str(error.kind),
                span=repr(error.span),
                error=str(error),
            )
            errors.append(error)
            continue

        counters.add(subtitle.counter)
        entries.append(subtitle)

    logger.debug("srt_parsed", subtitles=len(entries), errors=len(errors))
    return SubtitleTrack(entries), errors


def _format_timestamp(value: timedelta) -> str:
    # Hours may exceed 24, so work from the total instead of the components.
    total_millis = value // timedelta(milliseconds=1)
    hours, rest = divmod(total_millis, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, millis = divmod(rest, 1000)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"


def serialize_srt(track: SubtitleTrack) -> str:
    """Serialize a SubtitleTrack to SRT format string.

    Args:
        track: Subtitles to serialize

    Returns:
        SRT format string; empty for an empty track
    """
    blocks = []

    for subtitle in track:
        timing = (
            f"{_format_timestamp(subtitle.start)} --> "
            f"{_format_timestamp(subtitle.end)}"
        )
        blocks.append(f"{subtitle.counter}\n{timing}\n{subtitle.text.as_raw()}")

    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"
