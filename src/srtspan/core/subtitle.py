"""Subtitle domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from srtspan.errors import SrtError, SubtitleError, SubtitleErrorKind
from srtspan.text.text import Text
from srtspan.utils.span import Span


@dataclass(frozen=True)
class Subtitle:
    """Single subtitle with timing and caption text.

    Attributes:
        counter: Sequence number of the block
        start: Offset at which the caption appears
        duration: How long the caption stays visible
        text: Caption text, newlines included; located in the source when parsed
    """

    counter: int
    start: timedelta
    duration: timedelta
    text: Text

    def __post_init__(self) -> None:
        """Validate subtitle constraints."""
        if isinstance(self.text, str):
            object.__setattr__(self, "text", Text(self.text))
        if self.counter < 0:
            raise SubtitleError(
                SubtitleErrorKind.INVALID_COUNTER, detail=f"got {self.counter}"
            )
        if self.duration == timedelta(0):
            raise SubtitleError(SubtitleErrorKind.ZERO_DURATION)
        if self.duration < timedelta(0):
            raise SubtitleError(
                SubtitleErrorKind.NEGATIVE_DURATION,
                detail=f"start {self.start} is after end {self.end}",
            )
        if not self.text.value:
            raise SubtitleError(SubtitleErrorKind.EMPTY_TEXT)

    @property
    def end(self) -> timedelta:
        return self.start + self.duration

    @classmethod
    def from_block(cls, content: str) -> Subtitle:
        """Parse exactly one SRT block.

        Args:
            content: A single ``counter / timing / text`` block

        Returns:
            The parsed subtitle

        Raises:
            SubtitleError: EMPTY_STRING if there is no block at all,
                MULTIPLE_BLOCKS if a second block follows, or the error of
                the block itself
            ParserError: If the counter or timing line is malformed
        """
        from srtspan.core.assembler import SubtitleIterator

        subtitles = SubtitleIterator(content)
        subtitle = next(subtitles, None)
        if subtitle is None:
            raise SubtitleError(
                SubtitleErrorKind.EMPTY_STRING, span=Span(0, len(content))
            )

        try:
            extra = next(subtitles, None)
        except SrtError as e:
            raise SubtitleError(
                SubtitleErrorKind.MULTIPLE_BLOCKS, span=e.span, detail=str(e)
            ) from e
        if extra is not None:
            raise SubtitleError(SubtitleErrorKind.MULTIPLE_BLOCKS, span=extra.text.span)
        return subtitle


@dataclass
class SubtitleTrack:
    """Collection of subtitles with unique counters."""

    entries: list[Subtitle]

    def __post_init__(self) -> None:
        """Reject subtitles that reuse a counter."""
        seen: set[int] = set()
        for entry in self.entries:
            if entry.counter in seen:
                raise SubtitleError(
                    SubtitleErrorKind.DUPLICATE_COUNTER,
                    span=entry.text.span,
                    detail=f"counter {entry.counter}",
                )
            seen.add(entry.counter)

    def __len__(self) -> int:
        """Return number of entries."""
        return len(self.entries)

    def __iter__(self):
        """Iterate over entries."""
        return iter(self.entries)

    def __getitem__(self, index: int) -> Subtitle:
        """Get entry by position (0-based)."""
        return self.entries[index]
