"""Fold parser events into subtitles."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import timedelta

from srtspan.core.subtitle import Subtitle
from srtspan.errors import ParserError, SubtitleError, SubtitleErrorKind
from srtspan.parser.event import CounterEvent, DurationEvent, EmptyEvent, TextEvent
from srtspan.parser.event_parser import EventParser
from srtspan.text.text import Text
from srtspan.utils.span import Span
from srtspan.utils.spanned import SpannedStr


class _Block:
    """Parts of the block currently being read."""

    def __init__(self) -> None:
        self.counter: int | None = None
        self.timing: tuple[timedelta, timedelta] | None = None
        self.text: Text | None = None
        self.spans: list[Span] = []

    def is_empty(self) -> bool:
        return self.counter is None and self.timing is None and self.text is None

    def span(self) -> Span | None:
        if not self.spans:
            return None
        return Span.from_range(
            min(span.start for span in self.spans), max(span.end for span in self.spans)
        )

    def missing(self) -> SubtitleError:
        if self.counter is None:
            kind = SubtitleErrorKind.MISSING_COUNTER
        elif self.timing is None:
            kind = SubtitleErrorKind.MISSING_DURATION
        else:
            kind = SubtitleErrorKind.MISSING_TEXT
        return SubtitleError(kind, span=self.span())

    def build(self) -> Subtitle:
        if self.counter is None or self.timing is None or self.text is None:
            raise self.missing()
        start, end = self.timing
        try:
            return Subtitle(self.counter, start, end - start, self.text)
        except SubtitleError as e:
            raise SubtitleError(e.kind, span=self.span(), detail=e.detail) from e


class SubtitleIterator(Iterator[Subtitle]):
    """Yield one subtitle per blank line delimited block.

    A malformed block raises from ``__next__``. The rest of that block is
    skipped on the following pull, so one broken block costs one error and
    parsing resumes at the next block.
    """

    def __init__(self, content: str | SpannedStr) -> None:
        self._events = EventParser(content)
        self._skip_block = False
        self._finished = False

    def __next__(self) -> Subtitle:
        if self._finished:
            raise StopIteration

        block = _Block()
        while True:
            try:
                event = next(self._events, None)
            except ParserError:
                if self._skip_block:
                    # The block already reported its first error.
                    continue
                self._skip_block = True
                raise

            if event is None:
                self._finished = True
                if not block.is_empty():
                    raise block.missing()
                raise StopIteration

            if self._skip_block:
                if isinstance(event, EmptyEvent):
                    self._skip_block = False
                continue

            match event:
                case CounterEvent(index=index, span=span):
                    block.counter = index
                    if span is not None:
                        block.spans.append(span)
                case DurationEvent(start=start, end=end, span=span):
                    block.timing = (start, end)
                    if span is not None:
                        block.spans.append(span)
                case TextEvent(text=text):
                    block.text = text
                    block.spans.append(text.resolved_span())
                case EmptyEvent():
                    if block.is_empty():
                        # Padding between blocks.
                        continue
                    return block.build()
