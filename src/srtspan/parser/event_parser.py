"""Line by line SRT event parser."""

from __future__ import annotations

from collections.abc import Iterator

from srtspan.errors import ParserError
from srtspan.parser.duration import parse_duration
from srtspan.parser.event import (
    CounterEvent,
    DurationEvent,
    EmptyEvent,
    Event,
    TextEvent,
)
from srtspan.parser.state import ParserState
from srtspan.text.text import Text
from srtspan.utils.lines import Lines
from srtspan.utils.spanned import SpannedStr

TIMING_SEPARATOR = " --> "


class EventParser(Iterator[Event]):
    """Turn SRT source into a stream of counter, duration, text and empty events.

    Each call to ``next`` reads as many lines as one event needs. Errors are
    raised from ``__next__`` after the state has already moved on, so the
    parser can be pulled again to continue with the following line. Once the
    input is exhausted the parser stays exhausted.
    """

    def __init__(self, content: str | SpannedStr) -> None:
        self._lines = Lines(content)
        self._state = ParserState.COUNTER
        self._finished = False

    @property
    def state(self) -> ParserState:
        return self._state

    def __next__(self) -> Event:
        if self._finished:
            raise StopIteration

        match self._state:
            case ParserState.COUNTER:
                event = self._read_counter()
            case ParserState.DURATION:
                event = self._read_duration()
            case ParserState.TEXT:
                event = self._read_text()
            case ParserState.EMPTY:
                self._state = self._state.advance()
                event = EmptyEvent()

        if event is None:
            self._finished = True
            raise StopIteration
        return event

    def _next_line(self) -> SpannedStr | None:
        return next(self._lines, None)

    def _read_counter(self) -> Event | None:
        line = self._next_line()
        if line is None:
            return None
        if not line.value:
            # Blank lines before a counter are padding.
            return EmptyEvent()

        self._state = self._state.advance()
        line = line.trim()
        try:
            index = line.parse_unsigned()
        except ValueError as e:
            raise ParserError.parse_int(line.resolved_span(), detail=str(e)) from e
        return CounterEvent(index, span=line.resolved_span())

    def _read_duration(self) -> Event | None:
        self._state = self._state.advance()
        line = self._next_line()
        if line is None:
            return None

        start, end = line.split_once(TIMING_SEPARATOR)
        if end is None:
            raise ParserError.invalid_duration(line.resolved_span())
        return DurationEvent(
            parse_duration(start),
            parse_duration(end),
            span=line.resolved_span(),
        )

    def _read_text(self) -> Event | None:
        self._state = ParserState.EMPTY
        start = self._lines.offset
        end: int | None = None

        for line in self._lines:
            if not line.value:
                if end is None:
                    # The block ended before any caption line.
                    self._state = ParserState.COUNTER
                    return EmptyEvent()
                break
            end = line.resolved_span().end

        if end is None:
            return None
        text = self._lines.get(start, end)
        if text is None:
            raise IndexError(f"{start}..{end} is outside of the parsed input")
        return TextEvent(Text(text.value, text.span))
