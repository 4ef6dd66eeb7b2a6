"""States of the event parser."""

from enum import StrEnum


class ParserState(StrEnum):
    """What the event parser expects to read next."""

    COUNTER = "counter"
    DURATION = "duration"
    TEXT = "text"
    EMPTY = "empty"

    def advance(self) -> "ParserState":
        return _TRANSITIONS[self]


_TRANSITIONS = {
    ParserState.COUNTER: ParserState.DURATION,
    ParserState.DURATION: ParserState.TEXT,
    ParserState.TEXT: ParserState.COUNTER,
    ParserState.EMPTY: ParserState.COUNTER,
}
