"""Line level SRT parsing."""

from srtspan.parser.duration import parse_duration
from srtspan.parser.event import (
    CounterEvent,
    DurationEvent,
    EmptyEvent,
    Event,
    TextEvent,
)
from srtspan.parser.event_parser import TIMING_SEPARATOR, EventParser
from srtspan.parser.state import ParserState

__all__ = [
    "TIMING_SEPARATOR",
    "CounterEvent",
    "DurationEvent",
    "EmptyEvent",
    "Event",
    "EventParser",
    "ParserState",
    "TextEvent",
    "parse_duration",
]
