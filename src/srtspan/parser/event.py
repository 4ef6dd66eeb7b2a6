"""Events emitted by the line level parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from srtspan.text.text import Text
from srtspan.utils.span import Span


@dataclass(frozen=True)
class CounterEvent:
    """The sequence number line of a block."""

    index: int
    span: Span | None = field(default=None, compare=False)


@dataclass(frozen=True)
class DurationEvent:
    """The ``start --> end`` timing line of a block."""

    start: timedelta
    end: timedelta
    span: Span | None = field(default=None, compare=False)


@dataclass(frozen=True)
class TextEvent:
    """All caption lines of a block, joined by their original newlines."""

    text: Text


@dataclass(frozen=True)
class EmptyEvent:
    """A blank line, which closes the current block."""


Event = CounterEvent | DurationEvent | TextEvent | EmptyEvent
