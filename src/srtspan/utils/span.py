"""Half-open ranges pointing into the parsed source text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Span:
    """Range ``start..start + length`` inside a source string.

    Offsets count code points of the Python ``str`` handed to the parser.
    Use :meth:`to_bytes` for the equivalent range in the encoded source.

    Raises:
        ValueError: If ``start`` or ``length`` is negative
    """

    start: int
    length: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.length < 0:
            raise ValueError(
                f"Span must not be negative, got start={self.start} "
                f"length={self.length}"
            )

    @classmethod
    def from_range(cls, start: int, end: int) -> Span:
        """Build a span from a half-open ``start..end`` range.

        Raises:
            ValueError: If ``start`` is after ``end``
        """
        if start > end:
            raise ValueError(f"Span start {start} must not be after end {end}")
        return cls(start, end - start)

    @classmethod
    def from_inclusive(cls, first: int, last: int) -> Span:
        """Build a span from an inclusive ``first..=last`` range."""
        return cls.from_range(first, last + 1)

    @property
    def end(self) -> int:
        return self.start + self.length

    def shift(self, offset: int) -> Span:
        """Translate the span by ``offset`` positions."""
        return Span.from_range(self.start + offset, self.end + offset)

    def __add__(self, offset: object) -> Span:
        if not isinstance(offset, int):
            return NotImplemented
        return self.shift(offset)

    def sub_span(self, child: Span) -> Span | None:
        """Map ``child``, relative to this span's start, into absolute positions.

        Returns:
            The absolute span, or None if ``child`` does not fit inside this span
        """
        if child.start > self.length or child.length > self.length - child.start:
            return None
        return Span(self.start + child.start, child.length)

    def as_slice(self) -> slice:
        return slice(self.start, self.end)

    def to_bytes(self, source: str, encoding: str = "utf-8") -> Span:
        """Convert this span over ``source`` into a span over its encoded bytes."""
        start = len(source[: self.start].encode(encoding))
        length = len(source[self.start : self.end].encode(encoding))
        return Span(start, length)

    def __repr__(self) -> str:
        return f"Span({self.start}..{self.end})"
