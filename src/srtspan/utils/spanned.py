"""Values tagged with the location they were parsed from."""

from __future__ import annotations

from collections.abc import Callable, Sized
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Generic, Self, TypeVar

from srtspan.utils.span import Span

if TYPE_CHECKING:
    from srtspan.utils.split import Separator, SplitIter

T = TypeVar("T")
U = TypeVar("U")

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True)
class Spanned(Generic[T]):
    """A value paired with the optional span it was read from."""

    value: T
    span: Span | None = None

    def with_span(self, span: Span) -> Self:
        return replace(self, span=span)

    def map(self, func: Callable[[T], U]) -> Spanned[U]:
        """Relabel the value; the span is carried along unchanged."""
        return Spanned(func(self.value), self.span)

    def map_with_span(
        self, func: Callable[[T, Span | None], tuple[U, Span | None]]
    ) -> Spanned[U]:
        """Transform value and span together, e.g. for operations that move text."""
        value, span = func(self.value, self.span)
        return Spanned(value, span)

    def map_span(self, func: Callable[[Span | None], Span | None]) -> Self:
        return replace(self, span=func(self.span))

    def resolved_span(self) -> Span:
        """Return the span, deriving ``0..len(value)`` when none was recorded.

        Raises:
            TypeError: If there is no span and the value has no length
        """
        if self.span is not None:
            return self.span
        if not isinstance(self.value, Sized):
            raise TypeError(
                f"Cannot derive a span for {type(self.value).__name__} values"
            )
        return Span(0, len(self.value))

    def into_parts(self) -> tuple[T, Span]:
        return self.value, self.resolved_span()


@dataclass(frozen=True)
class SpannedStr(Spanned[str]):
    """A piece of the source text together with its absolute location.

    Every narrowing operation (``get``, ``trim``, the split family) returns a
    new ``SpannedStr`` whose span is narrowed by exactly the same amount, so
    ``source[piece.span.as_slice()] == piece.value`` holds for every piece
    derived from ``source``.
    """

    def __post_init__(self) -> None:
        if self.span is not None and self.span.length != len(self.value):
            raise ValueError(
                f"Span {self.span!r} does not match string of length {len(self.value)}"
            )

    @classmethod
    def at(cls, value: str, start: int) -> Self:
        """Tag ``value`` as found at ``start`` in the source."""
        return cls(value, Span(start, len(value)))

    @property
    def start(self) -> int:
        return self.resolved_span().start

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def startswith(self, prefix: str) -> bool:
        return self.value.startswith(prefix)

    def endswith(self, suffix: str) -> bool:
        return self.value.endswith(suffix)

    def get(self, start: int, stop: int | None = None) -> SpannedStr | None:
        """Slice by positions relative to this string.

        Returns:
            The sub-string with its absolute span, or None if out of bounds
        """
        if stop is None:
            stop = len(self.value)
        if start < 0 or start > stop or stop > len(self.value):
            return None
        span = self.resolved_span().sub_span(Span.from_range(start, stop))
        if span is None:
            return None
        return SpannedStr(self.value[start:stop], span)

    def trim(self) -> SpannedStr:
        """Strip surrounding whitespace, moving the span with the content."""
        stripped = self.value.strip()
        if not stripped:
            return self.substring(0, 0)
        leading = len(self.value) - len(self.value.lstrip())
        return self.substring(leading, leading + len(stripped))

    def strip_delimiters(self, opening: str, closing: str) -> SpannedStr | None:
        """Remove an enclosing ``opening``/``closing`` pair.

        Returns:
            The enclosed content, or None if the pair is not present
        """
        if len(self.value) < len(opening) + len(closing):
            return None
        if not (self.value.startswith(opening) and self.value.endswith(closing)):
            return None
        return self.substring(len(opening), len(self.value) - len(closing))

    def split(
        self, separator: Separator, *, quotes: tuple[str, ...] | None = None
    ) -> SplitIter:
        """Lazily split on ``separator``, ignoring separators inside quotes."""
        from srtspan.utils.split import DEFAULT_QUOTES, SplitIter

        return SplitIter(
            self, separator, quotes=DEFAULT_QUOTES if quotes is None else quotes
        )

    def split_at_most(
        self,
        separator: Separator,
        n: int,
        *,
        quotes: tuple[str, ...] | None = None,
    ) -> list[SpannedStr]:
        """Split into at most ``n`` pieces; the last one keeps the remainder."""
        from srtspan.utils.split import DEFAULT_QUOTES, SplitIterN

        return list(
            SplitIterN(
                self,
                separator,
                n,
                quotes=DEFAULT_QUOTES if quotes is None else quotes,
            )
        )

    def split_once(
        self, separator: Separator, *, quotes: tuple[str, ...] | None = None
    ) -> tuple[SpannedStr, SpannedStr | None]:
        pieces = self.split_at_most(separator, 2, quotes=quotes)
        if len(pieces) == 1:
            return pieces[0], None
        return pieces[0], pieces[1]

    def split_terminator(self, separator: Separator) -> SplitIter:
        """Split on ``separator`` without yielding a trailing empty piece."""
        from srtspan.utils.split import SplitIter

        return SplitIter(self, separator, quotes=(), allow_trailing_empty=False)

    def parse_unsigned(self, radix: int = 10) -> int:
        """Parse the whole string as an unsigned integer of any width.

        Raises:
            ValueError: If the string is empty or contains a non-digit
        """
        if not self.value:
            raise ValueError("cannot parse integer from empty string")
        allowed = set(_DIGITS[:radix])
        if any(char.lower() not in allowed for char in self.value):
            raise ValueError(f"invalid digit found in {self.value!r}")
        return int(self.value, radix)

    def substring(self, start: int, stop: int) -> SpannedStr:
        """Like ``get`` but raises IndexError when out of bounds."""
        piece = self.get(start, stop)
        if piece is None:
            raise IndexError(f"{start}..{stop} is outside of {self.resolved_span()!r}")
        return piece
