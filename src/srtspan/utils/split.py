"""Lazy splitting iterators that keep absolute source offsets.

The pieces produced here always carry spans relative to the original
document, not to the string that was split.
"""

from __future__ import annotations

from collections.abc import Iterator

from srtspan.utils.spanned import SpannedStr

# A separator is a string or an ordered tuple of alternatives. When several
# alternatives match at the same position, the first one wins.
Separator = str | tuple[str, ...]

DEFAULT_QUOTES: tuple[str, ...] = ("'", '"')


def _alternatives(separator: Separator) -> tuple[str, ...]:
    alternatives = (separator,) if isinstance(separator, str) else tuple(separator)
    if not alternatives or not all(alternatives):
        raise ValueError("Separator must not be empty")
    return alternatives


def _find(
    haystack: str, position: int, alternatives: tuple[str, ...]
) -> tuple[int, int] | None:
    """Find the leftmost separator match at or after ``position``."""
    best: tuple[int, int] | None = None
    for alternative in alternatives:
        index = haystack.find(alternative, position)
        if index != -1 and (best is None or index < best[0]):
            best = (index, index + len(alternative))
    return best


class SplitIter(Iterator[SpannedStr]):
    """Split a spanned string on a separator.

    A string with ``k`` separators yields ``k + 1`` pieces; separators at the
    boundaries or next to each other produce empty pieces. With
    ``allow_trailing_empty=False`` a final empty piece is dropped, which is how
    line terminators behave.

    When ``quotes`` is non-empty, a separator is only accepted if none of the
    quote characters is open between the start of the current piece and the
    separator. Each quote character toggles independently. The toggle state is
    reset at every accepted separator.
    """

    def __init__(
        self,
        text: SpannedStr,
        separator: Separator,
        *,
        quotes: tuple[str, ...] = DEFAULT_QUOTES,
        allow_trailing_empty: bool = True,
    ) -> None:
        self._haystack = text.value
        self._base = text.resolved_span().start
        self._alternatives = _alternatives(separator)
        self._allow_trailing_empty = allow_trailing_empty
        self._start = 0
        self._search = 0
        self._finished = False
        self._scanned = 0
        self._open = dict.fromkeys(quotes, False)

    @property
    def offset(self) -> int:
        """Absolute position right after the last consumed piece and separator."""
        return self._base + self._start

    def remainder(self) -> SpannedStr:
        """Return the part of the input that has not been yielded yet."""
        return SpannedStr.at(self._haystack[self._start :], self.offset)

    def take_rest(self) -> SpannedStr | None:
        """Yield everything that is left as a single, final piece."""
        if self._finished:
            return None
        self._finished = True
        start = self._start
        self._start = len(self._haystack)
        if start == len(self._haystack) and not self._allow_trailing_empty:
            return None
        return SpannedStr.at(self._haystack[start:], self._base + start)

    def __next__(self) -> SpannedStr:
        if self._finished:
            raise StopIteration
        found = self._next_match()
        if found is None:
            rest = self.take_rest()
            if rest is None:
                raise StopIteration
            return rest

        begin, end = found
        piece = SpannedStr.at(
            self._haystack[self._start : begin], self._base + self._start
        )
        self._start = self._search = self._scanned = end
        for quote in self._open:
            self._open[quote] = False
        return piece

    def _next_match(self) -> tuple[int, int] | None:
        while True:
            found = _find(self._haystack, self._search, self._alternatives)
            if found is None:
                return None
            begin, end = found
            if not self._inside_quotes(begin):
                return found
            self._search = end

    def _inside_quotes(self, position: int) -> bool:
        if not self._open:
            return False
        for char in self._haystack[self._scanned : position]:
            if char in self._open:
                self._open[char] = not self._open[char]
        self._scanned = position
        return any(self._open.values())


class SplitIterN(Iterator[SpannedStr]):
    """Split into at most ``n`` pieces, the last one holding the unsplit rest."""

    def __init__(
        self,
        text: SpannedStr,
        separator: Separator,
        n: int,
        *,
        quotes: tuple[str, ...] = DEFAULT_QUOTES,
    ) -> None:
        if n < 0:
            raise ValueError(f"Piece count must not be negative, got {n}")
        self._iterator = SplitIter(text, separator, quotes=quotes)
        self._remaining = n

    def __next__(self) -> SpannedStr:
        if self._remaining == 0:
            raise StopIteration
        self._remaining -= 1
        if self._remaining == 0:
            rest = self._iterator.take_rest()
            if rest is None:
                raise StopIteration
            return rest
        return next(self._iterator)
