"""Line iterator tracking absolute line offsets."""

from __future__ import annotations

from collections.abc import Iterator

from srtspan.utils.spanned import SpannedStr
from srtspan.utils.split import SplitIter

# "\r\n" is tried first so a CRLF pair is consumed as one terminator.
LINE_TERMINATORS: tuple[str, ...] = ("\r\n", "\n")


class Lines(Iterator[SpannedStr]):
    """Yield the lines of a text without their terminators.

    A text ending in a terminator does not produce a trailing empty line.
    """

    def __init__(self, text: str | SpannedStr) -> None:
        if isinstance(text, str):
            text = SpannedStr(text)
        self._text = text
        self._iterator: SplitIter = text.split_terminator(LINE_TERMINATORS)

    @property
    def offset(self) -> int:
        """Absolute position right after the most recently returned line."""
        return self._iterator.offset

    def get(self, start: int, end: int) -> SpannedStr | None:
        """Slice the underlying text by absolute positions."""
        base = self._text.start
        if start < base:
            return None
        return self._text.get(start - base, end - base)

    def __next__(self) -> SpannedStr:
        return next(self._iterator)
