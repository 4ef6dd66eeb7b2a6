"""Caption text and its inline token stream."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from srtspan.text.tags import ParsedTag
from srtspan.utils.spanned import SpannedStr
from srtspan.utils.split import DEFAULT_QUOTES

_CLOSERS = {"<": ">", "{": "}"}


class Text(SpannedStr):
    """The text lines of a subtitle, newlines included."""

    def as_raw(self) -> str:
        return self.value

    def tokens(self) -> TextIter:
        return TextIter(self)

    def __iter__(self) -> TextIter:
        return self.tokens()


@dataclass(frozen=True)
class InlineTag:
    tag: ParsedTag


@dataclass(frozen=True)
class InlineText:
    text: SpannedStr


Inline = InlineTag | InlineText


def _find_closer(value: str, position: int, closer: str) -> int | None:
    inside = dict.fromkeys(DEFAULT_QUOTES, False)
    for index in range(position, len(value)):
        char = value[index]
        if char == closer and not any(inside.values()):
            return index
        if char in inside:
            inside[char] = not inside[char]
    return None


def _next_opener(value: str, position: int) -> int:
    found = [value.find(opener, position) for opener in _CLOSERS]
    return min((index for index in found if index != -1), default=len(value))


class TextIter(Iterator[Inline]):
    """Split caption text into tags and the text between them.

    A tag opener without a matching closer is treated as plain text up to the
    end of the input. A tag that fails to parse raises from ``__next__``;
    iteration resumes after that tag.
    """

    def __init__(self, text: SpannedStr | str) -> None:
        if isinstance(text, str):
            text = SpannedStr(text)
        self._text = text
        self._position = 0

    def __next__(self) -> Inline:
        value = self._text.value
        start = self._position
        if start >= len(value):
            raise StopIteration

        closer = _CLOSERS.get(value[start])
        if closer is None:
            end = _next_opener(value, start + 1)
            self._position = end
            return InlineText(self._text.substring(start, end))

        end = _find_closer(value, start + 1, closer)
        if end is None:
            self._position = len(value)
            return InlineText(self._text.substring(start, len(value)))

        self._position = end + 1
        return InlineTag(ParsedTag.parse(self._text.substring(start, end + 1)))
