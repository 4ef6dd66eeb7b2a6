"""Tag attributes such as ``color="#AABBCC"``."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from srtspan.errors import ColorError, ParseAttributeError
from srtspan.text.color import Color, parse_color
from srtspan.utils.spanned import SpannedStr
from srtspan.utils.split import DEFAULT_QUOTES, SplitIter

# Attributes are separated by unquoted whitespace.
_ATTRIBUTE_SEPARATORS = (" ", "\t")


def remove_quotes(value: SpannedStr) -> SpannedStr:
    """Remove matching single or double quotes around ``value``.

    Unquoted values are returned unchanged.

    Raises:
        ParseAttributeError: If the value starts or ends with a quote that is
            not matched on the other side
    """
    for quote in DEFAULT_QUOTES:
        inner = value.strip_delimiters(quote, quote)
        if inner is not None:
            return inner
    if value.value[:1] in DEFAULT_QUOTES or value.value[-1:] in DEFAULT_QUOTES:
        raise ParseAttributeError.invalid_quote(value.resolved_span())
    return value


@dataclass(frozen=True)
class Attribute:
    """A single ``name`` or ``name=value`` attribute."""

    name: SpannedStr
    value: SpannedStr | None = None

    @classmethod
    def new(cls, name: str, value: str | None = None) -> Attribute:
        """Build an attribute that is not located in any source text."""
        return cls(SpannedStr(name), SpannedStr(value) if value is not None else None)

    @classmethod
    def parse(cls, text: SpannedStr | str) -> Attribute:
        """Parse ``name``, ``name=value``, ``name="value"`` or ``name='value'``.

        Raises:
            ParseAttributeError: If the value is quoted inconsistently
        """
        if isinstance(text, str):
            text = SpannedStr(text)
        name, value = text.split_once("=")
        if value is None:
            # The value, along with the "=", may be omitted altogether.
            return cls(name)
        return cls(name, remove_quotes(value))

    def color(self) -> Color:
        """Interpret the value as a color.

        Raises:
            ColorError: If there is no value or it is not a valid color
        """
        if self.value is None:
            raise ColorError.invalid_format(self.name.resolved_span())
        return parse_color(self.value)


class LazyAttributesIter(Iterator[Attribute]):
    """Parse attributes one at a time as they are pulled.

    A malformed attribute raises from ``__next__``; the following attributes
    can still be pulled afterwards.
    """

    def __init__(self, text: SpannedStr) -> None:
        self._pieces = SplitIter(text, _ATTRIBUTE_SEPARATORS)

    def __next__(self) -> Attribute:
        for piece in self._pieces:
            if piece.value:
                return Attribute.parse(piece)
        raise StopIteration


@dataclass(frozen=True)
class Attributes:
    """The raw attribute part of a tag, parsed on demand."""

    raw: SpannedStr

    @classmethod
    def at(cls, text: str, start: int) -> Attributes:
        return cls(SpannedStr.at(text, start))

    def attributes(self) -> LazyAttributesIter:
        return LazyAttributesIter(self.raw)

    def get(self, name: str) -> Attribute | None:
        """Return the first attribute called ``name``.

        Raises:
            ParseAttributeError: If an attribute before the match is malformed
        """
        for attribute in self.attributes():
            if attribute.name.value == name:
                return attribute
        return None
