"""Parsed inline tags: ``<b>``, ``</i>``, ``{font color=red}``..."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Self

from srtspan.errors import ParseTagError
from srtspan.text.attributes import Attributes
from srtspan.utils.span import Span
from srtspan.utils.spanned import SpannedStr


class TagKind(StrEnum):
    """Bracket style a tag is written in."""

    ANGULAR = "angular"
    BRACED = "braced"

    @property
    def brackets(self) -> tuple[str, str]:
        if self is TagKind.ANGULAR:
            return "<", ">"
        return "{", "}"


@dataclass(frozen=True)
class ParsedTag:
    """An opening or closing tag with its optional raw attributes.

    Attributes:
        name: Tag name, e.g. ``b`` or ``font``
        kind: Bracket style
        is_open: False for ``</name>`` tags
        attributes: Everything after the first unquoted space, unparsed
        span: Location of the whole tag including brackets
        name_span: Location of the name alone
    """

    name: str
    kind: TagKind = TagKind.ANGULAR
    is_open: bool = True
    attributes: Attributes | None = None
    span: Span | None = field(default=None, compare=False)
    name_span: Span | None = field(default=None, compare=False)

    @classmethod
    def opening(
        cls,
        name: str,
        kind: TagKind = TagKind.ANGULAR,
        attributes: Attributes | None = None,
    ) -> Self:
        return cls(name, kind, True, attributes)

    @classmethod
    def closing(
        cls,
        name: str,
        kind: TagKind = TagKind.ANGULAR,
        attributes: Attributes | None = None,
    ) -> Self:
        return cls(name, kind, False, attributes)

    @classmethod
    def bold(cls, kind: TagKind = TagKind.ANGULAR, *, is_open: bool = True) -> Self:
        return cls("b", kind, is_open)

    @classmethod
    def italic(cls, kind: TagKind = TagKind.ANGULAR, *, is_open: bool = True) -> Self:
        return cls("i", kind, is_open)

    @classmethod
    def underline(
        cls, kind: TagKind = TagKind.ANGULAR, *, is_open: bool = True
    ) -> Self:
        return cls("u", kind, is_open)

    @classmethod
    def parse(cls, text: SpannedStr | str) -> Self:
        """Parse a complete tag such as ``<font color="red">`` or ``{/b}``.

        Args:
            text: The tag including its brackets

        Returns:
            The parsed tag; ``span`` is the location of ``text``

        Raises:
            ParseTagError: If ``text`` is not enclosed in ``<>`` or ``{}``
        """
        if isinstance(text, str):
            text = SpannedStr(text)

        for kind in TagKind:
            inner = text.strip_delimiters(*kind.brackets)
            if inner is not None:
                break
        else:
            raise ParseTagError.missing_brackets(text.resolved_span())

        is_open = not inner.startswith("/")
        if not is_open:
            inner = inner.substring(1, len(inner))

        name, rest = inner.split_once(" ")
        attributes = Attributes(rest) if rest is not None else None
        return cls(
            name.value,
            kind,
            is_open,
            attributes,
            span=text.resolved_span(),
            name_span=name.resolved_span(),
        )

    def spanned_name(self) -> SpannedStr:
        return SpannedStr(self.name, self.name_span)

    def expect_open(self) -> Self:
        """Return the tag if it is an opening tag.

        Raises:
            ParseTagError: If the tag is a closing tag
        """
        if not self.is_open:
            raise ParseTagError.expected_open_tag(self.span)
        return self

    def expect_closed(self) -> Self:
        """Return the tag if it is a closing tag.

        Raises:
            ParseTagError: If the tag is an opening tag
        """
        if self.is_open:
            raise ParseTagError.expected_close_tag(self.span)
        return self
