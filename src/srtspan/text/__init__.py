"""Inline caption markup: tags, attributes and colors."""

from srtspan.text.attributes import Attribute, Attributes, LazyAttributesIter
from srtspan.text.color import Color, ColorName, Rgb, parse_color
from srtspan.text.tags import ParsedTag, TagKind
from srtspan.text.text import Inline, InlineTag, InlineText, Text, TextIter

__all__ = [
    "Attribute",
    "Attributes",
    "Color",
    "ColorName",
    "Inline",
    "InlineTag",
    "InlineText",
    "LazyAttributesIter",
    "ParsedTag",
    "Rgb",
    "TagKind",
    "Text",
    "TextIter",
    "parse_color",
]
