"""Serializers for inline markup values."""

from enum import StrEnum

from srtspan.text.attributes import Attribute
from srtspan.text.color import Color, Rgb

# An attribute value may stay unquoted unless it contains one of these.
_NEEDS_QUOTES = frozenset(" '`=<>")


class ColorStyle(StrEnum):
    """Output notation for RGB colors."""

    LOWER_HEX = "lower_hex"
    UPPER_HEX = "upper_hex"
    RGB = "rgb"


def serialize_color(color: Color, style: ColorStyle = ColorStyle.LOWER_HEX) -> str:
    """Render a color as ``#aabbcc``, ``#AABBCC`` or ``rgb(r, g, b)``.

    Named colors are written verbatim regardless of ``style``.
    """
    if not isinstance(color, Rgb):
        return color.name
    match style:
        case ColorStyle.UPPER_HEX:
            return f"#{color.red:02X}{color.green:02X}{color.blue:02X}"
        case ColorStyle.RGB:
            return f"rgb({color.red}, {color.green}, {color.blue})"
        case _:
            return f"#{color.red:02x}{color.green:02x}{color.blue:02x}"


def serialize_attribute(attribute: Attribute) -> str:
    """Render ``name`` or ``name=value``, quoting the value when needed.

    Values containing a double quote are wrapped in single quotes.
    """
    name = attribute.name.value
    if attribute.value is None:
        return name

    value = attribute.value.value
    quote = ""
    if '"' in value:
        quote = "'"
    elif _NEEDS_QUOTES.intersection(value):
        quote = '"'
    return f"{name}={quote}{value}{quote}"
