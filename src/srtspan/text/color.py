"""Color values used in ``<font color=...>`` attributes."""

from __future__ import annotations

from dataclasses import dataclass

from srtspan.errors import ColorError
from srtspan.utils.spanned import SpannedStr

_CHANNEL_MAX = 255


@dataclass(frozen=True)
class Rgb:
    """Color given by its red, green and blue channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= _CHANNEL_MAX:
                raise ValueError(f"Color channel must be in 0..255, got {channel}")


@dataclass(frozen=True)
class ColorName:
    """Color given by name, e.g. ``red``; stored verbatim."""

    name: str


Color = Rgb | ColorName


def _parse_channel(text: SpannedStr | None, radix: int, whole: SpannedStr) -> int:
    if text is None:
        raise ColorError.invalid_format(whole.resolved_span())
    try:
        value = text.parse_unsigned(radix)
    except ValueError as e:
        raise ColorError.parse_int(text.resolved_span(), detail=str(e)) from e
    if value > _CHANNEL_MAX:
        raise ColorError.parse_int(
            text.resolved_span(), detail="number too large to fit in a color channel"
        )
    return value


def parse_color(text: SpannedStr | str) -> Color:
    """Parse ``#RRGGBB``, ``rgb(r, g, b)`` or a color name.

    Args:
        text: Attribute value, optionally carrying its source span

    Returns:
        Rgb for the hex and rgb() notations, ColorName otherwise

    Raises:
        ColorError: If a hex or rgb() value is malformed; the span points at
            the offending channel where possible
    """
    if isinstance(text, str):
        text = SpannedStr(text)

    if text.startswith("#"):
        if len(text) != 7:
            raise ColorError.invalid_format(text.resolved_span())
        red, green, blue = (
            _parse_channel(text.get(index, index + 2), 16, text)
            for index in (1, 3, 5)
        )
        return Rgb(red, green, blue)

    if text.startswith("rgb"):
        rest = text.get(3)
        inner = rest.strip_delimiters("(", ")") if rest is not None else None
        if inner is None:
            raise ColorError.invalid_rgb_string(text.resolved_span())
        fields = list(inner.split(","))
        if len(fields) != 3:
            raise ColorError.invalid_format(inner.resolved_span())
        red, green, blue = (_parse_channel(field.trim(), 10, text) for field in fields)
        return Rgb(red, green, blue)

    return ColorName(text.value)
