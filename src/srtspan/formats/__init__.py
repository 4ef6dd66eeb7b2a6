"""Document level parsing and serialization."""

from srtspan.formats.markup import ColorStyle, serialize_attribute, serialize_color
from srtspan.formats.srt import parse_srt, parse_srt_lenient, serialize_srt

__all__ = [
    "ColorStyle",
    "parse_srt",
    "parse_srt_lenient",
    "serialize_attribute",
    "serialize_color",
    "serialize_srt",
]
