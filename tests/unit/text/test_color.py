"""Unit tests for color parsing."""

import pytest

from srtspan.errors import ColorError, ColorErrorKind
from srtspan.text.color import ColorName, Rgb, parse_color
from srtspan.utils.span import Span
from srtspan.utils.spanned import SpannedStr


class TestRgb:
    """Test cases for the Rgb value."""

    def test_channel_out_of_range_raises_error(self):
        """Should reject channels above 255."""
        with pytest.raises(ValueError, match="0..255"):
            Rgb(256, 0, 0)


class TestParseColor:
    """Test cases for parse_color."""

    def test_hex(self):
        """Should parse #RRGGBB in either case."""
        assert parse_color("#AABBCC") == Rgb(0xAA, 0xBB, 0xCC)
        assert parse_color("#aabbcc") == Rgb(0xAA, 0xBB, 0xCC)
        assert parse_color("#000000") == Rgb(0, 0, 0)

    def test_rgb(self):
        """Should parse rgb() with or without spaces."""
        assert parse_color("rgb(255, 255, 255)") == Rgb(255, 255, 255)
        assert parse_color("rgb(1,2,3)") == Rgb(1, 2, 3)

    def test_name(self):
        """Should keep anything else as a name."""
        assert parse_color("red") == ColorName("red")
        assert parse_color("") == ColorName("")

    def test_invalid_hex_digit(self):
        """Should point at the channel with the bad digit."""
        with pytest.raises(ColorError) as exc_info:
            parse_color("#GGFFFF")

        assert exc_info.value.kind is ColorErrorKind.PARSE_INT
        assert exc_info.value.span == Span(1, 2)

    def test_invalid_hex_digit_with_offset(self):
        """Should report absolute offsets for located values."""
        with pytest.raises(ColorError) as exc_info:
            parse_color(SpannedStr.at("#FFFFGG", 20))

        assert exc_info.value.span == Span(25, 2)

    @pytest.mark.parametrize("value", ["#FFF", "#FFFFFFF", "#"])
    def test_wrong_hex_length(self, value):
        """Should require exactly six hex digits."""
        with pytest.raises(ColorError) as exc_info:
            parse_color(value)

        assert exc_info.value.kind is ColorErrorKind.INVALID_FORMAT

    @pytest.mark.parametrize("value", ["rgb", "rgb(1, 2, 3", "rgb 1, 2, 3)"])
    def test_missing_parentheses(self, value):
        """Should reject rgb values without parentheses."""
        with pytest.raises(ColorError) as exc_info:
            parse_color(value)

        assert exc_info.value.kind is ColorErrorKind.INVALID_RGB_STRING

    @pytest.mark.parametrize("value", ["rgb(1, 2)", "rgb(1, 2, 3, 4)", "rgb()"])
    def test_wrong_field_count(self, value):
        """Should require exactly three fields."""
        with pytest.raises(ColorError) as exc_info:
            parse_color(value)

        assert exc_info.value.kind is ColorErrorKind.INVALID_FORMAT

    def test_invalid_rgb_field(self):
        """Should point at the trimmed field."""
        with pytest.raises(ColorError) as exc_info:
            parse_color("rgb(1,  x , 3)")

        assert exc_info.value.kind is ColorErrorKind.PARSE_INT
        assert exc_info.value.span == Span(8, 1)

    def test_rgb_channel_too_large(self):
        """Should reject decimal channels above 255."""
        with pytest.raises(ColorError) as exc_info:
            parse_color("rgb(1, 256, 3)")

        assert exc_info.value.kind is ColorErrorKind.PARSE_INT
        assert exc_info.value.span == Span(7, 3)
