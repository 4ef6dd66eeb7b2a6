"""Unit tests for markup serializers."""

import pytest

from srtspan.formats.markup import ColorStyle, serialize_attribute, serialize_color
from srtspan.text.attributes import Attribute
from srtspan.text.color import ColorName, Rgb, parse_color


class TestSerializeColor:
    """Test cases for serialize_color."""

    def test_default_is_lower_hex(self):
        """Should default to lowercase hex notation."""
        assert serialize_color(Rgb(0xAA, 0xBB, 0x0C)) == "#aabb0c"

    @pytest.mark.parametrize(
        ("style", "expected"),
        [
            (ColorStyle.LOWER_HEX, "#ff0001"),
            (ColorStyle.UPPER_HEX, "#FF0001"),
            (ColorStyle.RGB, "rgb(255, 0, 1)"),
        ],
    )
    def test_styles(self, style, expected):
        """Should render each notation."""
        assert serialize_color(Rgb(255, 0, 1), style) == expected

    def test_name_is_verbatim(self):
        """Should write names unchanged in every style."""
        assert serialize_color(ColorName("Red"), ColorStyle.RGB) == "Red"

    def test_output_parses_back(self):
        """Should produce text parse_color accepts."""
        color = Rgb(1, 2, 3)

        for style in ColorStyle:
            assert parse_color(serialize_color(color, style)) == color


class TestSerializeAttribute:
    """Test cases for serialize_attribute."""

    @pytest.mark.parametrize(
        ("name", "value", "expected"),
        [
            ("checked", None, "checked"),
            ("color", "#AABBCC", "color=#AABBCC"),
            ("face", "Times New Roman", 'face="Times New Roman"'),
            ("title", "it's", "title=\"it's\""),
            ("title", 'say "hi"', "title='say \"hi\"'"),
            ("title", "a\"b'c", "title='a\"b'c'"),
            ("expr", "a=b", 'expr="a=b"'),
            ("tick", "a`b", 'tick="a`b"'),
            ("angle", "<x>", 'angle="<x>"'),
            ("empty", "", "empty="),
        ],
    )
    def test_quoting(self, name, value, expected):
        """Should quote only when the value needs it."""
        assert serialize_attribute(Attribute.new(name, value)) == expected

    def test_parsed_attribute(self):
        """Should serialize an attribute read from markup."""
        attribute = Attribute.parse("face='Comic Sans'")

        assert serialize_attribute(attribute) == 'face="Comic Sans"'
