"""Integration tests parsing a Chinese document end to end."""

from datetime import timedelta

import pytest

from srtspan.core.assembler import SubtitleIterator
from srtspan.core.subtitle import Subtitle
from srtspan.formats.srt import parse_srt, serialize_srt
from srtspan.text.text import Text
from srtspan.utils.span import Span

pytestmark = pytest.mark.integration


def located(source: str, text: str) -> Text:
    """Return ``text`` tagged with its position in ``source``."""
    return Text.at(text, source.index(text))


class TestChineseSubtitle:
    """Test cases for a document with CJK captions."""

    def test_first_subtitles(self, chinese_subtitle):
        """Should yield records with code point offsets into the source."""
        subtitles = SubtitleIterator(chinese_subtitle)

        assert next(subtitles) == Subtitle(
            1,
            timedelta(milliseconds=1300),
            timedelta(milliseconds=8240 - 1300),
            located(chinese_subtitle, "今天录制了专辑的第三首歌「Fluegel」"),
        )
        assert next(subtitles) == Subtitle(
            2,
            timedelta(milliseconds=8240),
            timedelta(milliseconds=12400 - 8240),
            located(chinese_subtitle, "非常高卡路里的一首歌"),
        )

    def test_all_blocks(self, chinese_subtitle):
        """Should parse every block including quoted captions."""
        track = parse_srt(chinese_subtitle)

        assert [s.counter for s in track] == [1, 2, 3, 9, 11, 12, 16]
        assert track[5].text.as_raw() == '这里还有"人类"，"简单"，"真实体验"之类的'
        assert track[6].end == timedelta(minutes=1, seconds=10, milliseconds=700)

    def test_spans_slice_the_source(self, chinese_subtitle):
        """Should produce spans that slice the original string."""
        for subtitle in SubtitleIterator(chinese_subtitle):
            span = subtitle.text.span
            assert chinese_subtitle[span.as_slice()] == subtitle.text.as_raw()

    def test_byte_offsets(self, chinese_subtitle):
        """Should convert code point spans to UTF-8 byte spans."""
        subtitle = next(SubtitleIterator(chinese_subtitle))
        encoded = chinese_subtitle.encode("utf-8")

        byte_span = subtitle.text.span.to_bytes(chinese_subtitle)

        assert encoded[byte_span.as_slice()].decode("utf-8") == subtitle.text.as_raw()
        assert byte_span != subtitle.text.span
        assert subtitle.text.span == Span(33, 21)

    def test_serialize_drops_leading_padding(self, chinese_subtitle):
        """Should serialize without the leading blank line."""
        result = serialize_srt(parse_srt(chinese_subtitle))

        assert result == chinese_subtitle.lstrip("\n").removesuffix("\n")
