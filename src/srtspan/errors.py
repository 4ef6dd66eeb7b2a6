"""Error hierarchy shared by every parsing stage."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from srtspan.utils.span import Span


class SrtError(ValueError):
    """Base error with a machine readable kind and the offending source range."""

    def __init__(
        self,
        kind: StrEnum,
        message: str,
        *,
        span: Span | None = None,
        detail: str | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.span = span
        self.detail = detail
        super().__init__(message)

    def __str__(self) -> str:
        text = self.message
        if self.detail:
            text = f"{text}: {self.detail}"
        if self.span is not None:
            text = f"{text} (at {self.span!r})"
        return text


class ParserErrorKind(StrEnum):
    """Failures of the line level SRT parser."""

    PARSE_INT = "parse_int"
    INVALID_DURATION = "invalid_duration"


class ParserError(SrtError):
    """Raised when a counter or timing line cannot be parsed."""

    @classmethod
    def parse_int(cls, span: Span, *, detail: str | None = None) -> ParserError:
        return cls(
            ParserErrorKind.PARSE_INT, "invalid integer", span=span, detail=detail
        )

    @classmethod
    def invalid_duration(cls, span: Span) -> ParserError:
        return cls(ParserErrorKind.INVALID_DURATION, "invalid duration", span=span)


class TagErrorKind(StrEnum):
    """Failures of the inline tag parser."""

    MISSING_BRACKETS = "missing_brackets"
    EXPECTED_OPEN_TAG = "expected_open_tag"
    EXPECTED_CLOSE_TAG = "expected_close_tag"


class ParseTagError(SrtError):
    """Raised when a bracketed tag has the wrong shape."""

    @classmethod
    def missing_brackets(cls, span: Span | None) -> ParseTagError:
        return cls(TagErrorKind.MISSING_BRACKETS, "missing brackets", span=span)

    @classmethod
    def expected_open_tag(cls, span: Span | None) -> ParseTagError:
        return cls(
            TagErrorKind.EXPECTED_OPEN_TAG,
            "expected open tag, found close tag",
            span=span,
        )

    @classmethod
    def expected_close_tag(cls, span: Span | None) -> ParseTagError:
        return cls(
            TagErrorKind.EXPECTED_CLOSE_TAG,
            "expected close tag, found open tag",
            span=span,
        )


class AttributeErrorKind(StrEnum):
    """Failures of the tag attribute parser."""

    INVALID_QUOTE = "invalid_quote"


class ParseAttributeError(SrtError):
    """Raised when an attribute value is not quoted consistently."""

    @classmethod
    def invalid_quote(cls, span: Span) -> ParseAttributeError:
        return cls(AttributeErrorKind.INVALID_QUOTE, "invalid quote", span=span)


class ColorErrorKind(StrEnum):
    """Failures of the color value parser."""

    PARSE_INT = "parse_int"
    INVALID_RGB_STRING = "invalid_rgb_string"
    INVALID_FORMAT = "invalid_format"


class ColorError(SrtError):
    """Raised when a color attribute value cannot be parsed."""

    @classmethod
    def parse_int(cls, span: Span, *, detail: str | None = None) -> ColorError:
        return cls(
            ColorErrorKind.PARSE_INT, "invalid integer", span=span, detail=detail
        )

    @classmethod
    def invalid_rgb_string(cls, span: Span) -> ColorError:
        return cls(ColorErrorKind.INVALID_RGB_STRING, "invalid rgb string", span=span)

    @classmethod
    def invalid_format(cls, span: Span) -> ColorError:
        return cls(ColorErrorKind.INVALID_FORMAT, "invalid format", span=span)


class SubtitleErrorKind(StrEnum):
    """Failures while assembling or validating subtitle records."""

    MISSING_COUNTER = "missing_counter"
    MISSING_DURATION = "missing_duration"
    MISSING_TEXT = "missing_text"
    INVALID_COUNTER = "invalid_counter"
    ZERO_DURATION = "zero_duration"
    NEGATIVE_DURATION = "negative_duration"
    EMPTY_TEXT = "empty_text"
    EMPTY_STRING = "empty_string"
    MULTIPLE_BLOCKS = "multiple_blocks"
    DUPLICATE_COUNTER = "duplicate_counter"


_SUBTITLE_MESSAGES: dict[SubtitleErrorKind, str] = {
    SubtitleErrorKind.MISSING_COUNTER: "missing counter",
    SubtitleErrorKind.MISSING_DURATION: "missing duration",
    SubtitleErrorKind.MISSING_TEXT: "missing text",
    SubtitleErrorKind.INVALID_COUNTER: "counter must not be negative",
    SubtitleErrorKind.ZERO_DURATION: "duration should not be `0s`",
    SubtitleErrorKind.NEGATIVE_DURATION: "end time is before start time",
    SubtitleErrorKind.EMPTY_TEXT: 'subtitle text is empty ("")',
    SubtitleErrorKind.EMPTY_STRING: "empty string",
    SubtitleErrorKind.MULTIPLE_BLOCKS: "expected a single subtitle block",
    SubtitleErrorKind.DUPLICATE_COUNTER: (
        "encountered multiple subtitles with the same counter"
    ),
}


class SubtitleError(SrtError):
    """Raised when a block does not form a valid subtitle."""

    def __init__(
        self,
        kind: SubtitleErrorKind,
        *,
        span: Span | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(kind, _SUBTITLE_MESSAGES[kind], span=span, detail=detail)
