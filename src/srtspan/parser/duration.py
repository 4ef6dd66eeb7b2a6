"""SRT timestamp parsing."""

from __future__ import annotations

from datetime import timedelta

from srtspan.errors import ParserError
from srtspan.utils.spanned import SpannedStr


def _parse_field(field: SpannedStr) -> int:
    try:
        return field.parse_unsigned()
    except ValueError as e:
        raise ParserError.parse_int(field.resolved_span(), detail=str(e)) from e


def parse_duration(text: SpannedStr | str) -> timedelta:
    """Parse a ``hours:minutes:seconds,milliseconds`` timestamp.

    Fields are unsigned decimal integers of any width and are not range
    checked, so ``999:99:99,999`` is accepted. Milliseconds are taken at face
    value: ``,5`` is 5 ms, not 500 ms.

    Args:
        text: Timestamp, optionally carrying its source span

    Returns:
        Offset from the start of the media

    Raises:
        ParserError: INVALID_DURATION if the separators are missing or the
            value is out of range, PARSE_INT if a field is not a number
    """
    if isinstance(text, str):
        text = SpannedStr(text)

    fields = text.split_at_most(":", 3)
    if len(fields) == 3:
        hours, minutes, rest = fields
        seconds, millis = rest.split_once(",")
        if millis is not None:
            values = [_parse_field(f) for f in (hours, minutes, seconds, millis)]
            try:
                return timedelta(
                    hours=values[0],
                    minutes=values[1],
                    seconds=values[2],
                    milliseconds=values[3],
                )
            except OverflowError as e:
                raise ParserError.invalid_duration(text.resolved_span()) from e

    raise ParserError.invalid_duration(text.resolved_span())
