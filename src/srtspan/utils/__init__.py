"""Utility modules."""

from srtspan.utils.config import Settings, get_settings
from srtspan.utils.lines import LINE_TERMINATORS, Lines
from srtspan.utils.logging import setup_logging
from srtspan.utils.span import Span
from srtspan.utils.spanned import Spanned, SpannedStr
from srtspan.utils.split import DEFAULT_QUOTES, Separator, SplitIter, SplitIterN

__all__ = [
    "DEFAULT_QUOTES",
    "LINE_TERMINATORS",
    "Lines",
    "Separator",
    "Settings",
    "Span",
    "Spanned",
    "SpannedStr",
    "SplitIter",
    "SplitIterN",
    "get_settings",
    "setup_logging",
]
