"""Subtitle records and their assembly from parser events."""

from srtspan.core.assembler import SubtitleIterator
from srtspan.core.subtitle import Subtitle, SubtitleTrack

__all__ = [
    "Subtitle",
    "SubtitleIterator",
    "SubtitleTrack",
]
