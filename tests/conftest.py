"""Pytest configuration and shared fixtures."""

import pytest

from srtspan.utils.config import get_settings


@pytest.fixture
def sample_srt_content() -> str:
    """Return sample SRT content for testing."""
    return """1
00:00:01,000 --> 00:00:04,000
Hello, this is a test.

2
00:00:05,000 --> 00:00:08,000
This is the second subtitle.

3
00:00:09,000 --> 00:00:12,000
And this is the third one.
"""


@pytest.fixture
def single_block() -> str:
    """Return a single block followed by a blank line."""
    return "1\n00:00:06,500 --> 00:00:09,000\nSingle line of Text\n\n"


@pytest.fixture
def clear_settings_cache():
    """Clear settings cache before and after a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
