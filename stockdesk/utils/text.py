"""Text utilities for blog posts: word counts and read time estimates."""

from __future__ import annotations

import math
from typing import Any

WORDS_PER_MINUTE = 200
DEFAULT_READ_TIME = 5


def word_count(text: str) -> int:
    return len(text.split())


def estimate_read_time(content: Any) -> int:
    """Minutes needed to read ``content`` at 200 words per minute.

    Falls back to 5 minutes when content is missing, not a string,
    or has no words.
    """
    if not isinstance(content, str):
        return DEFAULT_READ_TIME
    minutes = math.ceil(word_count(content) / WORDS_PER_MINUTE)
    return minutes or DEFAULT_READ_TIME
