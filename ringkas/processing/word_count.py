"""Word counting used for the before/after statistics of a result."""

import math


def count_words(text: str | None) -> int:
    """Count whitespace-separated tokens; runs of whitespace count once."""
    if not text:
        return 0
    return len(text.split())


def reduction_percentage(original_words: int, summary_words: int) -> int:
    """Return ``100 * (1 - summary/original)`` rounded half up, 0 for empty originals."""
    if original_words <= 0:
        return 0
    return math.floor(100 - summary_words * 100 / original_words + 0.5)
