"""Text normalization and numeric helpers shared by the scoring pipeline."""

import math
import re

_WHITESPACE_RE = re.compile(r"\s+")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")
_INLINE_SPACE_RE = re.compile(r"[ \t]{2,}")


def normalize_text(text: str) -> str:
    """Lowercase text and collapse every whitespace run to a single space."""
    return _WHITESPACE_RE.sub(" ", text.lower()).strip()


def clean_text(text: str) -> str:
    """Tidy extracted document text while keeping paragraph breaks."""
    text = _EXCESS_NEWLINES_RE.sub("\n\n", text)
    text = _INLINE_SPACE_RE.sub(" ", text)
    return text.strip()


def word_count(text: str) -> int:
    return len(text.split())


def estimate_pages(text: str) -> int:
    """Roughly 500 words per page."""
    return math.ceil(word_count(text) / 500)


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    """Bound a score to [low, high]. All scorer bonuses and penalties go through here."""
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))
