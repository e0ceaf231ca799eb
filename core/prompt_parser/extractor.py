"""Numeric parameter extraction from building prompts."""

import re
from typing import Dict, Optional, Sequence

# Keyword lists are scanned in order; earlier keywords win.
FLOOR_KEYWORDS: tuple[str, ...] = ("floor", "story", "stories", "level")
WIDTH_KEYWORDS: tuple[str, ...] = ("wide", "width")
DEPTH_KEYWORDS: tuple[str, ...] = ("deep", "depth")


def _keyword_pattern(keyword: str) -> re.Pattern:
    """Match "<digits> <keyword>" or "<keyword> <digits>"."""
    escaped = re.escape(keyword)
    return re.compile(rf"(\d+)\s*{escaped}|{escaped}s?\s*(\d+)", re.IGNORECASE)


def extract_number(text: str, keywords: Sequence[str]) -> Optional[int]:
    """
    Extract the first integer anchored to one of the keywords.

    Keywords are tried strictly in the given order, so a match on an earlier
    keyword wins even when a later keyword also appears with a different
    number.

    Args:
        text: Free-text prompt
        keywords: Ordered keywords to anchor the number to

    Returns:
        The matched integer, or None if no keyword matched
    """
    for keyword in keywords:
        match = _keyword_pattern(keyword).search(text)
        if match:
            return int(match.group(1) or match.group(2))
    return None


def extract_dimensions(text: str) -> Dict[str, Optional[int]]:
    """Extract floors, width and depth without applying defaults."""
    return {
        "floors": extract_number(text, FLOOR_KEYWORDS),
        "width": extract_number(text, WIDTH_KEYWORDS),
        "depth": extract_number(text, DEPTH_KEYWORDS),
    }
