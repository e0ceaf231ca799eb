"""Architectural style classification from prompt keywords.

Styles are decided by a fixed precedence rather than by keyword counts:
1. Gothic
2. Castle
3. Cottage
4. Warehouse
5. Modern
6. Standard (fallback when nothing matches)

A prompt such as "a modern castle" is therefore always a castle.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

logger = logging.getLogger(__name__)


class BuildingStyle(str, Enum):
    """Available building styles."""

    STANDARD = "standard"
    MODERN = "modern"
    GOTHIC = "gothic"
    CASTLE = "castle"
    COTTAGE = "cottage"
    WAREHOUSE = "warehouse"


# Keywords matched as plain substrings of the lower-cased prompt
STYLE_KEYWORDS: dict[BuildingStyle, tuple[str, ...]] = {
    BuildingStyle.MODERN: ("modern", "contemporary", "futuristic", "glass"),
    BuildingStyle.GOTHIC: ("gothic", "cathedral", "church", "spire"),
    BuildingStyle.CASTLE: ("castle", "fortress", "medieval", "tower"),
    BuildingStyle.COTTAGE: ("cottage", "small", "house", "home"),
    BuildingStyle.WAREHOUSE: ("warehouse", "industrial", "factory", "garage"),
}

STYLE_PRECEDENCE: tuple[BuildingStyle, ...] = (
    BuildingStyle.GOTHIC,
    BuildingStyle.CASTLE,
    BuildingStyle.COTTAGE,
    BuildingStyle.WAREHOUSE,
    BuildingStyle.MODERN,
)

STYLE_PATTERNS: dict[BuildingStyle, re.Pattern] = {
    style: re.compile("|".join(re.escape(k) for k in keywords))
    for style, keywords in STYLE_KEYWORDS.items()
}


@dataclass
class StyleClassification:
    """Result of style classification.

    Attributes:
        style: The selected style
        matched_styles: Every style whose keywords matched, in precedence order
        matched_keywords: Keywords found per matched style
        reasoning: Explanation for the selection
    """

    style: BuildingStyle
    matched_styles: List[BuildingStyle] = field(default_factory=list)
    matched_keywords: Dict[BuildingStyle, List[str]] = field(default_factory=dict)
    reasoning: str = ""

    @property
    def is_ambiguous(self) -> bool:
        """Return True if more than one style matched."""
        return len(self.matched_styles) > 1

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "style": self.style.value,
            "matched_styles": [s.value for s in self.matched_styles],
            "matched_keywords": {
                s.value: keywords for s, keywords in self.matched_keywords.items()
            },
            "reasoning": self.reasoning,
        }


def _matches(style: BuildingStyle, text: str) -> bool:
    return STYLE_PATTERNS[style].search(text) is not None


def detect_styles(text: str) -> List[BuildingStyle]:
    """Return every style whose predicate holds, in precedence order."""
    lowered = text.lower()
    return [style for style in STYLE_PRECEDENCE if _matches(style, lowered)]


def classify_style(text: str) -> BuildingStyle:
    """Return the first matching style in precedence order."""
    lowered = text.lower()
    for style in STYLE_PRECEDENCE:
        if _matches(style, lowered):
            return style
    return BuildingStyle.STANDARD


class StyleClassifier:
    """Classifies prompts into building styles.

    Classification priority follows STYLE_PRECEDENCE; the first style with a
    matching keyword wins regardless of how many other styles also match.
    """

    def __init__(self, precedence: tuple[BuildingStyle, ...] = STYLE_PRECEDENCE):
        self.precedence = precedence

    def classify(self, text: str) -> StyleClassification:
        """Classify a prompt.

        Args:
            text: Prompt text (any case)

        Returns:
            StyleClassification with the selected style and all matches
        """
        lowered = text.lower()

        matched_keywords: Dict[BuildingStyle, List[str]] = {}
        for style in self.precedence:
            found = [k for k in STYLE_KEYWORDS[style] if k in lowered]
            if found:
                matched_keywords[style] = found

        matched_styles = list(matched_keywords)
        if not matched_styles:
            return StyleClassification(
                style=BuildingStyle.STANDARD,
                reasoning="No style keywords found, using standard building",
            )

        style = matched_styles[0]
        reasoning = f"Matched {style.value} keywords: {', '.join(matched_keywords[style])}"
        if len(matched_styles) > 1:
            overridden = ", ".join(s.value for s in matched_styles[1:])
            reasoning += f" (takes precedence over {overridden})"
            logger.debug(f"Ambiguous prompt resolved to {style.value} over {overridden}")

        return StyleClassification(
            style=style,
            matched_styles=matched_styles,
            matched_keywords=matched_keywords,
            reasoning=reasoning,
        )
