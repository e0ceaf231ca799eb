"""Prompt parsing for the building generator.

This module provides:
- extract_number: keyword-anchored integer extraction from free text
- StyleClassifier: fixed-precedence architectural style detection

Example usage:
    from core.prompt_parser import extract_number, classify_style, FLOOR_KEYWORDS

    floors = extract_number("a 12 floor tower", FLOOR_KEYWORDS)  # 12
    style = classify_style("a modern castle")  # BuildingStyle.CASTLE
"""

from .extractor import (
    DEPTH_KEYWORDS,
    FLOOR_KEYWORDS,
    WIDTH_KEYWORDS,
    extract_dimensions,
    extract_number,
)
from .style_classifier import (
    STYLE_KEYWORDS,
    STYLE_PRECEDENCE,
    BuildingStyle,
    StyleClassification,
    StyleClassifier,
    classify_style,
    detect_styles,
)

__all__ = [
    # Extraction
    "extract_number",
    "extract_dimensions",
    "FLOOR_KEYWORDS",
    "WIDTH_KEYWORDS",
    "DEPTH_KEYWORDS",
    # Classification
    "BuildingStyle",
    "StyleClassification",
    "StyleClassifier",
    "classify_style",
    "detect_styles",
    "STYLE_KEYWORDS",
    "STYLE_PRECEDENCE",
]
