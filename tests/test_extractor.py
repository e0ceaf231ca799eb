"""Tests for keyword-anchored number extraction."""

import pytest

from core.prompt_parser import (
    DEPTH_KEYWORDS,
    FLOOR_KEYWORDS,
    WIDTH_KEYWORDS,
    extract_dimensions,
    extract_number,
)


class TestExtractNumber:
    """Tests for extract_number."""

    def test_number_before_keyword(self):
        """Digits followed by the keyword."""
        assert extract_number("12 floors", FLOOR_KEYWORDS) == 12

    def test_keyword_before_number(self):
        """Keyword followed by the digits."""
        assert extract_number("floors 12", FLOOR_KEYWORDS) == 12
        assert extract_number("floor 7", ["floor"]) == 7

    def test_no_whitespace_between(self):
        """Whitespace between number and keyword is optional."""
        assert extract_number("a 3level house", FLOOR_KEYWORDS) == 3

    def test_case_insensitive(self):
        """Keyword matching ignores case."""
        assert extract_number("15 FLOORS", FLOOR_KEYWORDS) == 15
        assert extract_number("Width 25", WIDTH_KEYWORDS) == 25

    def test_no_match_returns_none(self):
        """Absent keywords give None so the caller can apply a default."""
        assert extract_number("a tall building", FLOOR_KEYWORDS) is None
        assert extract_number("", FLOOR_KEYWORDS) is None

    def test_keyword_without_number(self):
        """A keyword with no adjacent digits does not match."""
        assert extract_number("many floors and 3 doors", FLOOR_KEYWORDS) is None

    def test_hyphenated_number_not_matched(self):
        """Only whitespace may separate the number and the keyword."""
        assert extract_number("a 10-story tower", FLOOR_KEYWORDS) is None

    def test_stories_plural(self):
        """'stories' is its own keyword."""
        assert extract_number("20 stories high", FLOOR_KEYWORDS) == 20

    def test_earlier_keyword_wins(self):
        """First keyword in the list wins even if it appears later in the text."""
        text = "a 5 story building with 12 floors"
        assert extract_number(text, ["floor", "story"]) == 12
        assert extract_number(text, ["story", "floor"]) == 5

    def test_floor_keyword_beats_story(self):
        """Default floor keywords prefer 'floor' over 'story'."""
        assert extract_number("story 9 and floor 4", FLOOR_KEYWORDS) == 4

    def test_leftmost_match_for_same_keyword(self):
        """Within a single keyword the first occurrence wins."""
        assert extract_number("3 floors here, 8 floors there", FLOOR_KEYWORDS) == 3

    def test_zero_is_returned(self):
        """Zero is a valid match; defaults are applied by the caller."""
        assert extract_number("0 floors", FLOOR_KEYWORDS) == 0


class TestExtractDimensions:
    """Tests for extract_dimensions."""

    def test_all_dimensions(self):
        """Floors, width and depth in one prompt."""
        result = extract_dimensions("a 12 floor building 30 wide and 20 deep")
        assert result == {"floors": 12, "width": 30, "depth": 20}

    def test_missing_dimensions(self):
        """Missing dimensions are None."""
        result = extract_dimensions("a building with 4 levels")
        assert result == {"floors": 4, "width": None, "depth": None}

    @pytest.mark.parametrize("keywords", [FLOOR_KEYWORDS, WIDTH_KEYWORDS, DEPTH_KEYWORDS])
    def test_keyword_lists_are_ordered(self, keywords):
        """Keyword lists are tuples so their order is fixed."""
        assert isinstance(keywords, tuple)
        assert len(keywords) >= 2
