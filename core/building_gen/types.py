"""Data types for building generation."""

from dataclasses import dataclass, field
from typing import List, Optional

from core.prompt_parser import (
    DEPTH_KEYWORDS,
    FLOOR_KEYWORDS,
    WIDTH_KEYWORDS,
    BuildingStyle,
    classify_style,
    extract_number,
)

from .config import GeneratorConfig


@dataclass(frozen=True)
class BuildingSpec:
    """Immutable building parameters derived from one prompt."""

    floors: int = 5
    width: float = 10
    depth: float = 10
    floor_height: float = 3
    style: BuildingStyle = BuildingStyle.STANDARD

    @property
    def total_height(self) -> float:
        """Height of all floors stacked."""
        return self.floors * self.floor_height

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "floors": self.floors,
            "width": self.width,
            "depth": self.depth,
            "floor_height": self.floor_height,
            "total_height": self.total_height,
            "style": self.style.value,
        }

    @classmethod
    def from_prompt(
        cls,
        prompt: str,
        config: Optional[GeneratorConfig] = None,
        style: Optional[BuildingStyle] = None,
    ) -> "BuildingSpec":
        """
        Build a spec from free text.

        A zero extracted from the text counts as absent so every numeric
        field stays positive.

        Args:
            prompt: Natural-language building description
            config: Defaults for missing values
            style: Already classified style; classified from the text if None

        Returns:
            BuildingSpec with extracted values and the classified style
        """
        config = config or GeneratorConfig()
        text = prompt.lower()

        return cls(
            floors=extract_number(text, FLOOR_KEYWORDS) or config.default_floors,
            width=extract_number(text, WIDTH_KEYWORDS) or config.default_width,
            depth=extract_number(text, DEPTH_KEYWORDS) or config.default_depth,
            floor_height=config.floor_height,
            style=style if style is not None else classify_style(text),
        )


@dataclass
class GeneratedScript:
    """Result of a single generation."""

    spec: BuildingSpec
    code: str
    matched_styles: List[BuildingStyle] = field(default_factory=list)

    @property
    def filename(self) -> str:
        """Suggested download filename."""
        return "blender_building.py"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "building": self.spec.to_dict(),
            "matched_styles": [s.value for s in self.matched_styles],
        }
