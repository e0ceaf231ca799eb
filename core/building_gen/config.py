"""Generator configuration management."""

import os
from dataclasses import dataclass


@dataclass
class GeneratorConfig:
    """Configuration options for the building generator."""

    # Defaults used when the prompt does not mention a dimension
    default_floors: int = 5
    default_width: int = 10
    default_depth: int = 10
    floor_height: float = 3  # Height between floors, never read from the prompt

    # Upper bounds on extracted values (every window and battlement is emitted)
    max_floors: int = 200
    max_dimension: int = 1000

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Load configuration from environment variables."""
        return cls(
            default_floors=int(os.getenv("BUILDING_DEFAULT_FLOORS", "5")),
            default_width=int(os.getenv("BUILDING_DEFAULT_WIDTH", "10")),
            default_depth=int(os.getenv("BUILDING_DEFAULT_DEPTH", "10")),
            floor_height=float(os.getenv("BUILDING_FLOOR_HEIGHT", "3")),
            max_floors=int(os.getenv("BUILDING_MAX_FLOORS", "200")),
            max_dimension=int(os.getenv("BUILDING_MAX_DIMENSION", "1000")),
        )

    def exceeds_limits(self, floors: int, width: float, depth: float) -> bool:
        """Check if extracted values are above the configured limits."""
        return (
            floors > self.max_floors
            or width > self.max_dimension
            or depth > self.max_dimension
        )
