"""Procedural building templates, one pure function per style.

Each template returns a complete Blender Python script: scene reset,
parameter block, geometry, materials, one sun light, one camera and a
closing summary.
"""

from typing import Callable, Dict

from core.prompt_parser import BuildingStyle

from ..types import BuildingSpec
from .castle import generate_castle
from .cottage import generate_cottage
from .gothic import generate_gothic
from .modern import generate_modern
from .standard import generate_standard
from .warehouse import generate_warehouse

# Castle, cottage and warehouse derive a fixed height and ignore floors
TEMPLATES: Dict[BuildingStyle, Callable[[BuildingSpec], str]] = {
    BuildingStyle.STANDARD: lambda s: generate_standard(s.floors, s.width, s.depth, s.floor_height),
    BuildingStyle.MODERN: lambda s: generate_modern(s.floors, s.width, s.depth, s.floor_height),
    BuildingStyle.GOTHIC: lambda s: generate_gothic(s.floors, s.width, s.depth, s.floor_height),
    BuildingStyle.CASTLE: lambda s: generate_castle(s.width, s.depth, s.floor_height),
    BuildingStyle.COTTAGE: lambda s: generate_cottage(s.width, s.depth, s.floor_height),
    BuildingStyle.WAREHOUSE: lambda s: generate_warehouse(s.width, s.depth, s.floor_height),
}


def render_template(spec: BuildingSpec) -> str:
    """Run the template registered for the spec's style."""
    return TEMPLATES[spec.style](spec)


__all__ = [
    "TEMPLATES",
    "render_template",
    "generate_standard",
    "generate_modern",
    "generate_gothic",
    "generate_castle",
    "generate_cottage",
    "generate_warehouse",
]
