"""Blender building script generation.

This module converts a free-text building description into a Blender
Python script that builds the described building when run inside Blender.

Usage:
    from core.building_gen import BuildingGenerator

    generator = BuildingGenerator()
    result = generator.generate("Create a modern 5-story apartment building")
    print(result.spec.style)  # BuildingStyle.MODERN
    open("building.py", "w").write(result.code)
"""

from .config import GeneratorConfig
from .generator import (
    BuildingGenerator,
    GenerationError,
    GenerationFailure,
    MissingPromptError,
    PromptLimitError,
    generate_building_script,
)
from .script_builder import MaterialSpec, ScriptBuilder
from .templates import TEMPLATES, render_template
from .types import BuildingSpec, GeneratedScript

__all__ = [
    # Main API
    "BuildingGenerator",
    "GeneratorConfig",
    "generate_building_script",
    # Types
    "BuildingSpec",
    "GeneratedScript",
    # Templates
    "TEMPLATES",
    "render_template",
    "ScriptBuilder",
    "MaterialSpec",
    # Exceptions
    "GenerationError",
    "MissingPromptError",
    "PromptLimitError",
    "GenerationFailure",
]
