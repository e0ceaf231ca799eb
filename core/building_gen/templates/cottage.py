"""Small cottage template."""

import math

from ..script_builder import MaterialSpec, ScriptBuilder, format_number

COTTAGE_SCALE = 0.6
ROOF_PITCH = 30  # degrees


def generate_cottage(width: float, depth: float, floor_height: float) -> str:
    """Generate a single-storey cottage at 60% of the requested footprint."""
    width = width * COTTAGE_SCALE
    depth = depth * COTTAGE_SCALE
    height = floor_height * 1.5

    builder = ScriptBuilder()
    builder.reset_scene()
    builder.parameters({"width": width, "depth": depth, "height": height})

    builder.section("Main cottage body")
    builder.add_primitive(
        "cube", "Cottage_Main",
        location=(0, 0, height / 2),
        scale=(width / 2, depth / 2, height / 2),
        size=2,
    )

    builder.section("Sloped roof")
    roof_scale = (width / 2 + 0.5, depth / 2 + 0.5, 1)
    for label, pitch in (("L", ROOF_PITCH), ("R", -ROOF_PITCH)):
        builder.add_primitive(
            "cube", f"Cottage_Roof_{label}",
            location=(0, 0, height + 1),
            scale=roof_scale,
            rotation=(0, math.radians(pitch), 0),
            size=2,
        )

    builder.section("Chimney")
    builder.add_primitive(
        "cube", "Chimney",
        location=(width / 3, 0, height + 2.5), scale=(0.6, 0.6, 2), size=1,
    )

    builder.section("Windows")
    window_positions = [
        (-width / 3, depth / 2 + 0.1, height / 2),
        (width / 3, depth / 2 + 0.1, height / 2),
        (-width / 3, -depth / 2 - 0.1, height / 2),
    ]
    for i, position in enumerate(window_positions):
        builder.add_primitive("cube", f"Window_{i}", location=position, scale=(0.7, 0.15, 0.9), size=1)

    builder.section("Door and porch")
    builder.add_primitive(
        "cube", "Door",
        location=(width / 3, -depth / 2 - 0.1, height / 3),
        scale=(0.8, 0.15, height / 3),
        size=1,
    )
    builder.add_primitive(
        "cube", "Porch",
        location=(width / 3, -depth / 2 - 1, 0.1), scale=(1.2, 0.8, 0.1), size=1,
    )

    builder.material(MaterialSpec("Cottage_Walls", (0.9, 0.85, 0.7), ("Cottage_Main",), roughness=0.8))
    builder.material(MaterialSpec("Roof_Tiles", (0.6, 0.3, 0.2), ("Cottage_Roof",), roughness=0.7))
    builder.material(MaterialSpec("Brick", (0.7, 0.3, 0.2), ("Chimney",), roughness=0.9))
    builder.material(MaterialSpec("Window_Glass", (0.7, 0.8, 0.9), ("Window",), roughness=0.1, transmission=0.8))
    builder.material(MaterialSpec("Wood_Door", (0.4, 0.25, 0.15), ("Door",), roughness=0.6))
    builder.material(MaterialSpec("Porch_Wood", (0.5, 0.35, 0.2), ("Porch",), roughness=0.7))

    builder.light(location=(10, -10, 15), energy=2)
    builder.camera(
        location=(width * 2, -depth * 2.5, height * 1.5),
        rotation=(1.1, 0, 0.6),
    )
    builder.summary(f"Cozy cottage generated: {format_number(width)}x{format_number(depth)}m")
    return builder.build()
