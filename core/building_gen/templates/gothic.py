"""Gothic cathedral template."""

import math

from ..script_builder import MaterialSpec, ScriptBuilder, format_number

ARCH_WIDTH = 2
ARCH_HEIGHT = 6
SPIRE_RADIUS = 1.5


def generate_gothic(floors: int, width: float, depth: float, floor_height: float) -> str:
    """
    Generate an elongated cathedral with spires, arches and buttresses.

    The nave is twice as deep as requested and the spires rise 60% of the
    wall height above the roof.
    """
    depth = depth * 2
    height = floors * floor_height
    spire_height = height * 0.6

    builder = ScriptBuilder()
    builder.reset_scene()
    builder.parameters({
        "width": width,
        "depth": depth,
        "height": height,
        "spire_height": spire_height,
    })

    builder.section("Main cathedral body")
    builder.add_primitive(
        "cube", "Cathedral_Body",
        location=(0, 0, height / 2),
        scale=(width / 2, depth / 2, height / 2),
        size=2,
    )

    builder.section("Spires with conical caps")
    for i, x in enumerate([-width / 2 + 2, width / 2 - 2]):
        builder.add_primitive(
            "cylinder", f"Spire_{i}",
            location=(x, depth / 3, height + spire_height / 2),
            radius=SPIRE_RADIUS, depth=spire_height,
        )
        builder.add_primitive(
            "cone", f"Spire_Cap_{i}",
            location=(x, depth / 3, height + spire_height + spire_height / 6),
            radius1=SPIRE_RADIUS, radius2=0, depth=spire_height / 3,
        )

    builder.section("Pointed arch windows")
    window_rows = range(int(height / 8), int(height), max(1, int(height / 4)))
    window_cols = range(-int(width / 2) + 3, int(width / 2) - 2, 4)
    for row, z in enumerate(window_rows):
        for col, x in enumerate(window_cols):
            builder.add_primitive(
                "cube", f"Gothic_Window_R{row}_C{col}",
                location=(x, depth / 2 + 0.1, z),
                scale=(ARCH_WIDTH / 2, 0.2, ARCH_HEIGHT / 2),
                size=1,
            )

    builder.section("Rose window")
    builder.add_primitive(
        "cylinder", "Rose_Window",
        location=(0, -depth / 2 - 0.2, height * 0.7),
        rotation=(math.pi / 2, 0, 0),
        radius=3, depth=0.3,
    )

    builder.section("Flying buttresses")
    buttress_rows = range(int(height / 4), int(height), max(1, int(height / 3)))
    for row, z in enumerate(buttress_rows):
        for side, label in ((-1, "L"), (1, "R")):
            builder.add_primitive(
                "cube", f"Buttress_R{row}_{label}",
                location=(side * (width / 2 + 2), 0, z),
                scale=(0.5, depth / 3, 1),
                rotation=(0, 0, side * 0.3),
                size=1,
            )

    builder.material(MaterialSpec(
        "Gothic_Stone", (0.6, 0.55, 0.5), ("Cathedral_Body", "Spire", "Buttress"), roughness=0.9,
    ))
    builder.material(MaterialSpec(
        "Stained_Glass", (0.8, 0.3, 0.4), ("Window",), roughness=0.2, transmission=0.9,
    ))

    builder.light(location=(20, -20, 30), energy=2.5)
    builder.camera(
        location=(width * 1.8, -depth * 1.2, height * 0.8),
        rotation=(1.15, 0, 0.6),
    )
    builder.summary(f"Gothic cathedral generated: {format_number(height)}m tall with 2 spires")
    return builder.build()
