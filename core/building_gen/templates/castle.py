"""Medieval castle template."""

import math

from ..script_builder import MaterialSpec, ScriptBuilder, format_number

WALL_THICKNESS = 1
TOWER_RADIUS = 2
BATTLEMENT_SPACING = 2


def generate_castle(width: float, depth: float, floor_height: float) -> str:
    """
    Generate a hollow curtain wall with corner towers and battlements.

    Height does not follow the floor count: walls are three floors high and
    towers five.
    """
    wall_height = floor_height * 3
    tower_height = floor_height * 5

    builder = ScriptBuilder()
    builder.reset_scene()
    builder.parameters({
        "width": width,
        "depth": depth,
        "wall_height": wall_height,
        "tower_height": tower_height,
        "wall_thickness": WALL_THICKNESS,
    })

    builder.section("Main castle walls")
    builder.add_primitive(
        "cube", "Castle_Walls",
        location=(0, 0, wall_height / 2),
        scale=(width / 2, depth / 2, wall_height / 2),
        size=2,
    )

    builder.section("Hollow interior")
    builder.add_primitive(
        "cube", "Castle_Interior_Cutter",
        location=(0, 0, wall_height / 2),
        scale=(width / 2 - WALL_THICKNESS, depth / 2 - WALL_THICKNESS, wall_height / 2 + 1),
        size=2,
    )
    builder.boolean_difference("Castle_Walls", "Castle_Interior_Cutter")

    builder.section("Corner towers")
    corners = [
        (-width / 2, -depth / 2),
        (width / 2, -depth / 2),
        (-width / 2, depth / 2),
        (width / 2, depth / 2),
    ]
    for i, (x, y) in enumerate(corners):
        builder.add_primitive(
            "cylinder", f"Tower_{i}",
            location=(x, y, tower_height / 2),
            radius=TOWER_RADIUS, depth=tower_height,
        )
        for angle in range(0, 360, 45):
            rad = math.radians(angle)
            builder.add_primitive(
                "cube", f"Tower_Battlement_{i}_{angle}",
                location=(x + 2.2 * math.cos(rad), y + 2.2 * math.sin(rad), tower_height + 0.3),
                scale=(0.4, 0.4, 0.6),
                size=0.5,
            )

    builder.section("Wall battlements")
    for col, x in enumerate(range(-int(width / 2) + 2, int(width / 2) - 1, BATTLEMENT_SPACING)):
        for y, label in ((-depth / 2, "S"), (depth / 2, "N")):
            builder.add_primitive(
                "cube", f"Wall_Battlement_X{col}_{label}",
                location=(x, y, wall_height + 0.4),
                scale=(0.6, WALL_THICKNESS / 2, 0.8),
                size=0.8,
            )
    for row, y in enumerate(range(-int(depth / 2) + 2, int(depth / 2) - 1, BATTLEMENT_SPACING)):
        for x, label in ((-width / 2, "W"), (width / 2, "E")):
            builder.add_primitive(
                "cube", f"Wall_Battlement_Y{row}_{label}",
                location=(x, y, wall_height + 0.4),
                scale=(WALL_THICKNESS / 2, 0.6, 0.8),
                size=0.8,
            )

    builder.section("Gate")
    builder.add_primitive(
        "cube", "Castle_Gate",
        location=(0, -depth / 2, wall_height / 3),
        scale=(2.5, WALL_THICKNESS + 0.2, wall_height / 3),
        size=1,
    )

    builder.material(MaterialSpec(
        "Castle_Stone", (0.5, 0.5, 0.45), ("Castle_Walls", "Tower", "Battlement"), roughness=0.95,
    ))
    builder.material(MaterialSpec("Wood_Gate", (0.3, 0.2, 0.1), ("Castle_Gate",), roughness=0.8))

    builder.light(location=(25, -25, 35), energy=2.5)
    builder.camera(
        location=(width * 1.5, -depth * 1.8, tower_height * 0.7),
        rotation=(1.2, 0, 0.5),
    )
    builder.summary(
        f"Castle generated with 4 towers and battlements, "
        f"{format_number(tower_height)}m towers"
    )
    return builder.build()
