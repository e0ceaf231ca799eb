"""Industrial warehouse template."""

from ..script_builder import MaterialSpec, ScriptBuilder, format_number


def generate_warehouse(width: float, depth: float, floor_height: float) -> str:
    """
    Generate a long, low shed with loading docks along the front.

    The footprint is stretched to 1.5x the width and 2x the depth; the
    height is two floors regardless of the prompt.
    """
    width = width * 1.5
    depth = depth * 2
    height = floor_height * 2
    door_width = width / 3
    door_height = height * 0.7

    builder = ScriptBuilder()
    builder.reset_scene()
    builder.parameters({
        "width": width,
        "depth": depth,
        "height": height,
        "door_width": door_width,
        "door_height": door_height,
    })

    builder.section("Main warehouse body")
    builder.add_primitive(
        "cube", "Warehouse_Main",
        location=(0, 0, height / 2),
        scale=(width / 2, depth / 2, height / 2),
        size=2,
    )

    builder.section("Sloped roof sections")
    for label, x, tilt in (("L", -width / 4, 0.3), ("R", width / 4, -0.3)):
        builder.add_primitive(
            "cube", f"Roof_Section_{label}",
            location=(x, 0, height + 0.8),
            scale=(width / 4, depth / 2 + 0.3, 0.2),
            rotation=(0, tilt, 0),
            size=2,
        )

    builder.section("Loading docks")
    dock_positions = [-width / 3, 0, width / 3]
    for i, x in enumerate(dock_positions):
        builder.add_primitive(
            "cube", f"Garage_Door_{i}",
            location=(x, -depth / 2 - 0.1, door_height / 2),
            scale=(door_width / 2 - 0.2, 0.15, door_height / 2),
            size=1,
        )
        builder.add_primitive(
            "cube", f"Door_Frame_{i}",
            location=(x, -depth / 2 - 0.2, door_height / 2),
            scale=(door_width / 2, 0.2, door_height / 2 + 0.2),
            size=1,
        )
        builder.add_primitive(
            "cube", f"Loading_Platform_{i}",
            location=(x, -depth / 2 - 2, 0.6),
            scale=(door_width / 2, 1, 0.6),
            size=1,
        )

    builder.section("High windows near the roofline")
    for col, x in enumerate(range(-int(width / 2) + 2, int(width / 2) - 1, 4)):
        builder.add_primitive(
            "cube", f"High_Window_{col}",
            location=(x, depth / 2 + 0.1, height - 1.5), scale=(1, 0.15, 0.8), size=1,
        )

    builder.section("Roof ventilation units")
    for i, x in enumerate([-width / 4, width / 4]):
        builder.add_primitive(
            "cube", f"Vent_Unit_{i}",
            location=(x, 0, height + 1.5), scale=(1, 1, 0.5), size=1,
        )

    builder.material(MaterialSpec(
        "Metal_Siding", (0.7, 0.7, 0.7), ("Warehouse_Main",), roughness=0.4, metallic=0.8,
    ))
    builder.material(MaterialSpec(
        "Metal_Roof", (0.5, 0.5, 0.5), ("Roof_Section",), roughness=0.5, metallic=0.9,
    ))
    builder.material(MaterialSpec("Garage_Door", (0.9, 0.6, 0.2), ("Garage_Door",), roughness=0.5))
    builder.material(MaterialSpec("Concrete", (0.6, 0.6, 0.6), ("Platform", "Frame"), roughness=0.9))
    builder.material(MaterialSpec(
        "Wired_Glass", (0.55, 0.65, 0.7), ("High_Window",), roughness=0.2, transmission=0.7,
    ))
    builder.material(MaterialSpec(
        "Vent_Metal", (0.4, 0.4, 0.42), ("Vent_Unit",), roughness=0.45, metallic=0.85,
    ))

    builder.light(location=(15, -20, 25), energy=2.5)
    builder.camera(
        location=(width * 1.2, -depth * 1.5, height * 1.2),
        rotation=(1.1, 0, 0.5),
    )
    builder.summary(
        f"Industrial warehouse generated with {len(dock_positions)} loading docks, "
        f"{format_number(width)}x{format_number(depth)}m"
    )
    return builder.build()
