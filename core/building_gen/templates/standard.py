"""Standard office/apartment block template."""

from ..script_builder import MaterialSpec, ScriptBuilder, format_number

WINDOW_WIDTH = 1.5
WINDOW_HEIGHT = 1.8
WINDOW_SPACING = 2.5


def generate_standard(floors: int, width: float, depth: float, floor_height: float) -> str:
    """
    Generate a box building with windows on every side of every floor.

    Args:
        floors: Number of floors
        width: Footprint along X
        depth: Footprint along Y
        floor_height: Height of one floor

    Returns:
        Blender Python script text
    """
    total_height = floors * floor_height
    builder = ScriptBuilder()
    builder.reset_scene()
    builder.parameters({
        "floors": floors,
        "floor_height": floor_height,
        "width": width,
        "depth": depth,
        "total_height": total_height,
    })

    builder.section("Create main building structure")
    builder.add_primitive(
        "cube", "Building_Main",
        location=(0, 0, total_height / 2),
        scale=(width / 2, depth / 2, total_height / 2),
        size=2,
    )

    step = int(WINDOW_SPACING)
    x_positions = range(-int(width / 2) + 2, int(width / 2) - 1, step)
    y_positions = range(-int(depth / 2) + 2, int(depth / 2) - 1, step)
    facade_scale = (WINDOW_WIDTH / 2, 0.2, WINDOW_HEIGHT / 2)
    side_scale = (0.2, WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2)

    builder.section("Create windows for each floor")
    for floor in range(floors):
        floor_z = floor * floor_height + floor_height / 2

        for col, x in enumerate(x_positions):
            builder.add_primitive(
                "cube", f"Window_Front_F{floor}_{col}",
                location=(x, depth / 2 + 0.1, floor_z), scale=facade_scale, size=1,
            )
            builder.add_primitive(
                "cube", f"Window_Back_F{floor}_{col}",
                location=(x, -depth / 2 - 0.1, floor_z), scale=facade_scale, size=1,
            )

        for col, y in enumerate(y_positions):
            builder.add_primitive(
                "cube", f"Window_Left_F{floor}_{col}",
                location=(-width / 2 - 0.1, y, floor_z), scale=side_scale, size=1,
            )
            builder.add_primitive(
                "cube", f"Window_Right_F{floor}_{col}",
                location=(width / 2 + 0.1, y, floor_z), scale=side_scale, size=1,
            )

    builder.section("Create entrance")
    builder.add_primitive(
        "cube", "Entrance",
        location=(0, depth / 2 + 0.2, 1.5), scale=(2, 0.3, 1.5), size=1,
    )

    builder.section("Create roof")
    builder.add_primitive(
        "cube", "Roof",
        location=(0, 0, total_height + 0.3),
        scale=(width / 2 + 0.5, depth / 2 + 0.5, 0.3),
        size=1,
    )

    builder.material(MaterialSpec("Building_Material", (0.8, 0.8, 0.7), ("Building_Main",), roughness=0.7))
    builder.material(MaterialSpec("Window_Material", (0.5, 0.7, 0.9), ("Window",), roughness=0.1, transmission=0.8))
    builder.material(MaterialSpec("Entrance_Material", (0.3, 0.2, 0.1), ("Entrance",), roughness=0.6))
    builder.material(MaterialSpec("Roof_Material", (0.4, 0.3, 0.3), ("Roof",), roughness=0.8))

    builder.light(location=(10, 10, 20), energy=2)
    builder.camera(
        location=(width * 1.5, -depth * 1.5, total_height * 0.7),
        rotation=(1.1, 0, 0.785),
    )
    builder.summary(
        f"Building generated: {floors} floors, "
        f"{format_number(width)}x{format_number(depth)}m, {format_number(total_height)}m tall"
    )
    return builder.build()
