"""Modern glass tower template."""

from ..script_builder import MaterialSpec, ScriptBuilder, format_number

TWIST_ANGLE = 0.3


def generate_modern(floors: int, width: float, depth: float, floor_height: float) -> str:
    """Generate a twisted tower with glass panels and balconies."""
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

    builder.section("Main structure with twist")
    builder.add_primitive(
        "cube", "Modern_Building",
        location=(0, 0, total_height / 2),
        scale=(width / 2, depth / 2, total_height / 2),
        size=2,
    )
    builder.twist("Modern_Building", TWIST_ANGLE)

    builder.section("Glass facade")
    panel_scale = (width / 2 - 0.5, 0.1, floor_height / 2 - 0.2)
    for floor in range(floors):
        z = floor * floor_height + floor_height / 2
        builder.add_primitive(
            "cube", f"Glass_Front_F{floor}",
            location=(0, depth / 2 + 0.2, z), scale=panel_scale, size=1,
        )
        builder.add_primitive(
            "cube", f"Glass_Back_F{floor}",
            location=(0, -depth / 2 - 0.2, z), scale=panel_scale, size=1,
        )

    if floors > 1:
        builder.section("Balconies")
        for floor in range(1, floors):
            builder.add_primitive(
                "cube", f"Balcony_F{floor}",
                location=(0, depth / 2 + 1, floor * floor_height),
                scale=(width / 2 - 1, 0.8, 0.1),
                size=1,
            )

    builder.material(MaterialSpec("Modern_Concrete", (0.9, 0.9, 0.9), ("Modern_Building",), roughness=0.3))
    builder.material(MaterialSpec("Modern_Glass", (0.6, 0.8, 1.0), ("Glass",), roughness=0.1, transmission=0.95))
    if floors > 1:
        builder.material(MaterialSpec("Balcony_Steel", (0.35, 0.35, 0.38), ("Balcony",), roughness=0.35, metallic=0.9))

    builder.light(location=(15, -15, 25), energy=3)
    builder.camera(
        location=(width * 2, -depth * 2, total_height * 0.6),
        rotation=(1.2, 0, 0.785),
    )
    builder.summary(f"Modern building created: {floors} floors, {format_number(total_height)}m tall")
    return builder.build()
