"""Blender Python script emitter shared by the building templates.

A ScriptBuilder is created for a single template call and collects the
script lines, the names of the objects it creates and the materials that
are attached to them. Nothing is shared between builders.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set, Tuple

Vector3 = Tuple[float, float, float]
Color = Tuple[float, float, float]

SCENE_RESET = [
    "bpy.ops.object.select_all(action='SELECT')",
    "bpy.ops.object.delete(use_global=False, confirm=False)",
    "bpy.ops.outliner.orphans_purge()",
]

MATERIAL_HELPERS = '''def create_material(name, color, roughness=0.5, metallic=0.0, transmission=0.0):
    mat = bpy.data.materials.new(name=name)
    mat.use_nodes = True
    bsdf = mat.node_tree.nodes["Principled BSDF"]
    bsdf.inputs['Base Color'].default_value = color
    bsdf.inputs['Roughness'].default_value = roughness
    bsdf.inputs['Metallic'].default_value = metallic
    # Blender 4.x renamed the input to "Transmission Weight"
    key = 'Transmission Weight' if 'Transmission Weight' in bsdf.inputs else 'Transmission'
    bsdf.inputs[key].default_value = transmission
    return mat


def assign_material(mat, patterns):
    for obj in bpy.data.objects:
        if obj.type == 'MESH' and any(p in obj.name for p in patterns):
            obj.data.materials.append(mat)'''

# Upper bound on objects in one script; every object is emitted as its own statement
MAX_OBJECTS = 10000

PRIMITIVES = {
    "cube": "primitive_cube_add",
    "cylinder": "primitive_cylinder_add",
    "cone": "primitive_cone_add",
}


class ObjectLimitError(ValueError):
    """Raised when a template would create more objects than allowed."""


def format_number(value: float) -> str:
    """Render a number the way it should appear in the script.

    Integral values drop the trailing ".0"; others are rounded to 4 decimals.
    """
    rounded = round(float(value), 4)
    if rounded.is_integer():
        return str(int(rounded))
    return repr(rounded)


def format_vector(values: Sequence[float]) -> str:
    """Render a tuple literal such as (1, 2.5, 0)."""
    return "(" + ", ".join(format_number(v) for v in values) + ")"


@dataclass(frozen=True)
class MaterialSpec:
    """Principled BSDF material attached to objects by name substring."""

    name: str
    color: Color
    patterns: Tuple[str, ...]
    roughness: float = 0.5  # 0 = glossy, 1 = rough
    metallic: float = 0.0
    transmission: float = 0.0  # 1 = fully transmissive glass

    @property
    def variable(self) -> str:
        """Script variable holding the material."""
        return f"{self.name.lower()}_mat"

    def matches(self, object_name: str) -> bool:
        """Check if an object receives this material."""
        return any(pattern in object_name for pattern in self.patterns)


class ScriptBuilder:
    """Accumulates one Blender script."""

    def __init__(self, imports: Sequence[str] = ("bpy",), max_objects: int = MAX_OBJECTS):
        self.lines: List[str] = [f"import {module}" for module in imports]
        self.max_objects = max_objects
        # Ordered for output, sets for membership
        self._objects: List[str] = []
        self._names: Set[str] = set()
        self._removed: Set[str] = set()
        self._materials: List[MaterialSpec] = []

    def line(self, text: str = "") -> None:
        """Append a single script line."""
        self.lines.append(text)

    def section(self, title: str) -> None:
        """Start a commented block separated by a blank line."""
        self.lines.append("")
        self.lines.append(f"# {title}")

    def reset_scene(self) -> None:
        """Clear every object and orphaned datablock."""
        self.section("Clear existing scene")
        self.lines.extend(SCENE_RESET)

    def parameters(self, values: Dict[str, float]) -> None:
        """Echo the building parameters as script variables."""
        self.section("Building parameters")
        for key, value in values.items():
            self.lines.append(f"{key} = {format_number(value)}")

    @property
    def objects(self) -> Tuple[str, ...]:
        """Names of objects that remain in the scene."""
        return tuple(name for name in self._objects if name not in self._removed)

    @property
    def materials(self) -> Tuple[MaterialSpec, ...]:
        return tuple(self._materials)

    def add_primitive(
        self,
        kind: str,
        name: str,
        location: Vector3,
        scale: Optional[Vector3] = None,
        rotation: Optional[Vector3] = None,
        **params: float,
    ) -> str:
        """
        Emit a mesh primitive and name it.

        Args:
            kind: "cube", "cylinder" or "cone"
            name: Unique object name, matched by material patterns
            location: Object origin
            scale: Optional object scale
            rotation: Optional euler rotation in radians
            **params: Operator arguments such as size, radius or depth

        Returns:
            The object name
        """
        if name in self._names:
            raise ValueError(f"Duplicate object name: {name}")
        if len(self._objects) >= self.max_objects:
            raise ObjectLimitError(f"Script would exceed {self.max_objects} objects")
        self._objects.append(name)
        self._names.add(name)

        args = [f"{key}={format_number(value)}" for key, value in params.items()]
        args.append(f"location={format_vector(location)}")

        self.lines.append(f"bpy.ops.mesh.{PRIMITIVES[kind]}({', '.join(args)})")
        self.lines.append("obj = bpy.context.active_object")
        self.lines.append(f'obj.name = "{name}"')
        if scale is not None:
            self.lines.append(f"obj.scale = {format_vector(scale)}")
        if rotation is not None:
            self.lines.append(f"obj.rotation_euler = {format_vector(rotation)}")
        return name

    def twist(self, name: str, angle: float) -> None:
        """Add a simple-deform twist modifier to an existing object."""
        self.lines.append(f'twist = bpy.data.objects["{name}"].modifiers.new(name="Twist", type=\'SIMPLE_DEFORM\')')
        self.lines.append("twist.deform_method = 'TWIST'")
        self.lines.append(f"twist.angle = {format_number(angle)}")

    def boolean_difference(self, target: str, cutter: str) -> None:
        """Subtract cutter from target, apply the result and delete cutter."""
        self.lines.extend([
            f'target = bpy.data.objects["{target}"]',
            f'cutter = bpy.data.objects["{cutter}"]',
            "bool_mod = target.modifiers.new(name=\"Boolean\", type='BOOLEAN')",
            "bool_mod.operation = 'DIFFERENCE'",
            "bool_mod.object = cutter",
            "bpy.context.view_layer.objects.active = target",
            'bpy.ops.object.modifier_apply(modifier="Boolean")',
            "bpy.data.objects.remove(cutter, do_unlink=True)",
        ])
        self._removed.add(cutter)

    def material(self, spec: MaterialSpec) -> None:
        """Create a material and attach it to every matching object."""
        if not self._materials:
            self.section("Materials")
            self.lines.extend(MATERIAL_HELPERS.split("\n"))
            self.lines.append("")
        self._materials.append(spec)

        color = format_vector(tuple(spec.color) + (1.0,))
        self.lines.append(
            f'{spec.variable} = create_material("{spec.name}", {color}, '
            f"roughness={format_number(spec.roughness)}, "
            f"metallic={format_number(spec.metallic)}, "
            f"transmission={format_number(spec.transmission)})"
        )
        patterns = ", ".join(f'"{p}"' for p in spec.patterns)
        if len(spec.patterns) == 1:
            patterns += ","
        self.lines.append(f"assign_material({spec.variable}, ({patterns}))")

    def light(self, location: Vector3, energy: float) -> None:
        """Add the single sun light."""
        self.section("Lighting")
        self.lines.extend([
            f"bpy.ops.object.light_add(type='SUN', location={format_vector(location)})",
            "sun = bpy.context.active_object",
            'sun.name = "Sun"',
            f"sun.data.energy = {format_number(energy)}",
        ])

    def camera(self, location: Vector3, rotation: Vector3) -> None:
        """Add the camera and make it the active render camera."""
        self.section("Camera")
        self.lines.extend([
            f"bpy.ops.object.camera_add(location={format_vector(location)})",
            "camera = bpy.context.active_object",
            'camera.name = "Camera"',
            f"camera.rotation_euler = {format_vector(rotation)}",
            "bpy.context.scene.camera = camera",
        ])

    def summary(self, message: str) -> None:
        """Print a closing message from inside Blender."""
        self.lines.append("")
        self.lines.append(f"print({message!r})")

    def unmatched_objects(self) -> Dict[str, int]:
        """Objects that match zero or several materials, with match counts."""
        counts = {
            name: sum(1 for spec in self._materials if spec.matches(name))
            for name in self.objects
        }
        return {name: count for name, count in counts.items() if count != 1}

    def build(self) -> str:
        """Return the finished script text."""
        unmatched = self.unmatched_objects()
        if unmatched:
            raise ValueError(f"Objects without exactly one material: {unmatched}")
        return "\n".join(self.lines) + "\n"
