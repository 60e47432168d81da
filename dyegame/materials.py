"""Meshes, materials and dynamic material instances carrying colour parameters."""

from __future__ import annotations

from dataclasses import dataclass, field

from dyegame.dyeable import LinearColor

COLOR_PARAMETER_NAME = "Color"


@dataclass
class Material:
    """A material with default vector parameter values."""

    name: str
    vector_parameters: dict[str, LinearColor] = field(default_factory=dict)


@dataclass
class MaterialInstanceDynamic:
    """A per-object material instance whose parameters override its parent's."""

    parent: Material | MaterialInstanceDynamic
    parameters: dict[str, LinearColor] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.parent.name

    def set_vector_parameter(self, name: str, value: LinearColor) -> None:
        """Override a vector parameter on this instance."""
        self.parameters[name] = value

    def get_vector_parameter(self, name: str) -> LinearColor:
        """Return the parameter value, falling back to the parent's; KeyError if none."""
        if name in self.parameters:
            return self.parameters[name]
        if isinstance(self.parent, MaterialInstanceDynamic):
            return self.parent.get_vector_parameter(name)
        return self.parent.vector_parameters[name]


@dataclass
class StaticMesh:
    """A mesh with one material per element slot."""

    materials: list[Material | MaterialInstanceDynamic | None] = field(default_factory=list)

    def get_material(self, index: int) -> Material | MaterialInstanceDynamic | None:
        """Return the material in a slot, or None when the slot is empty or missing."""
        if 0 <= index < len(self.materials):
            return self.materials[index]
        return None

    def create_dynamic_material_instance(
        self, index: int, material: Material | MaterialInstanceDynamic
    ) -> MaterialInstanceDynamic:
        """Create an instance of ``material`` and place it in slot ``index``."""
        if not 0 <= index < len(self.materials):
            raise IndexError(f"mesh has no material slot {index}")
        instance = MaterialInstanceDynamic(material)
        self.materials[index] = instance
        return instance


def create_material_instance_on_mesh(mesh: StaticMesh | None) -> MaterialInstanceDynamic | None:
    """Give the mesh's first slot its own dynamic instance; None if there is nothing to instance."""
    if mesh is None:
        return None
    material = mesh.get_material(0)
    if material is None:
        return None
    return mesh.create_dynamic_material_instance(0, material)


def set_material_instance_color(instance: MaterialInstanceDynamic | None, color: LinearColor) -> None:
    """Set the colour parameter on an instance, if there is one."""
    if instance is not None:
        instance.set_vector_parameter(COLOR_PARAMETER_NAME, color)