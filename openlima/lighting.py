"""Lights and material passes described as plain state objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from openlima.color import Color
from openlima.vector import Vector3

Rgba = tuple[float, float, float, float]

# A spot cutoff of 180 degrees means the light shines in all directions.
UNIFORM_CUTOFF = 180.0


@dataclass(frozen=True)
class LightState:
    """The properties of the light in one light slot."""

    index: int
    position: tuple[float, float, float, float]
    ambient: Rgba
    diffuse: Rgba
    specular: Rgba
    spot_direction: tuple[float, float, float] = (0.0, 0.0, -1.0)
    spot_exponent: float = 0.0
    spot_cutoff: float = UNIFORM_CUTOFF


def _check_index(index: int) -> None:
    if index < 0:
        raise ValueError(f"light index must not be negative, got {index}")


def _point(vector: Vector3) -> tuple[float, float, float, float]:
    return (float(vector.x), float(vector.y), float(vector.z), 1.0)


class Light(ABC):
    """A light that can describe itself for a given light slot."""

    @abstractmethod
    def set_light(self, index: int) -> LightState:
        """Return the properties of this light in the slot with this index."""


@dataclass
class PointLight(Light):
    """A point light shining in all directions from its position."""

    position: Vector3
    ambient: Color
    diffuse: Color
    specular: Color

    def set_light(self, index: int) -> LightState:
        """Return the properties of this light in the slot with this index."""
        _check_index(index)
        return LightState(
            index=index,
            position=_point(self.position),
            ambient=self.ambient.as_tuple(),
            diffuse=self.diffuse.as_tuple(),
            specular=self.specular.as_tuple(),
        )


@dataclass
class SpotLight(Light):
    """A spot light; the higher the focus, the more focused the beam."""

    position: Vector3
    direction: Vector3
    focus: float
    cutoff: float
    ambient: Color
    diffuse: Color
    specular: Color

    def set_light(self, index: int) -> LightState:
        """Return the properties of this light in the slot with this index."""
        _check_index(index)
        return LightState(
            index=index,
            position=_point(self.position),
            ambient=self.ambient.as_tuple(),
            diffuse=self.diffuse.as_tuple(),
            specular=self.specular.as_tuple(),
            spot_direction=(
                float(self.direction.x),
                float(self.direction.y),
                float(self.direction.z),
            ),
            spot_exponent=float(self.focus),
            spot_cutoff=float(self.cutoff),
        )


@dataclass(frozen=True)
class MaterialState:
    """Material properties applied while drawing."""

    ambient: Rgba
    diffuse: Rgba
    specular: Rgba
    emission: Rgba
    shininess: float


DEFAULT_MATERIAL = MaterialState(
    ambient=(0.2, 0.2, 0.2, 1.0),
    diffuse=(0.8, 0.8, 0.8, 1.0),
    specular=(0.0, 0.0, 0.0, 1.0),
    emission=(0.0, 0.0, 0.0, 1.0),
    shininess=0.0,
)


class Pass(ABC):
    """A rendering pass that sets properties before drawing and unsets them after.

    A pass is also a context manager around the drawing.
    """

    @abstractmethod
    def set_properties(self) -> MaterialState:
        """Apply this pass's properties."""

    @abstractmethod
    def unset_properties(self) -> MaterialState:
        """Restore the properties in place before this pass."""

    def __enter__(self) -> MaterialState:
        return self.set_properties()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unset_properties()


@dataclass
class SimplePass(Pass):
    """A pass that applies fixed material colours and shininess."""

    ambient: Color
    diffuse: Color
    specular: Color
    emission: Color
    shininess: float
    _active: Optional[MaterialState] = field(default=None, init=False, repr=False)

    @property
    def material(self) -> MaterialState:
        """The material this pass applies."""
        return MaterialState(
            ambient=self.ambient.as_tuple(),
            diffuse=self.diffuse.as_tuple(),
            specular=self.specular.as_tuple(),
            emission=self.emission.as_tuple(),
            shininess=float(self.shininess),
        )

    @property
    def active(self) -> bool:
        """Whether the properties of this pass are currently applied."""
        return self._active is not None

    def set_properties(self) -> MaterialState:
        """Apply this pass's material and return it."""
        self._active = self.material
        return self._active

    def unset_properties(self) -> MaterialState:
        """Restore the default material and return it."""
        self._active = None
        return DEFAULT_MATERIAL