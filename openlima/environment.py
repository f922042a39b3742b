"""Cameras, projection and the environment that renders a scene."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from openlima.color import Color
from openlima.lighting import Light, LightState
from openlima.scene import Renderable, RenderNode
from openlima.vector import Vector2, Vector3


@dataclass(frozen=True)
class Projection:
    """A perspective projection: field of view in degrees and aspect ratio."""

    fov: float
    aspect_ratio: float


@dataclass(frozen=True)
class CameraView:
    """The position and rotation a camera applies before drawing."""

    position: Vector3
    rotation: Vector3


class ProjectionModifier(ABC):
    """Sets up the projection for given screen dimensions."""

    @abstractmethod
    def modify_projection(self, dimensions: Vector2) -> Any:
        """Return the projection for the given screen dimensions."""


class Camera(ProjectionModifier, Renderable):
    """A camera: sets up the projection and is rendered before the scene."""


class PerspectiveCamera(Camera):
    """A camera with a perspective projection."""

    def __init__(self, fov: float) -> None:
        self._fov = fov
        self.position = Vector3()
        self.rotation = Vector3()

    @property
    def fov(self) -> float:
        """The field of view of this camera."""
        return self._fov

    def aspect_ratio(self, dimensions: Vector2) -> float:
        """Width divided by height of the given screen dimensions."""
        if dimensions.y <= 0:
            raise ValueError(f"screen height must be positive, got {dimensions.y}")
        return dimensions.x / dimensions.y

    def modify_projection(self, dimensions: Vector2) -> Projection:
        """Return the perspective projection for the given dimensions."""
        return Projection(self._fov, self.aspect_ratio(dimensions))

    def render(self) -> CameraView:
        """Return the view set by this camera's position and rotation."""
        return CameraView(self.position.copy(), self.rotation.copy())


@dataclass(frozen=True)
class Frame:
    """Everything drawn when an environment is rendered."""

    projection: Any
    initialization: Any
    ambient_color: Color
    lights: tuple[LightState, ...]
    scene: list


@dataclass
class Environment:
    """Manages lighting and a camera around a root render node."""

    render_node: RenderNode = field(default_factory=RenderNode)
    render_initializer: Optional[Renderable] = None
    projection_modifier: Optional[ProjectionModifier] = None
    ambient_color: Color = field(default_factory=Color)
    _lights: list[Light] = field(default_factory=list, repr=False)

    @property
    def lights(self) -> tuple[Light, ...]:
        """The lights in this environment."""
        return tuple(self._lights)

    def set_camera(self, camera: Camera) -> None:
        """Use the camera as both projection modifier and render initializer."""
        self.projection_modifier = camera
        self.render_initializer = camera

    def add_light(self, light: Light) -> None:
        """Add a light to this environment."""
        self._lights.append(light)

    def remove_light(self, light: Light) -> None:
        """Remove the given light; raises ValueError if it is not present."""
        for position, candidate in enumerate(self._lights):
            if candidate is light:
                del self._lights[position]
                return
        raise ValueError("light is not part of this environment")

    def clear_lights(self) -> None:
        """Remove all lights."""
        self._lights.clear()

    def render(self, dimensions: Vector2) -> Frame:
        """Render this environment for the given screen dimensions."""
        projection = (
            self.projection_modifier.modify_projection(dimensions)
            if self.projection_modifier is not None
            else None
        )
        initialization = (
            self.render_initializer.render()
            if self.render_initializer is not None
            else None
        )
        lights = tuple(
            light.set_light(index) for index, light in enumerate(self._lights)
        )
        return Frame(
            projection=projection,
            initialization=initialization,
            ambient_color=self.ambient_color.copy(),
            lights=lights,
            scene=self.render_node.render(),
        )