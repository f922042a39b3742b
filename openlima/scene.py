"""Renderable objects and render nodes that group and transform them."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from openlima.vector import Vector3

Matrix = tuple[tuple[float, float, float, float], ...]


def _matrix(rows) -> Matrix:
    return tuple(tuple(float(v) for v in row) for row in rows)


def translation_matrix(translation: Vector3) -> Matrix:
    """A 4x4 matrix that moves points by the given vector."""
    x, y, z = translation
    return _matrix(
        ((1, 0, 0, x), (0, 1, 0, y), (0, 0, 1, z), (0, 0, 0, 1))
    )


def scaling_matrix(scale: Vector3) -> Matrix:
    """A 4x4 matrix that scales points component-wise."""
    x, y, z = scale
    return _matrix(
        ((x, 0, 0, 0), (0, y, 0, 0), (0, 0, z, 0), (0, 0, 0, 1))
    )


def rotation_matrix(angle: float, axis: Vector3) -> Matrix:
    """A 4x4 matrix rotating by angle degrees about the given axis."""
    length = math.sqrt(sum(float(c) * float(c) for c in axis))
    if length == 0:
        raise ValueError("rotation axis must not be the zero vector")
    x, y, z = (float(c) / length for c in axis)
    radians = math.radians(angle)
    c = math.cos(radians)
    s = math.sin(radians)
    t = 1.0 - c
    return _matrix(
        (
            (x * x * t + c, x * y * t - z * s, x * z * t + y * s, 0),
            (y * x * t + z * s, y * y * t + c, y * z * t - x * s, 0),
            (x * z * t - y * s, y * z * t + x * s, z * z * t + c, 0),
            (0, 0, 0, 1),
        )
    )


@dataclass(frozen=True)
class Transformed:
    """Rendered content drawn under a transformation matrix."""

    matrix: Matrix
    content: tuple

    def transform_point(self, point: Vector3) -> Vector3:
        """Apply this transformation to a point."""
        homogeneous = (float(point.x), float(point.y), float(point.z), 1.0)
        x, y, z, w = (
            sum(m * p for m, p in zip(row, homogeneous)) for row in self.matrix
        )
        return Vector3(x / w, y / w, z / w)


class Renderable(ABC):
    """Something that can be rendered."""

    @abstractmethod
    def render(self) -> Any:
        """Render this object and return what was drawn."""


class RenderNode(Renderable):
    """A node holding renderable children, rendered in insertion order."""

    def __init__(self) -> None:
        self._children: list[Renderable] = []

    @property
    def children(self) -> tuple[Renderable, ...]:
        """The children of this node."""
        return tuple(self._children)

    def add_child(self, child: Renderable) -> None:
        """Add a child to this node."""
        self._children.append(child)

    def clear_children(self) -> None:
        """Remove all children from this node."""
        self._children.clear()

    def render(self) -> list:
        """Render all children and return their results in order."""
        return [child.render() for child in self._children]


class CachingRenderNode(RenderNode):
    """A render node that keeps what it drew until invalidated.

    Changes to the children are not noticed; call invalidate() after them.
    """

    def __init__(self) -> None:
        super().__init__()
        self._cache: list = []
        self._valid = False

    def render(self) -> list:
        """Return the cached result, refreshing it first if invalid."""
        if not self._valid:
            self._cache = super().render()
            self._valid = True
        return list(self._cache)

    def invalidate(self) -> None:
        """Force the next render to redraw the children."""
        self._valid = False

    def is_valid(self) -> bool:
        """Whether the cache is still valid."""
        return self._valid


class TranslatingRenderNode(RenderNode):
    """A render node that draws its children translated."""

    def __init__(self, translation: Vector3) -> None:
        super().__init__()
        self.translation = translation.copy()

    def render(self) -> Transformed:
        """Render the children translated."""
        return Transformed(
            translation_matrix(self.translation), tuple(super().render())
        )


class ScalingRenderNode(RenderNode):
    """A render node that draws its children scaled."""

    def __init__(self, scale: Vector3) -> None:
        super().__init__()
        self.scale = scale.copy()

    def render(self) -> Transformed:
        """Render the children scaled."""
        return Transformed(scaling_matrix(self.scale), tuple(super().render()))


class RotatingRenderNode(RenderNode):
    """A render node that draws its children rotated by an angle in degrees."""

    def __init__(self, angle: float, axis: Vector3) -> None:
        super().__init__()
        self._matrix = rotation_matrix(angle, axis)
        self.angle = angle
        self.axis = axis.copy()

    def render(self) -> Transformed:
        """Render the children rotated."""
        return Transformed(
            rotation_matrix(self.angle, self.axis), tuple(super().render())
        )