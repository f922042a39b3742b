"""Meshes and a reader for Wavefront .obj files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import IO, Iterable, Iterator, Optional

from openlima.resources import ResourceReader
from openlima.vector import Vector3


@dataclass(frozen=True)
class Triangle:
    """One triangle of a mesh, with per-vertex normals when available."""

    vertices: tuple[Vector3, Vector3, Vector3]
    normals: Optional[tuple[Vector3, Vector3, Vector3]] = None


class Mesh(ABC):
    """A mesh that can be rendered."""

    @abstractmethod
    def render(self):
        """Render this mesh."""


class StaticMesh(Mesh):
    """A static triangle mesh with optional normals.

    Indices are zero-based; each index vector names the three corners of
    one triangle.
    """

    def __init__(
        self,
        vertices: Iterable[Vector3],
        normals: Iterable[Vector3],
        vertex_indices: Iterable[Vector3],
        normal_indices: Iterable[Vector3],
        smooth_shading: bool = True,
    ) -> None:
        self.vertices = list(vertices)
        self.normals = list(normals)
        self.vertex_indices = list(vertex_indices)
        self.normal_indices = list(normal_indices)
        self.smooth_shading = smooth_shading

    def _corners(self, pool: list[Vector3], index: Vector3):
        return tuple(pool[i] for i in index)

    def triangles(self) -> Iterator[Triangle]:
        """Yield the triangles of this mesh in order."""
        if self.normal_indices:
            for vertex_index, normal_index in zip(
                self.vertex_indices, self.normal_indices
            ):
                yield Triangle(
                    self._corners(self.vertices, vertex_index),
                    self._corners(self.normals, normal_index),
                )
        else:
            for vertex_index in self.vertex_indices:
                yield Triangle(self._corners(self.vertices, vertex_index))

    def render(self) -> list[Triangle]:
        """Return the triangles to draw for this mesh."""
        return list(self.triangles())


class ObjParseError(ValueError):
    """Raised when a Wavefront .obj stream is malformed."""

    def __init__(self, line_number: int, message: str) -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


@dataclass(frozen=True)
class _FacePart:
    vertex: int
    texture: Optional[int]
    normal: Optional[int]


def _parse_vector(args: list[str]) -> Vector3:
    if len(args) < 3:
        raise ValueError("expected three coordinates")
    x, y, z = (float(a) for a in args[:3])
    return Vector3(x, y, z)


def _resolve(text: str, count: int, kind: str) -> int:
    index = int(text)
    if index == 0:
        raise ValueError(f"{kind} index 0 is not valid")
    resolved = index - 1 if index > 0 else count + index
    if not 0 <= resolved < count:
        raise ValueError(f"{kind} index {index} out of range")
    return resolved


def _face_normal(a: Vector3, b: Vector3, c: Vector3) -> Vector3:
    normal = Vector3.cross_product(a, b, c)
    if normal.length_sq() == 0:
        return normal
    return normal.normalized()


class WavefrontObjReader(ResourceReader):
    """Reads static meshes from Wavefront .obj text.

    Polygons are split into triangle fans. Faces without normals get a
    computed face normal.
    """

    def is_legal(self, name: str) -> bool:
        """Whether the name has the .obj extension."""
        return name.lower().endswith(".obj")

    def read_resource(self, stream: IO) -> StaticMesh:
        """Read a static mesh out of the given stream of lines."""
        vertices: list[Vector3] = []
        normals: list[Vector3] = []
        vertex_indices: list[Vector3] = []
        normal_indices: list[Vector3] = []

        for line_number, raw in enumerate(stream, start=1):
            line = raw.decode("utf-8") if isinstance(raw, bytes) else raw
            fields = line.split("#", 1)[0].split()
            if not fields:
                continue
            keyword, args = fields[0], fields[1:]
            try:
                if keyword == "v":
                    vertices.append(_parse_vector(args))
                elif keyword == "vn":
                    normals.append(_parse_vector(args))
                elif keyword == "f":
                    self._read_face(
                        args, vertices, normals, vertex_indices, normal_indices
                    )
            except ValueError as exc:
                raise ObjParseError(line_number, str(exc)) from exc

        return StaticMesh(vertices, normals, vertex_indices, normal_indices)

    def _read_face_part(
        self, text: str, vertex_count: int, normal_count: int
    ) -> _FacePart:
        pieces = text.split("/")
        if len(pieces) > 3 or not pieces[0]:
            raise ValueError(f"malformed face element {text!r}")
        vertex = _resolve(pieces[0], vertex_count, "vertex")
        texture = int(pieces[1]) if len(pieces) > 1 and pieces[1] else None
        normal = (
            _resolve(pieces[2], normal_count, "normal")
            if len(pieces) > 2 and pieces[2]
            else None
        )
        return _FacePart(vertex, texture, normal)

    def _read_face(
        self,
        args: list[str],
        vertices: list[Vector3],
        normals: list[Vector3],
        vertex_indices: list[Vector3],
        normal_indices: list[Vector3],
    ) -> None:
        if len(args) < 3:
            raise ValueError("a face needs at least three vertices")
        parts = [self._read_face_part(a, len(vertices), len(normals)) for a in args]
        has_normals = all(p.normal is not None for p in parts)

        first = parts[0]
        for second, third in zip(parts[1:-1], parts[2:]):
            corners = (first, second, third)
            vertex_indices.append(Vector3(*(p.vertex for p in corners)))
            if has_normals:
                normal_indices.append(Vector3(*(p.normal for p in corners)))
            else:
                normals.append(_face_normal(*(vertices[p.vertex] for p in corners)))
                n = len(normals) - 1
                normal_indices.append(Vector3(n, n, n))