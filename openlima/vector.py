"""Two- and three-dimensional vectors with component-wise arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


def _is_int(value: Number) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _div(a: Number, b: Number) -> Number:
    """Divide, truncating toward zero when both operands are integers."""
    if _is_int(a) and _is_int(b):
        quotient = abs(a) // abs(b)
        return quotient if (a >= 0) == (b >= 0) else -quotient
    return a / b


@dataclass
class Vector2:
    """A 2-dimensional vector."""

    x: Number = 0
    y: Number = 0

    def __iter__(self):
        return iter((self.x, self.y))

    def copy(self) -> Vector2:
        """Return an independent copy of this vector."""
        return Vector2(self.x, self.y)

    def __iadd__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x *= other.x
        self.y *= other.y
        return self

    def __itruediv__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x = _div(self.x, other.x)
        self.y = _div(self.y, other.y)
        return self

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __mul__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __truediv__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        result = self.copy()
        result /= other
        return result


@dataclass
class Vector3:
    """A 3-dimensional vector."""

    x: Number = 0
    y: Number = 0
    z: Number = 0

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    @staticmethod
    def cross_product(p1: Vector3, p2: Vector3, p3: Vector3) -> Vector3:
        """Surface normal (not normalised) of the triangle p1, p2, p3."""
        v1 = p2 - p1
        v2 = p3 - p1
        return Vector3(
            v1.y * v2.z - v1.z * v2.y,
            -(v2.z * v1.x - v2.x * v1.z),
            v1.x * v2.y - v1.y * v2.x,
        )

    def _is_integral(self) -> bool:
        return all(_is_int(c) for c in self)

    def length_sq(self) -> Number:
        """The squared length of this vector."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> Number:
        """The length of this vector; truncated for integer vectors."""
        squared = self.length_sq()
        if self._is_integral():
            return math.isqrt(squared)
        return math.sqrt(squared)

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        factor = self.length()
        self.x = _div(self.x, factor)
        self.y = _div(self.y, factor)
        self.z = _div(self.z, factor)

    def normalized(self) -> Vector3:
        """Return a unit-length copy of this vector."""
        result = self.copy()
        result.normalize()
        return result

    def copy(self) -> Vector3:
        """Return an independent copy of this vector."""
        return Vector3(self.x, self.y, self.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iadd__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x *= other.x
        self.y *= other.y
        self.z *= other.z
        return self

    def __itruediv__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x = _div(self.x, other.x)
        self.y = _div(self.y, other.y)
        self.z = _div(self.z, other.z)
        return self

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __mul__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __truediv__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        result = self.copy()
        result /= other
        return result