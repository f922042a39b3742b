"""RGBA colours with float components and packed-integer conversions."""

from __future__ import annotations

from dataclasses import dataclass


def _to_byte(component: float) -> int:
    """Scale a 0..1 component to 0..255, truncating toward zero."""
    return int(component * 255.0) & 0xFF


@dataclass
class Color:
    """A colour whose components are expected to lie between 0 and 1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def int_r(self) -> int:
        """Red component as an integer from 0 to 255."""
        return _to_byte(self.r)

    def int_g(self) -> int:
        """Green component as an integer from 0 to 255."""
        return _to_byte(self.g)

    def int_b(self) -> int:
        """Blue component as an integer from 0 to 255."""
        return _to_byte(self.b)

    def int_a(self) -> int:
        """Alpha component as an integer from 0 to 255."""
        return _to_byte(self.a)

    def int_rgba(self) -> int:
        """The colour packed as 0xRRGGBBAA."""
        return (
            self.int_r() << 24 | self.int_g() << 16 | self.int_b() << 8 | self.int_a()
        ) & 0xFFFFFFFF

    def int_argb(self) -> int:
        """The colour packed as 0xAARRGGBB."""
        return (
            self.int_a() << 24 | self.int_r() << 16 | self.int_g() << 8 | self.int_b()
        ) & 0xFFFFFFFF

    def as_tuple(self) -> tuple[float, float, float, float]:
        """The components in (r, g, b, a) order."""
        return (self.r, self.g, self.b, self.a)

    def __iter__(self):
        return iter(self.as_tuple())

    def copy(self) -> Color:
        """Return an independent copy of this colour."""
        return Color(self.r, self.g, self.b, self.a)

    def __iadd__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        self.r += other.r
        self.g += other.g
        self.b += other.b
        self.a += other.a
        return self

    def __isub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        self.r -= other.r
        self.g -= other.g
        self.b -= other.b
        self.a -= other.a
        return self

    def __imul__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        self.r *= other.r
        self.g *= other.g
        self.b *= other.b
        self.a *= other.a
        return self

    def __itruediv__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        self.r /= other.r
        self.g /= other.g
        self.b /= other.b
        self.a /= other.a
        return self

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __mul__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __truediv__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        result = self.copy()
        result /= other
        return result