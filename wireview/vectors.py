"""Three- and four-component vectors used by the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


@dataclass
class Vec3:
    """A mutable 3D vector.

    ``a * b`` is the dot product when ``b`` is a vector and a scaled vector
    when ``b`` is a number; ``a ^ b`` is the cross product.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vec3, Number]):
        if isinstance(other, Vec3):
            return self.dot(other)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __xor__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.cross(other)

    def normalize(self) -> Vec3:
        """Return a unit-length copy; a zero vector raises ZeroDivisionError."""
        length = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        return Vec3(self.x / length, self.y / length, self.z / length)

    def __str__(self) -> str:
        return f"x: {self.x:f}, y: {self.y:f}, z: {self.z:f}"


@dataclass
class Vec4:
    """A homogeneous 4D vector; ``w`` defaults to 1."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @classmethod
    def from_vec3(cls, v: Vec3) -> Vec4:
        """Lift a point into homogeneous coordinates (w = 1)."""
        return cls(v.x, v.y, v.z, 1.0)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g}, {self.w:g})"