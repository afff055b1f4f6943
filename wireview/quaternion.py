"""Rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Union

from wireview.vectors import Vec3

Matrix = List[List[float]]


@dataclass
class Quaternion:
    """A mutable quaternion ``w + xi + yj + zk``; the default is the identity."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.w
        yield self.x
        yield self.y
        yield self.z

    @classmethod
    def from_axis_angle(cls, radian: float, axis: Vec3) -> Quaternion:
        """Rotation of ``radian`` about ``axis``, which must be normalised."""
        half = radian * 0.5
        s = math.sin(half)
        return cls(math.cos(half), axis.x * s, axis.y * s, axis.z * s)

    @classmethod
    def from_euler(cls, euler: Vec3) -> Quaternion:
        """Rotation from Euler angles in radians: pitch = x, yaw = y, roll = z."""
        yaw = euler.y
        pitch = euler.x
        roll = euler.z

        cy, sy = math.cos(yaw * 0.5), math.sin(yaw * 0.5)
        cp, sp = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
        cr, sr = math.cos(roll * 0.5), math.sin(roll * 0.5)

        return cls(
            cy * cr * cp + sy * sr * sp,
            cy * sr * cp - sy * cr * sp,
            cy * cr * sp + sy * sr * cp,
            sy * cr * cp - cy * sr * sp,
        )

    def __mul__(self, other: Union[Quaternion, int, float]) -> Quaternion:
        if isinstance(other, Quaternion):
            w, x, y, z = self
            ow, ox, oy, oz = other
            return Quaternion(
                w * ow - x * ox - y * oy - z * oz,
                w * ox + x * ow + y * oz - z * oy,
                w * oy - x * oz + y * ow + z * ox,
                w * oz + x * oy - y * ox + z * ow,
            )
        if isinstance(other, (int, float)):
            return Quaternion(
                self.w * other, self.x * other, self.y * other, self.z * other
            )
        return NotImplemented

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def inverse(self) -> Quaternion:
        """Conjugate divided by the norm; the identity for a zero quaternion."""
        n = self.norm()
        if n == 0.0:
            return Quaternion()
        return self.conjugate() * (1.0 / n)

    def norm(self) -> float:
        return math.sqrt(
            self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z
        )

    def normalize(self) -> None:
        """Scale to unit length in place; a zero quaternion is left as is."""
        n = self.norm()
        if n == 0.0:
            return
        self.w /= n
        self.x /= n
        self.y /= n
        self.z /= n

    def to_rotation_matrix(self) -> Matrix:
        """4x4 matrix of the rotation; the bottom row is left all zero."""
        w, x, y, z = self
        xx, yy, zz = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z
        return [
            [1.0 - 2.0 * (yy + zz), 2.0 * (xy + wz), 2.0 * (xz - wy), 0.0],
            [2.0 * (xy - wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz + wx), 0.0],
            [2.0 * (xz + wy), 2.0 * (yz - wx), 1.0 - 2.0 * (xx + yy), 0.0],
            [0.0, 0.0, 0.0, 0.0],
        ]

    def rotate(self, v: Vec3) -> Vec3:
        """Rotate ``v`` by this quaternion (q v q*)."""
        result = self * Quaternion(0.0, v.x, v.y, v.z) * self.conjugate()
        return Vec3(result.x, result.y, result.z)

    def apply_rotation(self, q: Quaternion) -> None:
        """Replace this quaternion with ``self * q``."""
        self.w, self.x, self.y, self.z = self * q

    def __str__(self) -> str:
        return f"x: {self.x:f}, y: {self.y:f}, z: {self.z:f}, w: {self.w:f}"