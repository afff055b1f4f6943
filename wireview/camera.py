"""A free-flying camera holding a position and an orientation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from wireview.quaternion import Quaternion
from wireview.vectors import Vec3

Matrix = List[List[float]]


def _fmt(v: float) -> str:
    return f"{v:g}"


@dataclass
class Camera:
    """Camera looking down its local -Z axis."""

    position: Vec3 = field(default_factory=Vec3)
    rotation: Quaternion = field(default_factory=Quaternion)

    def translation_matrix(self) -> Matrix:
        """4x4 matrix moving the world by minus the camera position."""
        matrix = [[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)]
        matrix[0][3] = -self.position.x
        matrix[1][3] = -self.position.y
        matrix[2][3] = -self.position.z
        return matrix

    def rotation_matrix(self) -> Matrix:
        return self.rotation.to_rotation_matrix()

    def view_matrix(self) -> Matrix:
        """Rotation matrix times translation matrix."""
        rotation = self.rotation_matrix()
        columns = list(zip(*self.translation_matrix()))
        return [
            [sum(r * c for r, c in zip(row, col)) for col in columns]
            for row in rotation
        ]

    def forward_vector(self) -> Vec3:
        return self.rotation.rotate(Vec3(0, 0, -1))

    def right_vector(self) -> Vec3:
        return self.rotation.rotate(Vec3(1, 0, 0))

    def up_vector(self) -> Vec3:
        return self.rotation.rotate(Vec3(0, 1, 0))

    def _move(self, direction: Vec3, distance: float) -> None:
        self.position.x += direction.x * distance
        self.position.y += direction.y * distance
        self.position.z += direction.z * distance

    def move_forward(self, distance: float) -> None:
        self._move(self.forward_vector(), distance)

    def move_right(self, distance: float) -> None:
        self._move(self.right_vector(), distance)

    def move_up(self, distance: float) -> None:
        self._move(self.up_vector(), distance)

    def __str__(self) -> str:
        p = self.position
        r = self.rotation
        return (
            f"Camera Position: ({_fmt(p.x)}, {_fmt(p.y)}, {_fmt(p.z)})\n"
            f"Camera Rotation: Quaternion: {_fmt(r.w)} {_fmt(r.x)} "
            f"{_fmt(r.y)} {_fmt(r.z)}"
        )