"""Polygon faces of a mesh and their wireframe projection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import pygame

from wireview.camera import Camera
from wireview.vectors import Vec3, Vec4

Matrix = Sequence[Sequence[float]]
Color = Tuple[int, int, int]

NEAR_PLANE = 0.1


def _transform(matrix: Matrix, v: Vec4) -> Vec4:
    x, y, z, w = (
        row[0] * v.x + row[1] * v.y + row[2] * v.z + row[3] * v.w
        for row in matrix[:4]
    )
    return Vec4(x, y, z, w)


@dataclass
class Face:
    """A polygon given by zero-based indices into a vertex list."""

    indices: List[int] = field(default_factory=list)

    def is_facing(self, vertices: Sequence[Vec3], camera_position: Vec3) -> bool:
        """True when the face's front side, from its first three vertices, faces the camera."""
        a, b, c = (vertices[i] for i in self.indices[:3])
        normal = (b - a) ^ (c - a)
        center = (a + b + c) * (1.0 / 3.0)
        return normal.dot(center - camera_position) < 0

    def project(
        self,
        vertices: Sequence[Vec3],
        proj_matrix: Matrix,
        camera: Camera,
        width: int,
        height: int,
    ) -> List[Vec3]:
        """Screen-space points of the face, or an empty list if any vertex is not in front of the camera.

        Each point holds the pixel x and y and the normalised depth z.
        """
        view = camera.view_matrix()
        in_view = [_transform(view, Vec4.from_vec3(vertices[i])) for i in self.indices]
        if any(v.z >= -NEAR_PLANE for v in in_view):
            return []

        points: List[Vec3] = []
        for v in in_view:
            clip = _transform(proj_matrix, v)
            x, y, z = clip.x, clip.y, clip.z
            if clip.w != 0:
                x /= clip.w
                y /= clip.w
                z /= clip.w
            points.append(Vec3((x + 1.0) * 0.5 * width, (1.0 - y) * 0.5 * height, z))
        return points

    def draw(
        self,
        vertices: Sequence[Vec3],
        proj_matrix: Matrix,
        surface: pygame.Surface,
        camera: Camera,
        color: Color = (255, 255, 255),
    ) -> List[Vec3]:
        """Draw the face outline on ``surface`` and return the projected points."""
        width, height = surface.get_size()
        points = self.project(vertices, proj_matrix, camera, width, height)
        for p1, p2 in zip(points, points[1:] + points[:1]):
            pygame.draw.line(
                surface, color, (int(p1.x), int(p1.y)), (int(p2.x), int(p2.y))
            )
        return points