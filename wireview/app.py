"""Interactive wireframe viewer for OBJ meshes."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Collection, List, Mapping, Optional, Sequence, Union

import pygame

from wireview.camera import Camera
from wireview.face import Face
from wireview.objparser import load_obj
from wireview.quaternion import Quaternion
from wireview.vectors import Vec3

WIDTH = 1600
HEIGHT = 900
MOVE_STEP = 0.1
TURN_STEP = math.radians(1.0)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

Keys = Union[Sequence[bool], Mapping[int, bool], Collection[int]]


def projection_matrix(fov: float, aspect: float, near: float, far: float) -> List[List[float]]:
    """Perspective projection matrix for a vertical field of view in radians."""
    f = math.tan(fov / 2.0)
    matrix = [[0.0] * 4 for _ in range(4)]
    matrix[0][0] = 1.0 / (f * aspect)
    matrix[1][1] = 1.0 / f
    matrix[2][2] = (far + near) / (near - far)
    matrix[2][3] = (2.0 * far * near) / (near - far)
    matrix[3][2] = -1.0
    return matrix


def _down(keys: Keys, code: int) -> bool:
    if isinstance(keys, (set, frozenset)):
        return code in keys
    return bool(keys[code])


def apply_input(camera: Camera, keys: Keys) -> None:
    """Move and turn the camera for the pressed keys.

    ``keys`` is indexed by pygame key codes (as from ``pygame.key.get_pressed``)
    or is a set of pressed key codes. At most one movement and one rotation
    apply per call, in a fixed order of precedence.
    """
    moves = (
        (pygame.K_w, camera.move_forward, MOVE_STEP),
        (pygame.K_s, camera.move_forward, -MOVE_STEP),
        (pygame.K_a, camera.move_right, -MOVE_STEP),
        (pygame.K_d, camera.move_right, MOVE_STEP),
        (pygame.K_q, camera.move_up, -MOVE_STEP),
        (pygame.K_e, camera.move_up, MOVE_STEP),
    )
    for code, move, distance in moves:
        if _down(keys, code):
            move(distance)
            break

    turns = (
        (pygame.K_UP, -TURN_STEP, Vec3(1, 0, 0)),
        (pygame.K_DOWN, TURN_STEP, Vec3(1, 0, 0)),
        (pygame.K_LEFT, TURN_STEP, Vec3(0, 1, 0)),
        (pygame.K_RIGHT, -TURN_STEP, Vec3(0, 1, 0)),
        (pygame.K_r, -TURN_STEP, Vec3(0, 0, 1)),
        (pygame.K_f, TURN_STEP, Vec3(0, 0, 1)),
    )
    for code, angle, axis in turns:
        if _down(keys, code):
            camera.rotation.apply_rotation(Quaternion.from_axis_angle(angle, axis))
            break


def render_scene(
    surface: pygame.Surface,
    vertices: Sequence[Vec3],
    faces: Sequence[Face],
    proj_matrix: Sequence[Sequence[float]],
    camera: Camera,
) -> int:
    """Clear ``surface`` and draw every face turned toward the camera; return how many were drawn."""
    surface.fill(BLACK)
    drawn = 0
    for face in faces:
        if face.is_facing(vertices, camera.position):
            face.draw(vertices, proj_matrix, surface, camera, WHITE)
            drawn += 1
    return drawn


def _draw_overlay(surface: pygame.Surface, font: pygame.font.Font, camera: Camera) -> None:
    pos = font.render(f"Pos: {camera.position}", True, WHITE)
    rot = font.render(f"Rot: {camera.rotation}", True, WHITE)
    surface.blit(pos, (10, 10))
    surface.blit(rot, (10, 30 + pos.get_height()))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Wireframe OBJ viewer.")
    parser.add_argument("obj", nargs="?", default="../tank.obj", help="OBJ file to show")
    args = parser.parse_args(argv)

    try:
        raw_vertices, raw_faces = load_obj(args.obj)
    except OSError:
        print(f"Failed to open OBJ file: {args.obj}", file=sys.stderr)
        raw_vertices, raw_faces = [], []
    faces = [Face(indices) for indices in raw_faces]

    pygame.init()
    try:
        try:
            font = pygame.font.Font(None, 18)
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error as exc:
            print(f"Display could not be created: {exc}", file=sys.stderr)
            return 1
        pygame.display.set_caption("Simple Graphics Window")

        camera = Camera()
        camera.position.z = 50.0
        proj = projection_matrix(3.14159 / 2.0, 16.0 / 9.0, 1.0, 250.0)

        render_scene(screen, raw_vertices, faces, proj, camera)
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            apply_input(camera, pygame.key.get_pressed())
            render_scene(screen, raw_vertices, faces, proj, camera)
            _draw_overlay(screen, font, camera)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())