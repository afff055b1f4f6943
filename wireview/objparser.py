"""Reading vertices and faces from Wavefront OBJ text."""

from __future__ import annotations

import os
import re
from typing import Iterable, List, Tuple, Union

from wireview.vectors import Vec3

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _face_index(token: str) -> int:
    """Zero-based vertex index from a face token such as ``7``, ``7/2`` or ``7//3``."""
    head = token.split("/", 1)[0]
    match = _LEADING_INT.match(head)
    if match is None:
        raise ValueError(f"invalid face vertex reference: {token!r}")
    return int(match.group(1)) - 1


def _vertex(fields: List[str]) -> Vec3:
    if len(fields) < 3:
        raise ValueError(f"vertex needs three coordinates, got {len(fields)}")
    x, y, z = (float(value) for value in fields[:3])
    return Vec3(x, y, z)


def parse_obj(lines: Iterable[str]) -> Tuple[List[Vec3], List[List[int]]]:
    """Parse OBJ lines into vertices and faces.

    Only ``v`` and ``f`` records are read; every other line is ignored.
    Each face is a list of zero-based vertex indices.
    """
    vertices: List[Vec3] = []
    faces: List[List[int]] = []
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        prefix, rest = fields[0], fields[1:]
        if prefix == "v":
            vertices.append(_vertex(rest))
        elif prefix == "f":
            faces.append([_face_index(token) for token in rest])
    return vertices, faces


def load_obj(
    path: Union[str, "os.PathLike[str]"],
) -> Tuple[List[Vec3], List[List[int]]]:
    """Read an OBJ file; raises OSError if it cannot be opened."""
    with open(path, encoding="utf-8") as handle:
        return parse_obj(handle)