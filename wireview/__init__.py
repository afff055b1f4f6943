"""Wireframe OBJ viewer: vectors, quaternions, a camera, an OBJ reader and a pygame window."""

__version__ = "0.1.0"