"""Vectors, matrices, noise heightmaps, meshes, OBJ loading, camera, input and timing for a terrain scene."""

__version__ = "0.1.0"