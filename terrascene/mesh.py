"""Vertex data and procedural plane meshes for the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from terrascene.matrix import Matrix4x4
from terrascene.vector import Vector2, Vector3, Vector4


@dataclass
class Vertex:
    """One vertex: homogeneous position, normal, texture coordinate and colour."""

    position: Vector4 = field(default_factory=lambda: Vector4(0.0, 0.0, 0.0, 1.0))
    normal: Vector3 = field(default_factory=Vector3)
    uv: Vector2 = field(default_factory=Vector2)
    color: Vector4 = field(default_factory=lambda: Vector4(1.0, 1.0, 1.0, 1.0))


@dataclass
class Mesh:
    """An indexed triangle list."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @classmethod
    def plane(
        cls,
        width: float,
        height: float,
        resolution_width: int,
        resolution_height: int,
        heights: Sequence[float],
        texture_width: int,
    ) -> Mesh:
        """Build a grid in the XZ plane, centred on the origin, displaced by a height map.

        ``heights`` is a square ``texture_width`` x ``texture_width`` row-major
        grid sampled at each vertex's texture coordinate.
        """
        vertices: list[Vertex] = []
        step_x = width / resolution_width
        step_z = height / resolution_height

        for j in range(resolution_width):
            for i in range(resolution_height):
                u = j / resolution_width
                v = i / resolution_width
                sample = math.floor(u * texture_width + v * texture_width * texture_width)
                vertices.append(
                    Vertex(
                        position=Vector4(
                            i * step_x - width * 0.5,
                            heights[sample],
                            j * step_z - height * 0.5,
                            1.0,
                        ),
                        uv=Vector2(u, v),
                        color=Vector4(1.0, 1.0, 1.0, 1.0),
                    )
                )

        def point(index: int) -> Vector3:
            p = vertices[index].position
            return Vector3(p.x, p.y, p.z)

        for j in range(resolution_width - 1):
            for i in range(resolution_height - 1):
                a = i + j * resolution_width
                b = (i + 1) + j * resolution_width
                c = i + (j + 1) * resolution_width
                p0, p1, p2 = point(a), point(b), point(c)
                vertices[a].normal = (p0 - p1).cross(p0 - p2).normalized()

        indices: list[int] = []
        for i in range(resolution_width - 1):
            for j in range(resolution_height - 1):
                f0 = j * resolution_width + i
                f1 = j * resolution_width + i + 1
                f2 = (j + 1) * resolution_width + i + 1
                f3 = (j + 1) * resolution_width + i
                indices.extend((f2, f1, f0, f2, f0, f3))

        return cls(vertices, indices)


def object_to_world(translation: Vector3, scaling: Vector3) -> Matrix4x4:
    """Return the model-to-world matrix that scales and then translates."""
    return Matrix4x4(
        scaling.x, 0.0, 0.0, 0.0,
        0.0, scaling.y, 0.0, 0.0,
        0.0, 0.0, scaling.z, 0.0,
        translation.x, translation.y, translation.z, 1.0,
    )