"""A perspective camera with position and Euler rotation."""

from __future__ import annotations

import math

from terrascene.buffers import PerCameraBuffer
from terrascene.matrix import Matrix4x4
from terrascene.vector import Vector3


class Camera:
    """Perspective camera producing left-handed, 0..1 depth clip coordinates.

    ``rotation`` holds angles in radians around X and Y; ``position`` is in
    world space.
    """

    def __init__(
        self,
        far_clip: float = 1000.0,
        near_clip: float = 0.01,
        fov_degrees: float = 90.0,
        aspect: float = 1.0,
    ) -> None:
        if far_clip == near_clip:
            raise ValueError("far and near clip planes must differ")
        self.far_clip = far_clip
        self.near_clip = near_clip
        self.fov = math.radians(fov_degrees)

        zoom_y = 1.0 / math.tan(self.fov * 0.5)
        zoom_x = zoom_y * aspect
        depth_range = far_clip - near_clip
        self.projection = Matrix4x4(
            zoom_x, 0.0, 0.0, 0.0,
            0.0, zoom_y, 0.0, 0.0,
            0.0, 0.0, far_clip / depth_range, 1.0,
            0.0, 0.0, -near_clip * far_clip / depth_range, 0.0,
        )

        self.position = Vector3(32.0, 1.0, -16.0)
        self.rotation = Vector3()

    def transform(self) -> Matrix4x4:
        """Return the camera-to-world matrix."""
        p = self.position
        translation = Matrix4x4(
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            p.x, p.y, p.z, 1.0,
        )
        return (
            Matrix4x4.rotation_x(self.rotation.x)
            * Matrix4x4.rotation_y(self.rotation.y)
            * translation
        )

    def buffer(self) -> PerCameraBuffer:
        """Return the per-camera constants for the current pose."""
        return PerCameraBuffer(
            world_to_clip=self.transform().fast_inverse() * self.projection,
            eye_position=Vector3(*self.position),
        )