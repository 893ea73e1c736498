"""Constant-buffer records and their byte layouts as the shaders expect them."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import ClassVar

from terrascene.matrix import Matrix4x4
from terrascene.vector import Vector3

# Every record is 16-byte aligned, so each layout is padded to a multiple of 16.
_CAMERA_LAYOUT = struct.Struct("<16f3f4x")
_FRAME_LAYOUT = struct.Struct("<f12x")
_OBJECT_LAYOUT = struct.Struct("<16f")


@dataclass
class PerCameraBuffer:
    """World-to-clip transform and eye position, bound once per camera."""

    world_to_clip: Matrix4x4 = field(default_factory=Matrix4x4)
    eye_position: Vector3 = field(default_factory=Vector3)

    SIZE: ClassVar[int] = _CAMERA_LAYOUT.size

    def pack(self) -> bytes:
        """Return the record as little-endian float32 data, padded to 16 bytes."""
        return _CAMERA_LAYOUT.pack(*self.world_to_clip, *self.eye_position)


@dataclass
class PerFrameBuffer:
    """Values that change once per frame."""

    time: float = 0.0

    SIZE: ClassVar[int] = _FRAME_LAYOUT.size

    def pack(self) -> bytes:
        return _FRAME_LAYOUT.pack(self.time)


@dataclass
class PerObjectBuffer:
    """The model-to-world transform of one drawn object."""

    model_to_world: Matrix4x4 = field(default_factory=Matrix4x4)

    SIZE: ClassVar[int] = _OBJECT_LAYOUT.size

    def pack(self) -> bytes:
        return _OBJECT_LAYOUT.pack(*self.model_to_world)