"""A minimal Wavefront OBJ reader for positions, normals and ``v//n`` faces."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Iterable

from terrascene.vector import Vector3

_FACE_ENTRY = re.compile(r"\s*(\d+)..\s*(\d+)")


@dataclass(frozen=True)
class ObjFace:
    """One face corner: zero-based vertex and normal indices."""

    vertex: int
    normal: int


@dataclass
class ObjModel:
    vertices: list[Vector3] = field(default_factory=list)
    normals: list[Vector3] = field(default_factory=list)
    faces: list[ObjFace] = field(default_factory=list)


def _parse_vector(tokens: list[str], line: str) -> Vector3:
    if len(tokens) < 3:
        raise ValueError(f"expected three coordinates in OBJ line {line!r}")
    try:
        return Vector3(float(tokens[0]), float(tokens[1]), float(tokens[2]))
    except ValueError as exc:
        raise ValueError(f"bad coordinate in OBJ line {line!r}") from exc


def _to_zero_based(index: int, line: str) -> int:
    if index < 1:
        raise ValueError(f"OBJ indices start at 1 in line {line!r}")
    return index - 1


def _parse_faces(rest: str, line: str) -> list[ObjFace]:
    faces = []
    position = 0
    while (match := _FACE_ENTRY.match(rest, position)) is not None:
        faces.append(
            ObjFace(
                _to_zero_based(int(match.group(1)), line),
                _to_zero_based(int(match.group(2)), line),
            )
        )
        position = match.end()
    return faces


def parse_obj(lines: Iterable[str]) -> ObjModel:
    """Parse OBJ text lines; lines other than ``v``, ``vn`` and ``f`` are ignored."""
    model = ObjModel()
    for raw in lines:
        line = raw.rstrip("\r\n")
        parts = line.split(maxsplit=1)
        if not parts:
            continue
        prefix = parts[0]
        rest = parts[1] if len(parts) > 1 else ""
        if prefix == "v":
            model.vertices.append(_parse_vector(rest.split(), line))
        elif prefix == "vn":
            model.normals.append(_parse_vector(rest.split(), line))
        elif prefix == "f":
            model.faces.extend(_parse_faces(rest, line))
    return model


def load_obj(path: str | os.PathLike[str]) -> ObjModel:
    """Read and parse an OBJ file."""
    with open(path, encoding="utf-8") as handle:
        return parse_obj(handle)