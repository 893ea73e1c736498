"""Small 2-, 3- and 4-component vectors with the usual arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from numbers import Real
from typing import Callable, Iterator


def _check_divisor(scalar: float) -> None:
    if scalar == 0:
        raise ZeroDivisionError("vector division by zero")


class _Components:
    """Iteration and in-place assignment over the dataclass fields."""

    __slots__ = ()

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, f.name) for f in fields(self))

    def _assign(self, values) -> None:
        for f, value in zip(fields(self), values):
            setattr(self, f.name, value)

    def _scaled(self, factor: float) -> list[float]:
        return [c * factor for c in self]


@dataclass
class Vector2(_Components):
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def to_type(self, target: Callable[[float], float]) -> Vector2:
        """Return a copy with every component converted by ``target`` (e.g. ``int``)."""
        return Vector2(target(self.x), target(self.y))

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def length_sqr(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_sqr())

    def normalized(self) -> Vector2:
        """Return a unit-length copy; a zero vector is returned unchanged."""
        length = self.length()
        if length == 0:
            return Vector2(self.x, self.y)
        return Vector2(self.x / length, self.y / length)

    def normalize(self) -> None:
        """Scale this vector to unit length in place; a zero vector is left alone."""
        length = self.length()
        if length != 0:
            self.x /= length
            self.y /= length

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def __add__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        """Component-wise product with a vector, or scaling by a number."""
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vector2(*self._scaled(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vector2(*self._scaled(other))
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        _check_divisor(scalar)
        return Vector2(self.x / scalar, self.y / scalar)

    def __iadd__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        self._assign(self._scaled(scalar))
        return self

    def __itruediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        _check_divisor(scalar)
        self.x /= scalar
        self.y /= scalar
        return self


@dataclass
class Vector3(_Components):
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_type(self, target: Callable[[float], float]) -> Vector3:
        """Return a copy with every component converted by ``target`` (e.g. ``int``)."""
        return Vector3(target(self.x), target(self.y), target(self.z))

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def length_sqr(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_sqr())

    def normalized(self) -> Vector3:
        """Return a unit-length copy; a zero vector is returned unchanged."""
        length = self.length()
        if length == 0:
            return Vector3(self.x, self.y, self.z)
        return Vector3(self.x / length, self.y / length, self.z / length)

    def normalize(self) -> None:
        """Scale this vector to unit length in place; a zero vector is left alone."""
        length = self.length()
        if length != 0:
            self._assign([c / length for c in self])

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        """Component-wise product with a vector, or scaling by a number."""
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vector3(*self._scaled(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vector3(*self._scaled(other))
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        _check_divisor(scalar)
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iadd__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        self._assign([a + b for a, b in zip(self, other)])
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        self._assign([a - b for a, b in zip(self, other)])
        return self

    def __imul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        self._assign(self._scaled(scalar))
        return self

    def __itruediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        _check_divisor(scalar)
        self._assign([c / scalar for c in self])
        return self


@dataclass
class Vector4(_Components):
    """A four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def to_type(self, target: Callable[[float], float]) -> Vector4:
        """Return a copy with every component converted by ``target`` (e.g. ``int``)."""
        return Vector4(*(target(c) for c in self))

    def __neg__(self) -> Vector4:
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def length_sqr(self) -> float:
        return sum(c * c for c in self)

    def length(self) -> float:
        return math.sqrt(self.length_sqr())

    def normalized(self) -> Vector4:
        """Return a unit-length copy; a zero vector is returned unchanged."""
        length = self.length()
        if length == 0:
            return Vector4(*self)
        return Vector4(*(c / length for c in self))

    def normalize(self) -> None:
        """Scale this vector to unit length in place; a zero vector is left alone."""
        length = self.length()
        if length != 0:
            self._assign([c / length for c in self])

    def dot(self, other: Vector4) -> float:
        return sum(a * b for a, b in zip(self, other))

    def __add__(self, other):
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other):
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(*(a - b for a, b in zip(self, other)))

    def __mul__(self, other):
        """Component-wise product with a vector, or scaling by a number."""
        if isinstance(other, Vector4):
            return Vector4(*(a * b for a, b in zip(self, other)))
        if isinstance(other, Real):
            return Vector4(*self._scaled(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vector4(*self._scaled(other))
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        _check_divisor(scalar)
        return Vector4(*(c / scalar for c in self))

    def __iadd__(self, other):
        if not isinstance(other, Vector4):
            return NotImplemented
        self._assign([a + b for a, b in zip(self, other)])
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector4):
            return NotImplemented
        self._assign([a - b for a, b in zip(self, other)])
        return self

    def __imul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        self._assign(self._scaled(scalar))
        return self

    def __itruediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        _check_divisor(scalar)
        self._assign([c / scalar for c in self])
        return self