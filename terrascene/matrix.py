"""Row-major 3x3 and 4x4 matrices using the row-vector convention (v * M)."""

from __future__ import annotations

import math
import operator
from typing import Callable, ClassVar, Iterator

from terrascene.vector import Vector3, Vector4


class _SquareMatrix:
    """Storage and arithmetic helpers of square matrices; indices start at 1."""

    _size: ClassVar[int]

    __slots__ = ("_values",)

    def __init__(self, *values: float) -> None:
        n = self._size
        if not values:
            self._values = [1.0 if r == c else 0.0 for r in range(n) for c in range(n)]
        elif len(values) != n * n:
            raise ValueError(f"{type(self).__name__} needs {n * n} values, got {len(values)}")
        else:
            self._values = list(values)

    def __iter__(self) -> Iterator[float]:
        """Iterate over the elements in row-major order."""
        return iter(self._values)

    def rows(self) -> tuple[tuple[float, ...], ...]:
        n = self._size
        return tuple(tuple(self._values[r * n:(r + 1) * n]) for r in range(n))

    def _offset(self, key: tuple[int, int]) -> int:
        row, column = key
        n = self._size
        if not (1 <= row <= n and 1 <= column <= n):
            raise IndexError(f"matrix index {key!r} out of range 1..{n}")
        return (row - 1) * n + (column - 1)

    def _elementwise(self, other: _SquareMatrix, op: Callable[[float, float], float]) -> list[float]:
        return [op(a, b) for a, b in zip(self._values, other._values)]

    def _product(self, other: _SquareMatrix) -> list[float]:
        columns = list(zip(*other.rows()))
        return [
            sum(a * b for a, b in zip(row, column))
            for row in self.rows()
            for column in columns
        ]

    def _row_times(self, vector) -> list[float]:
        components = list(vector)
        return [sum(v * m for v, m in zip(components, column)) for column in zip(*self.rows())]

    def _transposed(self) -> list[float]:
        return [v for column in zip(*self.rows()) for v in column]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(v) for v in self._values)})"


class Matrix3x3(_SquareMatrix):
    """A 3x3 matrix; the default is the identity."""

    _size = 3
    __slots__ = ()

    @staticmethod
    def from_matrix4(matrix: Matrix4x4) -> Matrix3x3:
        """Take the upper-left 3x3 block of a 4x4 matrix."""
        return Matrix3x3(*(matrix[r, c] for r in range(1, 4) for c in range(1, 4)))

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self._values[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._values[self._offset(key)] = value

    def __add__(self, other):
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return Matrix3x3(*self._elementwise(other, operator.add))

    def __iadd__(self, other):
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        self._values = self._elementwise(other, operator.add)
        return self

    def __sub__(self, other):
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return Matrix3x3(*self._elementwise(other, operator.sub))

    def __isub__(self, other):
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        self._values = self._elementwise(other, operator.sub)
        return self

    def __mul__(self, other):
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return Matrix3x3(*self._product(other))

    def __imul__(self, other):
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        self._values = self._product(other)
        return self

    def __rmul__(self, vector):
        """Multiply a row vector by this matrix: ``vector * matrix``."""
        if not isinstance(vector, Vector3):
            return NotImplemented
        return Vector3(*self._row_times(vector))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def transpose(self) -> Matrix3x3:
        return Matrix3x3(*self._transposed())

    @staticmethod
    def rotation_x(angle: float) -> Matrix3x3:
        c, s = math.cos(angle), math.sin(angle)
        return Matrix3x3(
            1.0, 0.0, 0.0,
            0.0, c, s,
            0.0, -s, c,
        )

    @staticmethod
    def rotation_y(angle: float) -> Matrix3x3:
        c, s = math.cos(angle), math.sin(angle)
        return Matrix3x3(
            c, 0.0, -s,
            0.0, 1.0, 0.0,
            s, 0.0, c,
        )

    @staticmethod
    def rotation_z(angle: float) -> Matrix3x3:
        c, s = math.cos(angle), math.sin(angle)
        return Matrix3x3(
            c, s, 0.0,
            -s, c, 0.0,
            0.0, 0.0, 1.0,
        )


class Matrix4x4(_SquareMatrix):
    """A 4x4 matrix; the default is the identity. Translation lives in row 4."""

    _size = 4
    __slots__ = ()

    @staticmethod
    def from_matrix3(matrix: Matrix3x3) -> Matrix4x4:
        """Embed a 3x3 matrix in the upper-left block of an identity 4x4 matrix."""
        result = Matrix4x4()
        for r in range(1, 4):
            for c in range(1, 4):
                result[r, c] = matrix[r, c]
        return result

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self._values[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._values[self._offset(key)] = value

    def __add__(self, other):
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(*self._elementwise(other, operator.add))

    def __iadd__(self, other):
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        self._values = self._elementwise(other, operator.add)
        return self

    def __sub__(self, other):
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(*self._elementwise(other, operator.sub))

    def __isub__(self, other):
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        self._values = self._elementwise(other, operator.sub)
        return self

    def __mul__(self, other):
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(*self._product(other))

    def __imul__(self, other):
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        self._values = self._product(other)
        return self

    def __rmul__(self, vector):
        """Multiply a row vector by this matrix: ``vector * matrix``."""
        if not isinstance(vector, Vector4):
            return NotImplemented
        return Vector4(*self._row_times(vector))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def transpose(self) -> Matrix4x4:
        return Matrix4x4(*self._transposed())

    def fast_inverse(self) -> Matrix4x4:
        """Invert a rigid transform (rotation plus translation) cheaply."""
        v = self._values
        result = Matrix4x4(*v)
        for a, b in ((1, 4), (2, 8), (6, 9)):
            result._values[a], result._values[b] = v[b], v[a]
        rotation = Matrix3x3.from_matrix4(result)
        translation = Vector3(-v[12], -v[13], -v[14]) * rotation
        result._values[12:15] = [translation.x, translation.y, translation.z]
        return result

    @staticmethod
    def rotation_x(angle: float) -> Matrix4x4:
        return Matrix4x4.from_matrix3(Matrix3x3.rotation_x(angle))

    @staticmethod
    def rotation_y(angle: float) -> Matrix4x4:
        return Matrix4x4.from_matrix3(Matrix3x3.rotation_y(angle))

    @staticmethod
    def rotation_z(angle: float) -> Matrix4x4:
        return Matrix4x4.from_matrix3(Matrix3x3.rotation_z(angle))