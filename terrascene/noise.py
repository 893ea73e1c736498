"""PCG32 random numbers, value noise and 2x bilinear upsampling of square grids."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import MutableSequence, Sequence

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1
_MULTIPLIER = 6364136223846793005


@dataclass
class Pcg32:
    """Minimal PCG32 generator (XSH RR output); both words start at zero."""

    state: int = 0
    inc: int = 0

    def next_uint32(self) -> int:
        old = self.state
        self.state = (old * _MULTIPLIER + (self.inc | 1)) & _MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & _MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & _MASK32

    def random_float(self) -> float:
        """Return a float in [0, 1)."""
        return math.ldexp(self.next_uint32(), -32)


def add_noise(buffer: MutableSequence[float], amount: float, rng: Pcg32) -> None:
    """Add uniform noise in [-amount, amount) to every element of ``buffer`` in place."""
    buffer[:] = [value + (2.0 * rng.random_float() - 1.0) * amount for value in buffer]


def upsample_2x(values: Sequence[float], resolution: int) -> list[float]:
    """Upsample a ``resolution`` x ``resolution`` row-major grid to twice the size.

    Corners are copied, edges are linearly interpolated with 3:1 weights and
    the interior is bilinearly interpolated.
    """
    if resolution < 1:
        raise ValueError("resolution must be at least 1")
    if len(values) < resolution * resolution:
        raise ValueError(
            f"expected at least {resolution * resolution} values, got {len(values)}"
        )

    r = resolution
    out_width = 2 * r
    last_row = out_width * (out_width - 1)
    output = [0.0] * (out_width * out_width)

    output[0] = values[0]
    output[last_row] = values[r * (r - 1)]
    output[out_width - 1] = values[r - 1]
    output[last_row + out_width - 1] = values[r * (r - 1) + r - 1]

    def edge(in0: float, in1: float) -> tuple[float, float]:
        return 0.25 * (3.0 * in0 + in1), 0.25 * (in0 + 3.0 * in1)

    for i in range(r - 1):
        row_a = out_width * (2 * i + 1)
        row_b = out_width * (2 * i + 2)

        output[row_a], output[row_b] = edge(values[r * i], values[r * (i + 1)])

        for j in range(r - 1):
            in00 = values[r * i + j]
            in01 = values[r * (i + 1) + j]
            in10 = values[r * i + j + 1]
            in11 = values[r * (i + 1) + j + 1]
            output[row_a + 2 * j + 1] = 0.0625 * (9.0 * in00 + 3.0 * in01 + 3.0 * in10 + in11)
            output[row_b + 2 * j + 1] = 0.0625 * (3.0 * in00 + 9.0 * in01 + in10 + 3.0 * in11)
            output[row_a + 2 * j + 2] = 0.0625 * (3.0 * in00 + in01 + 9.0 * in10 + 3.0 * in11)
            output[row_b + 2 * j + 2] = 0.0625 * (in00 + 3.0 * in01 + 3.0 * in10 + 9.0 * in11)

        output[row_a + out_width - 1], output[row_b + out_width - 1] = edge(
            values[r * i + r - 1], values[r * (i + 1) + r - 1]
        )

    for j in range(r - 1):
        output[2 * j + 1], output[2 * j + 2] = edge(values[j], values[j + 1])
        output[last_row + 2 * j + 1], output[last_row + 2 * j + 2] = edge(
            values[r * (r - 1) + j], values[r * (r - 1) + j + 1]
        )

    return output