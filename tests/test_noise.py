import math

import pytest

from terrascene.noise import Pcg32, add_noise, upsample_2x


def _transpose(grid, size):
    return [grid[col * size + row] for row in range(size) for col in range(size)]


def test_zero_seeded_generator_starts_with_zero():
    rng = Pcg32()
    assert rng.next_uint32() == 0
    assert rng.random_float() == 0.0


def test_generator_is_deterministic():
    a = Pcg32(state=12345, inc=7)
    b = Pcg32(state=12345, inc=7)
    assert [a.next_uint32() for _ in range(50)] == [b.next_uint32() for _ in range(50)]


def test_outputs_are_32_bit_and_floats_in_unit_range():
    rng = Pcg32(state=987654321, inc=3)
    for _ in range(500):
        assert 0 <= rng.next_uint32() < 2**32
        assert 0.0 <= rng.random_float() < 1.0


def test_generator_produces_varied_values():
    rng = Pcg32()
    values = {rng.next_uint32() for _ in range(100)}
    assert len(values) > 90


def test_add_noise_with_zero_amount_leaves_buffer():
    buffer = [1.0, -2.0, 3.5]
    add_noise(buffer, 0.0, Pcg32())
    assert buffer == [1.0, -2.0, 3.5]


def test_add_noise_first_draw_of_fresh_generator_is_minus_amount():
    buffer = [5.0]
    add_noise(buffer, 2.0, Pcg32())
    assert buffer == [3.0]


def test_add_noise_stays_within_amount_and_keeps_length():
    buffer = [0.0] * 256
    add_noise(buffer, 0.5, Pcg32(state=42))
    assert len(buffer) == 256
    assert all(-0.5 <= v < 0.5 for v in buffer)


def test_add_noise_modifies_in_place_deterministically():
    first = [0.0] * 16
    second = [0.0] * 16
    original = first
    add_noise(first, 1.0, Pcg32(state=9))
    add_noise(second, 1.0, Pcg32(state=9))
    assert first is original
    assert first == second


@pytest.mark.parametrize("resolution", [1, 2, 3, 5])
def test_upsample_output_size(resolution):
    out = upsample_2x([0.0] * (resolution * resolution), resolution)
    assert len(out) == 4 * resolution * resolution


@pytest.mark.parametrize("resolution", [1, 2, 4])
def test_upsample_preserves_constant(resolution):
    out = upsample_2x([0.75] * (resolution * resolution), resolution)
    assert all(math.isclose(v, 0.75) for v in out)


def test_upsample_copies_corners():
    grid = [float(n) for n in range(9)]
    out = upsample_2x(grid, 3)
    assert out[0] == grid[0]
    assert out[5] == grid[2]
    assert out[30] == grid[6]
    assert out[35] == grid[8]


def test_upsample_commutes_with_transpose():
    size = 4
    grid = [float((n * 7) % 11) for n in range(size * size)]
    direct = _transpose(upsample_2x(grid, size), 2 * size)
    via_transpose = upsample_2x(_transpose(grid, size), size)
    assert all(math.isclose(a, b) for a, b in zip(direct, via_transpose))


def test_upsample_stays_within_input_range():
    grid = [float((n * 5) % 13) - 6.0 for n in range(25)]
    out = upsample_2x(grid, 5)
    assert min(grid) <= min(out) and max(out) <= max(grid)


def test_upsample_edge_uses_three_to_one_weights():
    out = upsample_2x([0.0, 4.0, 0.0, 4.0], 2)
    assert out[0:4] == [0.0, 1.0, 3.0, 4.0]


def test_upsample_rejects_short_input():
    with pytest.raises(ValueError):
        upsample_2x([0.0, 1.0, 2.0], 2)


def test_upsample_rejects_non_positive_resolution():
    with pytest.raises(ValueError):
        upsample_2x([], 0)