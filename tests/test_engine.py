import pytest

from terrascene.engine import (
    CAMERA_SPEED,
    GraphicsEngine,
    build_noise,
    clamp01,
    cube_mesh,
    noise_to_rgba,
)
from terrascene.inputhandler import InputHandler, Message
from terrascene.noise import Pcg32
from terrascene.vector import Vector3


@pytest.fixture
def engine():
    return GraphicsEngine()


def _input(*keys, button=True, mouse=None):
    handler = InputHandler()
    if button:
        handler.handle_event(Message.RBUTTON_DOWN, 0, 0)
    for key in keys:
        handler.handle_event(Message.KEY_DOWN, ord(key), 0)
    if mouse is not None:
        handler.handle_event(Message.INPUT, 0, mouse)
    handler.update()
    return handler


@pytest.mark.parametrize("value, expected", [(2.0, 1.0), (-3.0, 0.0), (0.5, 0.5), (1.0, 1.0)])
def test_clamp01(value, expected):
    assert clamp01(value) == expected


def test_build_noise_size_and_determinism():
    first = build_noise(4, 2, Pcg32())
    second = build_noise(4, 2, Pcg32())
    assert len(first) == (4 * 4) ** 2
    assert first == second


def test_build_noise_without_octaves_is_flat():
    assert build_noise(4, 0, Pcg32()) == [0.0] * 16


def test_build_noise_rejects_bad_size():
    with pytest.raises(ValueError):
        build_noise(0, 2, Pcg32())


def test_noise_to_rgba_extremes_are_opaque():
    pixels = noise_to_rgba([-5.0, 1.0])
    assert pixels == bytes((0, 0, 0, 255, 255, 255, 255, 255))


def test_noise_to_rgba_is_grey():
    pixels = noise_to_rgba(build_noise(4, 1, Pcg32()))
    assert len(pixels) == 4 * 64
    for offset in range(0, len(pixels), 4):
        r, g, b, a = pixels[offset:offset + 4]
        assert r == g == b
        assert a == 255


def test_cube_mesh_shape():
    mesh = cube_mesh()
    assert len(mesh.vertices) == 8
    assert len(mesh.indices) == 36
    assert set(mesh.indices) == set(range(8))
    corners = {(v.position.x, v.position.y, v.position.z) for v in mesh.vertices}
    assert len(corners) == 8
    for v in mesh.vertices:
        assert {abs(v.position.x), abs(v.position.y), abs(v.position.z)} == {1.0}
        assert v.color.x == float(v.position.x > 0)


def test_engine_scene_sizes(engine):
    assert engine.noise_size == 16 * 16
    assert len(engine.noise) == engine.noise_size ** 2
    assert len(engine.noise_texture) == 4 * len(engine.noise)
    assert len(engine.terrain.vertices) == 128 * 128


def test_update_without_button_only_advances_time(engine):
    start = Vector3(*engine.camera.position)
    engine.update(_input("W", button=False), 0.25)
    engine.update(_input("W", button=False), 0.25)
    assert engine.camera.position == start
    assert engine.per_frame_buffer().time == pytest.approx(0.5)


def test_update_moves_forward(engine):
    start = Vector3(*engine.camera.position)
    engine.update(_input("W"), 0.5)
    pos = engine.camera.position
    assert pos.x == pytest.approx(start.x)
    assert pos.y == pytest.approx(start.y)
    assert pos.z == pytest.approx(start.z + CAMERA_SPEED * 0.5)


def test_update_diagonal_movement_is_normalised(engine):
    start = Vector3(*engine.camera.position)
    engine.update(_input("W", "D", "E"), 1.0)
    moved = engine.camera.position - start
    assert moved.length() == pytest.approx(CAMERA_SPEED)


def test_update_mouse_turns_camera(engine):
    engine.update(_input(mouse=(10, -20)), 0.1)
    rotation = engine.camera.rotation
    assert rotation.y == pytest.approx(10 * 0.01)
    assert rotation.x == pytest.approx(-20 * 0.01)


def test_object_buffers(engine):
    (terrain, terrain_buf), (cube, cube_buf) = engine.object_buffers()
    assert terrain is engine.terrain
    assert cube is engine.cube
    m = terrain_buf.model_to_world
    assert (m[4, 1], m[4, 2], m[4, 3]) == (32.0, 0.0, 0.0)
    c = cube_buf.model_to_world
    assert (c[1, 1], c[2, 2], c[3, 3]) == (24.0, 24.0, 24.0)
    assert (c[4, 1], c[4, 2], c[4, 3]) == (-8.0, 4.0, 0.0)