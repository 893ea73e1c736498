"""Scene setup and per-frame camera control for the terrain and water-cube scene."""

from __future__ import annotations

from terrascene.buffers import PerFrameBuffer, PerObjectBuffer
from terrascene.camera import Camera
from terrascene.inputhandler import InputHandler
from terrascene.matrix import Matrix3x3
from terrascene.mesh import Mesh, Vertex, object_to_world
from terrascene.noise import Pcg32, add_noise, upsample_2x
from terrascene.vector import Vector2, Vector3, Vector4

CAMERA_SPEED = 10.0
MOUSE_SENSITIVITY = 0.01
NOISE_INITIAL_SIZE = 16
NOISE_OCTAVES = 4

_CAMERA_BUTTON = 2  # right mouse button

_CUBE_INDICES = (
    0, 4, 5, 5, 1, 0,  # front
    4, 6, 7, 7, 5, 4,  # top
    3, 7, 6, 6, 2, 3,  # back
    2, 0, 1, 1, 3, 2,  # bottom
    2, 6, 4, 4, 0, 2,  # left
    1, 5, 7, 7, 3, 1,  # right
)


def clamp01(value: float) -> float:
    """Clamp ``value`` into [0, 1]."""
    return min(max(value, 0.0), 1.0)


def build_noise(initial_size: int, octaves: int, rng: Pcg32) -> list[float]:
    """Build fractal value noise on a square grid of ``initial_size * 2**octaves`` sides.

    Each octave adds noise at the current resolution and then doubles it; the
    noise amplitude is quartered after every octave.
    """
    if initial_size < 1 or octaves < 0:
        raise ValueError("initial_size must be positive and octaves non-negative")
    noise = [0.0] * (initial_size * initial_size)
    amount = 1.0
    for octave in range(octaves):
        add_noise(noise, amount, rng)
        noise = upsample_2x(noise, initial_size << octave)
        amount *= 0.25
    return noise


def noise_to_rgba(noise) -> bytes:
    """Map noise in [-1, 1] to opaque grey RGBA pixels."""
    pixels = bytearray()
    for value in noise:
        grey = int(clamp01(value * 0.5 + 0.5) * 255.0)
        pixels.extend((grey, grey, grey, 0xFF))
    return bytes(pixels)


def cube_mesh() -> Mesh:
    """Return a unit cube spanning [-1, 1] whose colours encode the corner position."""
    vertices = []
    for y in (-1.0, 1.0):
        for z in (-1.0, 1.0):
            for x in (-1.0, 1.0):
                vertices.append(
                    Vertex(
                        position=Vector4(x, y, z, 1.0),
                        normal=Vector3(),
                        uv=Vector2(),
                        color=Vector4(float(x > 0), float(y > 0), float(z > 0), 1.0),
                    )
                )
    return Mesh(vertices, list(_CUBE_INDICES))


class GraphicsEngine:
    """Owns the scene: a noise-displaced terrain, a water cube and a fly camera."""

    def __init__(self, rng: Pcg32 | None = None) -> None:
        rng = rng if rng is not None else Pcg32()
        self.noise_size = NOISE_INITIAL_SIZE << NOISE_OCTAVES
        self.noise = build_noise(NOISE_INITIAL_SIZE, NOISE_OCTAVES, rng)
        self.noise_texture = noise_to_rgba(self.noise)
        self.terrain = Mesh.plane(32.0, 32.0, 128, 128, self.noise, self.noise_size)
        self.cube = cube_mesh()
        self.camera = Camera(far_clip=1000.0, near_clip=0.1, fov_degrees=90.0, aspect=9.0 / 16.0)
        self.time = 0.0

    def update(self, input_handler: InputHandler, delta_time: float) -> None:
        """Advance time and, while the right mouse button is held, fly the camera."""
        self.time += delta_time

        if not input_handler.is_button_down(_CAMERA_BUTTON):
            return

        direction = Vector3()
        key_moves = {
            "W": Vector3(0.0, 0.0, 1.0),
            "A": Vector3(-1.0, 0.0, 0.0),
            "S": Vector3(0.0, 0.0, -1.0),
            "D": Vector3(1.0, 0.0, 0.0),
            "Q": Vector3(0.0, -1.0, 0.0),
            "E": Vector3(0.0, 1.0, 0.0),
        }
        for key, move in key_moves.items():
            if input_handler.is_key_down(key):
                direction += move

        delta = input_handler.mouse_delta
        mouse = Vector2(int(delta.x), int(delta.y))
        turn = Vector3()
        if mouse.length() > 0:
            turn = Vector3(float(mouse.y), float(mouse.x), 0.0)

        direction.normalize()
        direction *= CAMERA_SPEED * delta_time
        rotation = self.camera.rotation
        direction = (
            direction
            * Matrix3x3.rotation_x(rotation.x)
            * Matrix3x3.rotation_y(rotation.y)
        )

        self.camera.position = self.camera.position + direction
        self.camera.rotation = rotation + turn * MOUSE_SENSITIVITY

    def per_frame_buffer(self) -> PerFrameBuffer:
        return PerFrameBuffer(self.time)

    def object_buffers(self) -> list[tuple[Mesh, PerObjectBuffer]]:
        """Return each mesh to draw with its per-object constants, in draw order."""
        return [
            (
                self.terrain,
                PerObjectBuffer(object_to_world(Vector3(32.0, 0.0, 0.0), Vector3(1.0, 1.0, 1.0))),
            ),
            (
                self.cube,
                PerObjectBuffer(object_to_world(Vector3(-8.0, 4.0, 0.0), Vector3(24.0, 24.0, 24.0))),
            ),
        ]