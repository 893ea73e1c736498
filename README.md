# terrascene

`terrascene` does the CPU-side work for a small real-time terrain scene.
That scene is a heightmapped terrain grid and a cube, viewed through a fly
camera. The package provides the linear algebra, procedural heightmap
noise, mesh generation, camera matrices, input state and frame timing the
scene needs. Its results are plain Python data, or bytes packed in
constant-buffer layout.

## What is in it

| Module | Contents |
| --- | --- |
| `terrascene.vector` | `Vector2`, `Vector3` and `Vector4` are dataclasses. They support `+`, `-`, `*` and `/`, both plain and in place. `*` is component-wise with a vector and scales with a number. They also have `dot`, `cross` (3D only), `length`, `length_sqr`, `normalized` and `normalize`, and `to_type` converts the components. Dividing by zero raises `ZeroDivisionError`. |
| `terrascene.matrix` | `Matrix3x3` and `Matrix4x4`. They use the row-vector convention (`vector * matrix`) and 1-based `m[row, column]` indexing. They have `+`, `-`, `*`, `transpose()`, `rotation_x/y/z`, `Matrix3x3.from_matrix4` and `Matrix4x4.from_matrix3`. `Matrix4x4.fast_inverse()` inverts a rigid transform. |
| `terrascene.noise` | `Pcg32` is a small PCG32 generator with `next_uint32()` and `random_float()`. `add_noise` adds uniform noise in place. `upsample_2x` doubles a square grid by bilinear interpolation. |
| `terrascene.mesh` | `Vertex` holds a position, normal, uv and colour. `Mesh` holds a vertex list and an index list. `Mesh.plane(...)` builds a heightmapped grid. `object_to_world(translation, scaling)` builds a scale-and-translate matrix. |
| `terrascene.objloader` | `ObjModel` and `ObjFace`. `parse_obj(lines)` parses OBJ text and `load_obj(path)` reads a file. Only `v`, `vn` and `f a//n` lines are read; face indices become zero-based. |
| `terrascene.timer` | `Timer(fixed_tick_time=1/60, clock=time.perf_counter)`. Call `update()` once per frame. It has the properties `delta_time`, `total_time`, `fixed_rate_tick_count` and `fixed_rate_tick_delta_count`, plus `set_paused(paused)`. |
| `terrascene.inputhandler` | `Message` is an enum of window message codes. `InputHandler` takes events through `handle_event(message, w_param, l_param)` and publishes them as the frame's state when `update()` is called. Queries: `is_key_down`, `is_key_pressed`, `is_key_released`, `is_button_down`, `mouse_position` and `mouse_delta`. |
| `terrascene.buffers` | `PerCameraBuffer`, `PerFrameBuffer` and `PerObjectBuffer`. `pack()` returns little-endian float32 bytes padded to a multiple of 16. `SIZE` gives the byte length. |
| `terrascene.camera` | `Camera(far_clip, near_clip, fov_degrees, aspect)` builds a perspective projection with 0..1 depth. It has `position` and `rotation` attributes. `transform()` returns the camera-to-world matrix and `buffer()` returns a `PerCameraBuffer`. |
| `terrascene.engine` | `GraphicsEngine` builds the scene: a 256×256 noise heightmap, a 128×128 terrain plane, a cube and the camera. Its helpers are `clamp01`, `build_noise`, `noise_to_rgba` and `cube_mesh`. |

## Examples

Vectors and matrices use the row-vector convention:

```python
import math
from terrascene.vector import Vector3
from terrascene.matrix import Matrix3x3

v = Vector3(1.0, 0.0, 0.0)
turned = v * Matrix3x3.rotation_y(math.pi / 2)
print(turned.length())                      # 1.0
print(v.cross(Vector3(0.0, 1.0, 0.0)))      # Vector3(x=0.0, y=0.0, z=1.0)
```

Multiplying a rigid transform by its fast inverse gives the identity, up to
rounding:

```python
from terrascene.matrix import Matrix4x4

m = Matrix4x4.rotation_x(0.3) * Matrix4x4.rotation_y(1.1)
print(m * m.fast_inverse())
```

Value noise from the generator. A generator built with `Pcg32()` starts from
state zero, so the sequence is the same on every run:

```python
from terrascene.noise import Pcg32, add_noise, upsample_2x

rng = Pcg32()
grid = [0.0] * (16 * 16)
add_noise(grid, 1.0, rng)
finer = upsample_2x(grid, 16)   # 32 x 32 values
```

Use `build_noise` to build a multi-octave heightmap, then `Mesh.plane` to
turn it into a terrain grid:

```python
from terrascene.engine import build_noise
from terrascene.mesh import Mesh
from terrascene.noise import Pcg32

heights = build_noise(16, 4, Pcg32())      # 256 x 256 heightmap
terrain = Mesh.plane(32.0, 32.0, 128, 128, heights, 256)
```

Reading an OBJ model:

```python
from terrascene.objloader import parse_obj

model = parse_obj([
    "v 0 0 0",
    "v 1 0 0",
    "v 0 1 0",
    "vn 0 0 1",
    "f 1//1 2//1 3//1",
])
print(len(model.vertices), len(model.faces))   # 3 3
```

## Frame loop

Run these steps once per frame:

1. Pass each window message to `InputHandler.handle_event`.
   - For `Message.MOUSE_MOVE`, `l_param` packs the position as signed 16-bit x in the low word and y in the high word.
   - For `Message.INPUT`, `l_param` is the raw mouse motion `(dx, dy)`.
2. Call `timer.update()`, then `input_handler.update()`.
3. Call `engine.update(input_handler, timer.delta_time)`.
4. Upload the scene data to your renderer:
   - `engine.per_frame_buffer()`
   - `engine.camera.buffer()`
   - `engine.object_buffers()`, which returns the meshes in draw order, each with its `PerObjectBuffer`.

The camera moves only while the right mouse button is held:

- `W` and `S` move it forward and back, relative to the camera's rotation.
- `D` and `A` move it right and left.
- `E` and `Q` move it up and down.
- Mouse motion turns it.

## What it does not do

`terrascene` does not open windows, talk to a GPU, compile or load shaders,
or load image files. It has no command-line program. Those jobs are left to
the application, which receives the meshes, textures (`noise_to_rgba`) and
packed buffers that the package produces.

## Requirements

Python 3.10 or newer. There are no third-party runtime dependencies. The
tests use pytest, which the `test` extra installs.