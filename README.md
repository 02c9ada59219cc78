# quadkit

Pure-Python building blocks for small 2D games. quadkit draws nothing and opens
no windows. It supplies the parts that sit around a renderer:

- color maths and a palette of named colors
- a 2D vector, rectangles and circles
- vertex and index geometry for shapes
- per-frame keyboard, mouse and touch state
- a frame profiler with nested timing zones
- sprite-sheet animation
- slot storage addressed by generational ids
- a store that holds one value per type
- a mouse-driven pan and zoom camera
- a shader `#include` preprocessor

quadkit has no dependencies outside the standard library.

## Installation

```
pip install quadkit
```

To run the test suite, install the test extra and run pytest:

```
pip install "quadkit[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `quadkit.vector` | `Vec2` |
| `quadkit.color` | `Color`, `color_u8`, `hsl_to_rgb`, `rgb_to_hsl`, named colors such as `RED`, `WHITE`, `BLANK` |
| `quadkit.rect` | `Rect`, `RectOffset`, `Circle`, `polar_to_cartesian`, `cartesian_to_polar`, `clamp` |
| `quadkit.shapes` | `Vertex`, `Mesh`, `DrawMode`, `DrawRectangleParams`, `triangle`, `triangle_lines`, `rectangle`, `rectangle_lines`, `rectangle_ex`, `hexagon`, `poly`, `poly_lines`, `circle`, `circle_lines`, `line` |
| `quadkit.input` | `InputState`, `Touch`, `TouchPhase`, `MouseButton`, `InputEvent`, `InputEventKind` |
| `quadkit.telemetry` | `Profiler`, `Frame`, `Zone` |
| `quadkit.animation` | `Animation`, `AnimationFrame`, `AnimatedSprite` |
| `quadkit.generational` | `GenerationalStorage`, `GenerationalId` |
| `quadkit.storage` | `Storage` |
| `quadkit.mouse_camera` | `MouseCamera` |
| `quadkit.shaders` | `preprocess_shader`, `PreprocessorConfig`, `ShaderPreprocessError` |

## Examples

### Colors

```python
from quadkit.color import Color, color_u8, hsl_to_rgb, rgb_to_hsl

assert color_u8(255, 0, 0, 255) == Color(1.0, 0.0, 0.0, 1.0)
sky = Color.from_hex(0x3CA7D5)      # opaque; the top byte is ignored
h, s, l = rgb_to_hsl(sky)
again = hsl_to_rgb(h, s, l)
print(sky.to_bytes())               # (60, 167, 213, 255)
```

`Color.from_rgba` and `Color.from_bytes` raise `ValueError` for components
outside 0..255.

### Geometry

```python
from quadkit.rect import Rect, Circle
from quadkit.vector import Vec2

a = Rect(0, 0, 10, 10)
b = Rect(5, 5, 10, 10)
assert a.overlaps(b)
assert a.intersect(b) == Rect(5, 5, 5, 5)
assert Circle(0, 0, 2).contains(Vec2(1, 1))
```

`Rect.contains` includes the left and top edges and excludes the right and
bottom ones. `Rect.intersect` returns `None` when the rectangles do not meet.

### Shape meshes

Each shape function returns a `Mesh` of vertices and triangle indices, ready to
hand to whatever renderer you use. Outline functions return a list of meshes,
one per line segment.

```python
from quadkit.color import WHITE
from quadkit.shapes import rectangle, line

mesh = rectangle(10, 10, 100, 50, WHITE)
assert mesh.indices == [0, 1, 2, 0, 2, 3]

assert line(0, 0, 0, 0, 2.0, WHITE) is None   # too short to draw
```

`poly` and `poly_lines` take the rotation in degrees and raise `ValueError`
unless `sides` is between 1 and 255. `circle` and `circle_lines` use a
20-sided polygon.

### Input state

Feed window events into an `InputState` and query it during the frame. Call
`end_frame` once per frame to clear the per-frame sets and to settle touch
phases.

```python
from quadkit.input import InputState, MouseButton

state = InputState()
state.key_down_event("space", None, False)
state.mouse_button_down_event(MouseButton.LEFT, 40.0, 30.0)

assert state.is_key_pressed("space")
assert state.is_mouse_button_down(MouseButton.LEFT)
print(state.mouse_position_local(800, 600))

state.end_frame()
assert not state.is_key_pressed("space")
assert state.is_key_down("space")
```

Touches raise mouse events for the left button while
`simulate_mouse_with_touch` is true (the default). `register_input_subscriber`
and `drain_input_events` give other components their own copy of the event
stream.

### Profiling

Turning the profiler on or off takes effect at the next `reset`.

```python
from quadkit.telemetry import Profiler

profiler = Profiler()
profiler.enable()
profiler.reset(1 / 60)

with profiler.zone("update"):
    with profiler.zone("physics"):
        pass
profiler.reset(1 / 60)

frame = profiler.frame()
assert frame.zones[0].name == "update"
assert frame.zones[0].children[0].name == "physics"
```

`reset` raises `RuntimeError` while a zone is still open. `log_time(name)` is a
context manager that appends `"Time query: <name>, <seconds>s"` to `strings()`.

### Sprite animation

```python
from quadkit.animation import Animation, AnimatedSprite

sprite = AnimatedSprite(15, 20, [Animation("idle", 0, 20, 12), Animation("run", 1, 15, 15)], True)
sprite.set_animation(1)
sprite.update(1 / 10)
print(sprite.frame().source_rect)   # Rect(x=15.0, y=20.0, w=15.0, h=20.0)
```

`update` takes the frame time in seconds and moves on one frame once more than
`1 / fps` seconds have built up.

### Generational storage and typed storage

```python
from quadkit.generational import GenerationalStorage
from quadkit.storage import Storage

slots = GenerationalStorage()
first = slots.push("a")
slots.free(first)
second = slots.push("b")            # reuses the slot with a new generation
assert slots.get(first) is None
assert slots.get(second) == "b"

class Settings:
    volume = 0.5

store = Storage()
store.store(Settings())
assert store.get(Settings).volume == 0.5
assert store.try_get(int) is None
```

### Mouse camera

```python
from quadkit.mouse_camera import MouseCamera
from quadkit.vector import Vec2

camera = MouseCamera()
camera.scale_wheel(Vec2(0, 0), 1.0, 1.1)    # zoom in around the origin
camera.update(Vec2(0.2, 0.1), should_offset=True)
params = camera.camera_params(aspect=800 / 600)
print(params.zoom, params.offset)
```

### Shader includes

```python
from quadkit.shaders import PreprocessorConfig, preprocess_shader

config = PreprocessorConfig(includes=[("common.glsl", "float x;")])
print(preprocess_shader('#include "common.glsl"\nvoid main() {}', config))
# float x;
# void main() {}
```

Included text is not scanned for further directives. A malformed directive or
an unknown file name raises `ShaderPreprocessError`.

## What quadkit does not do

quadkit is a set of independent parts, not an engine:

- It does not render, load textures or open a window. Shape functions only
  build meshes.
- It has no frame loop. You call `InputState.end_frame`, `Profiler.reset` and
  `AnimatedSprite.update` yourself, once per frame.
- It has no coroutine scheduler, no node scene and no state machine.
- It does not load files or play audio.