# openlima

Building blocks for a small game engine, in plain Python with no
third-party dependencies. Everything that "renders" returns plain data
(triangles, matrices, light and material states, frames), so a drawing
back end of your choice can consume it.

## Modules

- `openlima.color`: `Color(r, g, b, a)`, a dataclass of float components
  (expected between 0 and 1). Component-wise `+`, `-`, `*`, `/` and their
  in-place forms; `int_r()`, `int_g()`, `int_b()`, `int_a()` scale a
  component to 0..255 (truncating); `int_rgba()` packs as `0xRRGGBBAA`,
  `int_argb()` as `0xAARRGGBB`; `as_tuple()`, `copy()`, and iteration.
- `openlima.vector`: `Vector2(x, y)` and `Vector3(x, y, z)` with
  component-wise arithmetic. Division of two integer components truncates
  toward zero. `Vector3` adds unary minus, `length()`, `length_sq()`,
  `normalize()` (in place), `normalized()` and the static
  `Vector3.cross_product(p1, p2, p3)`, the unnormalised surface normal of a
  triangle. For all-integer vectors `length()` is the truncated square root.
- `openlima.keys`: the `KeyboardButton` enumeration and
  - `map_virtual_key(vk)`: Windows virtual-key code to button,
  - `map_keysym(keysym)`: X11 keysym to button (lower-case letters map to
    the letter keys),
  - `key_value(key)`: the character of a letter or digit key, else `None`,
  - `key_description(key)`: e.g. `"Page Up"`, `"5 (Numpad)"`, or `"Unknown"`,
  - `key_type_name(key)`: e.g. `"KEY_A"`, or `"UNKNOWN"`.

  Unmapped codes give `KeyboardButton.KEY_NONE`.
- `openlima.resources`: the abstract `ResourceReader` (`is_legal(name)`,
  `read_resource(stream)`) and `ResourceManager`, and `FileResourceManager`,
  which reads UTF-8 text files below a parent directory (default `"./"`).
  `register_reader(resource_type, reader)` adds a reader;
  `get_resource(resource_type, name, reader_type=None)` returns the cached
  object while something still holds a reference to it and loads it again
  otherwise; `get_refreshed_resource(...)` always loads it. Without
  `reader_type` the first registered reader whose `is_legal` accepts the name
  is used; with it, the first reader of exactly that type. Both return `None`
  when the resource does not exist or no reader fits.
- `openlima.mesh`: `StaticMesh(vertices, normals, vertex_indices,
  normal_indices, smooth_shading=True)` with zero-based index triples;
  `triangles()` yields `Triangle` objects and `render()` returns them as a
  list. `WavefrontObjReader` reads `v`, `vn` and `f` lines of `.obj` text
  (`is_legal` accepts names ending in `.obj`, any case): polygons are split
  into triangle fans, negative indices count from the end, texture indices
  are ignored, and faces without normals get a computed face normal.
  Malformed input raises `ObjParseError` (a `ValueError`) with the line
  number.
- `openlima.scene`: the abstract `Renderable`, `RenderNode` (`add_child`,
  `clear_children`, `children`, `render()` returning the children's results
  in order), `CachingRenderNode` (keeps its result until `invalidate()`;
  `is_valid()`), and `TranslatingRenderNode`, `ScalingRenderNode` and
  `RotatingRenderNode(angle_degrees, axis)`, whose `render()` returns a
  `Transformed` holding a 4x4 matrix and the children's results.
  `translation_matrix`, `scaling_matrix` and `rotation_matrix` are available
  directly; a zero rotation axis raises `ValueError`.
- `openlima.lighting`: `PointLight` and `SpotLight`, whose
  `set_light(index)` returns a `LightState` (a negative index raises
  `ValueError`), and `SimplePass`, whose `set_properties()` returns its
  `MaterialState` and `unset_properties()` returns `DEFAULT_MATERIAL`. A pass
  is also a context manager.
- `openlima.environment`: `PerspectiveCamera(fov)` with `position`,
  `rotation`, `aspect_ratio(dimensions)`, `modify_projection(dimensions)`
  returning a `Projection`, and `render()` returning a `CameraView`.
  `Environment` holds a root `render_node`, an `ambient_color`, an optional
  camera (`set_camera`) and lights (`add_light`, `remove_light`,
  `clear_lights`); `render(dimensions)` returns a `Frame` with the
  projection, camera view, ambient colour, one `LightState` per light
  (indexed in insertion order) and the rendered scene.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from openlima.color import Color
from openlima.vector import Vector2, Vector3
from openlima.resources import FileResourceManager
from openlima.mesh import StaticMesh, WavefrontObjReader
from openlima.environment import Environment, PerspectiveCamera

red = Color(1.0, 0.0, 0.0, 1.0)
print(hex(red.int_rgba()))          # 0xff0000ff

normal = Vector3.cross_product(
    Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0)
).normalized()                      # Vector3(x=0, y=0, z=1)

manager = FileResourceManager("models")
manager.register_reader(StaticMesh, WavefrontObjReader())
mesh = manager.get_resource(StaticMesh, "cube.obj")

env = Environment()
env.set_camera(PerspectiveCamera(45.0))
if mesh is not None:
    env.render_node.add_child(mesh)
frame = env.render(Vector2(800, 600))
print(frame.projection)             # Projection(fov=45.0, aspect_ratio=1.333...)
```

## What this package does not do

It opens no windows, runs no event loop and does no drawing on screen: the
render methods describe what to draw rather than drawing it, and the key
mapping functions translate codes you obtain elsewhere. Materials and
texture coordinates in `.obj` files are not loaded.