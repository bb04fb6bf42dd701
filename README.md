# renderengine

A small 3D renderer built around a fan-store scene. It has its own vector
and matrix maths, a perspective camera, directional and point lights, and
procedurally built meshes (cube, cylinder, plane, tapered plane and
sphere). The furniture and fans in the scene are put together from those
primitives in a hierarchy of transforms, and the fans animate each time
they are drawn.

Windowing and OpenGL access come from `pyglet`.

## Installing

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Running the scene

```
renderengine
```

This calls `renderengine.app.main`, which opens an 840×600 resizable
window titled "Render Engine" and draws the store. It loads two shader
programs from GLSL files named in `renderengine.gl.DEFAULT_SHADERS`, with
paths relative to the current directory:

- `default`: `objects/cube/cube_vshader.glsl` and `objects/cube/cube_fshader.glsl`
- `emission`: `objects/vShader.glsl` and `objects/fShader.glsl`

If a file cannot be read or a shader fails to compile or link, the error
is printed to standard error and `main` returns 1.

### Keys

| Key | Action |
|-----|--------|
| `w` / `s` | move forward / back |
| `a` / `d` | move sideways |
| `q` / `e` | move down / up |
| `r` / `t` | turn the camera |
| `0` | jump to the desk view (press again to look straight ahead from there) |
| `1` | select the ceiling fan; then `m` switches it on, `n` off |
| `3` | select the circular fan; then `u` / `i` tilt its head |
| `4` | select the cabinet; then `o`/`O` and `p`/`P` close/open the drawers |
| `5` | select daylight (applied again on every following key) |
| `6` | select night light (applied again on every following key) |
| `Esc` | quit |

The camera keys work whatever is selected, so with a selection active a
key such as `a` both moves the camera and goes to the selected object.

## Using the library

The maths and scene parts need no window:

```python
from renderengine.vectors import Vec3, Vec4
from renderengine.matrices import trs
from renderengine.camera import Camera
from renderengine.lighting import LightSet
from renderengine.meshes import DrawList, Primitives, build_cube

cube = build_cube()                      # 36 vertices with face normals
model = trs(Vec3(0, 1, 0), Vec3(0, 45, 0), Vec3(2, 2, 2))

camera = Camera()
camera.setup(840, 600, 0.1, 1000)
camera.set_position(Vec4(0, 15, 90, 1))
view = camera.view_matrix()
projection = camera.projection_matrix()

lights = LightSet()
lamp = lights.add_point_light(Vec3(0, 0, 0))   # at most ten point lights
uniforms = lights.uniforms(camera.position3())

calls = DrawList()
prims = Primitives(calls)
prims.cube.draw(Vec3(), Vec3(), Vec3(1, 1, 1), Vec4(1, 0, 0, 1), "default")
print(len(calls))  # 1
```

The modules:

- `renderengine.vectors`: `Vec2`, `Vec3`, `Vec4` and `dot`, `length`,
  `normalize`, `cross`.
- `renderengine.matrices`: `Matrix` and the transform builders
  `identity`, `transpose`, `matrix_comp_mult`, `rotate_x`/`rotate_y`/`rotate_z`
  (degrees), `translate`, `scale`, `ortho`, `ortho2d`, `frustum`,
  `perspective`, `look_at` and `trs`.
- `renderengine.camera`: `Camera` (movement keys, view and projection
  matrices) and `rotate_axis`.
- `renderengine.lighting`: `Light`, `DirectionalLight`, `PointLight` and
  `LightSet`, which raises `LightLimitError` past its point-light limit and
  turns the lights into a dictionary of shader uniforms.
- `renderengine.meshes`: `build_cube`, `build_cylinder`, `build_plane`,
  `build_plane2`, `build_sphere`, and `Primitive`/`Primitives`, which turn
  draws into `DrawCall`s in a sink such as `DrawList`.
- `renderengine.furniture`: `Cabinet`, `Computer`, `Shelf`, `Lamp` and
  `draw_fan_store`, `draw_table`, `draw_chair`, `draw_chair1`,
  `draw_keyboard`, `draw_mouse`.
- `renderengine.fans`: `CeilingFan`, `CircularFan`, `WallFan`, `PortableFan`.
- `renderengine.app`: `Scene`, which places everything in the store,
  handles keys and mouse clicks, and `main`.
- `renderengine.gl`: `load_program`, `ShaderProgram`, `ShaderError`,
  `error_string` and `GLRenderer`, which draws `DrawCall`s through pyglet.
- `renderengine.ui`: `Screen`, `Button`, `button_2d` and `font_for_size`
  for laying out screen-space buttons and testing clicks against them.
- `renderengine.textfile`: `read_text_file` and `write_text_file`.

## What it does not do

- The GLSL shader files are not part of the package; the window only
  draws when they are present at the paths above.
- Nothing is drawn on top of the scene: `renderengine.ui` lays out buttons
  and checks clicks but does not render them, and `Scene.buttons` is empty
  unless you fill it.
- Dragging the mouse does not turn the camera; the left button is only
  tracked.
- `Scene.toggle_axes` flips a flag, but no axes are drawn.
- Key `2` selects nothing that responds.

## Tests

```
pytest
```