"""The fan shop scene and the windowed application that shows it."""

from __future__ import annotations

import math
import sys
from typing import List, Optional, Sequence

from .camera import Camera
from .fans import CeilingFan, CircularFan, PortableFan, WallFan
from .furniture import (
    Cabinet,
    Computer,
    Lamp,
    draw_chair1,
    draw_fan_store,
    draw_keyboard,
    draw_mouse,
    draw_table,
)
from .lighting import DirectionalLight, LightSet, PointLight
from .meshes import Primitives
from .vectors import Vec3, Vec4

WINDOW_TITLE = "Render Engine"
WINDOW_SIZE = (840, 600)
WINDOW_POSITION = (250, 250)
FRAME_INTERVAL = 0.02
ESCAPE = "\x1b"

LEFT_BUTTON = 0
MIDDLE_BUTTON = 1
RIGHT_BUTTON = 2
STATE_DOWN = 0
STATE_UP = 1

_LAMP_COLORS = (
    Vec3(1.0, 1.0, 0.0),
    Vec3(0.0, 1.0, 1.0),
    Vec3(1.0, 0.0, 1.0),
)


class Scene:
    """The shop with its furniture, fans, lights and key bindings."""

    def __init__(self, prims: Primitives, lights: LightSet, camera: Camera) -> None:
        self.prims = prims
        self.lights = lights
        self.camera = camera

        self.enable_axes = True
        self.selected_index = -1
        self.disable_cam_rot = False
        self.left_mouse_down = False
        self.last_mouse = (0, 0)
        self.buttons: List[object] = []
        self.screen: Optional[object] = None

        self.cabinet = Cabinet()
        self.computer = Computer()
        self.lamp = Lamp()
        self.ceiling_fan = CeilingFan()
        self.circular_fan = CircularFan()
        self.wall_fan = WallFan()
        self.portable_fan = PortableFan()

        self.sun_light: DirectionalLight = lights.directional
        self.lamp_lights: List[PointLight] = []
        self.setup_lights()

        camera.set_position(Vec4(0.0, 15.0, 90.0, 1.0))
        camera.set_target(Vec4(0.0, 15.0, 89.0, 1.0))
        camera.rotate(math.radians(180 * 30))

    def setup_lights(self) -> None:
        """Create the dim sun and the three coloured lamp lights."""
        self.sun_light = self.lights.set_directional(Vec3(1.0, 10.0, 2.0), Vec3(-0.5, -1.0, -0.5))
        self._set_sun(Vec3.splat(0.15), Vec3.splat(0.15))
        for color in _LAMP_COLORS:
            light = self.lights.add_point_light(Vec3())
            light.radius = 100.0
            light.ambient = Vec3(1.0, 1.0, 1.0)
            light.diffuse = color
            light.specular = color
            self.lamp_lights.append(light)

    def _set_sun(self, ambient: Vec3, colour: Vec3) -> None:
        self.sun_light.ambient = ambient
        self.sun_light.diffuse = colour
        self.sun_light.specular = colour

    def day(self) -> None:
        """Bright daylight."""
        self._set_sun(Vec3.splat(0.9), Vec3.splat(0.9))

    def night(self) -> None:
        """Dim night light."""
        self._set_sun(Vec3.splat(0.1), Vec3.splat(0.1))

    def sunset(self) -> None:
        """Warm orange light."""
        self._set_sun(Vec3(1.0, 1.0, 1.0), Vec3(0.8, 0.2, 0.0))

    def toggle_axes(self) -> bool:
        """Flip whether the axes are shown; returns the new setting."""
        self.enable_axes = not self.enable_axes
        return self.enable_axes

    def draw(self) -> None:
        """Submit the whole scene to the primitives' sink."""
        p = self.prims
        draw_fan_store(p, Vec3(0, 0, 0), Vec3(0, 0, 0), Vec3(1.5, 1.2, 1.5))
        self.cabinet.draw(p, Vec3(-41, 11, -17), Vec3(0, 90, 0), Vec3(25, 20, 30), True)
        self.lamp.draw(p, Vec3(32, 35, 20), Vec3(), Vec3(5, 5, 5), self.lamp_lights[1])
        draw_table(p, Vec3(-42, 7, 16), Vec3(0, -90, 0), Vec3(32, 20, 20))
        draw_table(p, Vec3(33, 13, -17), Vec3(0, -180, 0), Vec3(25, 20, 20))
        draw_chair1(p, Vec3(40, 6.5, -25), Vec3(0, 0, 0), Vec3(8.5, 8, 8.5))
        self.computer.draw(p, Vec3(34.5, 17, -15), Vec3(0, 90, 0), Vec3(10, 10, 10))
        draw_keyboard(p, Vec3(34.5, 13.8, -20), Vec3(0, 0, 0), Vec3(5, 5, 5))
        draw_mouse(p, Vec3(27.5, 13.8, -20), Vec3(0, 0, 0), Vec3(5, 5, 5))

        self.ceiling_fan.draw(p, Vec3(0, 48, 0), Vec3(0, 0, 0), Vec3.splat(3), True)
        self.portable_fan.draw(p, Vec3(-24, 10.5, -24), Vec3(0, -180, 0), Vec3.splat(8), True)
        self.circular_fan.draw(p, Vec3(22, 15.5, -17), Vec3(0, -180, 0), Vec3.splat(2), True)
        self.wall_fan.draw(p, Vec3(47, 23.5, -22), Vec3(0, -90, 0), Vec3.splat(2), True)

    def _toggle_desk_view(self) -> None:
        cam = self.camera
        cam.set_target(Vec4(35.5, 17.0, 21.0, 1.0))
        cam.set_position(Vec4(41.5, 19.5, 21.0, 1.0))
        self.disable_cam_rot = not self.disable_cam_rot
        if not self.disable_cam_rot:
            cam.set_target(cam.eye_position + cam.forward())

    def handle_key(self, key: str) -> bool:
        """React to a typed character; returns False when the app should quit."""
        self.camera.handle_key(key)

        if key in "123456" and len(key) == 1:
            self.selected_index = int(key)
        elif key == "0":
            self._toggle_desk_view()
        elif key == ESCAPE:
            return False

        if self.selected_index == 1:
            self.ceiling_fan.on_key(key)
        elif self.selected_index == 3:
            self.circular_fan.on_key(key)
        elif self.selected_index == 4:
            self.cabinet.on_key(key)
        elif self.selected_index == 5:
            self.day()
        elif self.selected_index == 6:
            self.night()
        return True

    def mouse(self, button: int, state: int, x: int, y: int) -> None:
        """Pass a click to the buttons and track the left button."""
        for ui_button in self.buttons:
            ui_button.on_event(button, state, x, y)

        if button == LEFT_BUTTON and state == STATE_DOWN:
            self.left_mouse_down = True
            self.last_mouse = (x, y)
        elif button == LEFT_BUTTON and state == STATE_UP:
            self.left_mouse_down = False

    def reshape(self, width: int, height: int) -> None:
        """Adapt the camera (and the 2D screen, if any) to a new window size."""
        self.camera.setup(width, height, 0.1, 1000.0)
        if self.screen is not None:
            self.screen.screen_change(width, height)


class _LiveSink:
    """Draws each call at once with the lights as they are at that moment."""

    def __init__(self, renderer, camera: Camera, lights: LightSet) -> None:
        self.renderer = renderer
        self.camera = camera
        self.lights = lights

    def submit(self, call) -> None:
        cam = self.camera
        self.renderer.set_frame(
            cam.view_matrix(), cam.projection_matrix(), self.lights.uniforms(cam.position3())
        )
        self.renderer.submit(call)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the scene until it is closed."""
    import pyglet
    from pyglet import gl
    from pyglet.window import key as keys
    from pyglet.window import mouse as mouse_buttons

    from .gl import DEFAULT_SHADERS, GLRenderer, ShaderError

    width, height = WINDOW_SIZE
    try:
        config = gl.Config(double_buffer=True, depth_size=24, sample_buffers=1, samples=4)
        window = pyglet.window.Window(
            width, height, caption=WINDOW_TITLE, resizable=True, config=config
        )
    except pyglet.window.NoSuchConfigException:
        window = pyglet.window.Window(width, height, caption=WINDOW_TITLE, resizable=True)
    window.set_location(*WINDOW_POSITION)

    renderer = GLRenderer()
    try:
        for name, (vertex_path, fragment_path) in DEFAULT_SHADERS.items():
            renderer.add_shader(name, vertex_path, fragment_path)
    except ShaderError as exc:
        print(exc, file=sys.stderr)
        window.close()
        return 1

    lights = LightSet()
    camera = Camera()
    prims = Primitives(_LiveSink(renderer, camera, lights))
    for mesh in prims.meshes:
        renderer.upload(mesh.name, mesh)
    scene = Scene(prims, lights, camera)
    scene.reshape(window.width, window.height)

    glut_buttons = {
        mouse_buttons.LEFT: LEFT_BUTTON,
        mouse_buttons.MIDDLE: MIDDLE_BUTTON,
        mouse_buttons.RIGHT: RIGHT_BUTTON,
    }

    @window.event
    def on_draw():
        gl.glClearColor(0.2, 0.2, 0.2, 1.0)
        window.clear()
        gl.glEnable(gl.GL_DEPTH_TEST)
        scene.draw()

    @window.event
    def on_resize(new_width, new_height):
        scene.reshape(new_width, new_height)

    @window.event
    def on_text(text):
        for char in text:
            if not scene.handle_key(char):
                window.close()
                return

    @window.event
    def on_key_press(symbol, modifiers):
        if symbol == keys.ESCAPE:
            scene.handle_key(ESCAPE)
            window.close()
            return pyglet.event.EVENT_HANDLED
        return None

    def _on_mouse(x, y, button, state):
        if button in glut_buttons:
            scene.mouse(glut_buttons[button], state, x, window.height - y)

    @window.event
    def on_mouse_press(x, y, button, modifiers):
        _on_mouse(x, y, button, STATE_DOWN)

    @window.event
    def on_mouse_release(x, y, button, modifiers):
        _on_mouse(x, y, button, STATE_UP)

    pyglet.clock.schedule_interval(lambda dt: None, FRAME_INTERVAL)
    pyglet.app.run()
    lights.clear()
    return 0