"""Furniture and the shop building, drawn from the primitive shapes.

Each draw function sets the parent transforms of the primitives it uses and
then submits its parts relative to them. Objects that react to keys keep
their offsets in a small state object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

from .lighting import PointLight
from .matrices import Matrix, identity, rotate_y, scale as scale_matrix, translate
from .meshes import DEFAULT_SHADER, DrawCall, Primitive, Primitives
from .vectors import Vec3, Vec4

EMISSION_SHADER = "emission"
WHITE = Vec4(1.0, 1.0, 1.0, 1.0)
BLACK = Vec4(0.0, 0.0, 0.0, 1.0)

DRAWER_STEP = 0.05
DRAWER_TRAVEL = 0.35
NUDGE_STEP = 0.1

Triple = Tuple[float, float, float]
_NO_ROT: Triple = (0.0, 0.0, 0.0)


def _grey(level: float) -> Vec4:
    return Vec4(level, level, level, 1.0)


def _drawer(prim: Primitive) -> Callable[..., DrawCall]:
    """A shorthand that draws ``prim`` from plain tuples."""

    def draw(
        pos: Triple,
        size: Triple,
        color: Vec4,
        rot: Triple = _NO_ROT,
        shader: object = DEFAULT_SHADER,
    ) -> DrawCall:
        return prim.draw(Vec3(*pos), Vec3(*rot), Vec3(*size), color, shader)

    return draw


def _mirror_x(pos: Triple) -> Triple:
    return (-pos[0], pos[1], pos[2])


# ---------------------------------------------------------------- cabinet

_CABINET_DARK = _grey(0.2)
_CABINET_WOOD = Vec4(222.0, 184.0, 135.0, 255.0) / 255.0

_CABINET_FRAME = (
    ((0.0, 0.0, 0.0), (1.2, 0.05, 0.5)),
    ((0.0, -0.4, 0.0), (1.2, 0.05, 0.5)),
    ((0.0, -0.2, -0.21), (1.1, 0.4, 0.05)),
    ((0.0, -0.2, 0.0), (0.05, 0.4, 0.4)),
    ((0.56, -0.2, 0.01), (0.05, 0.4, 0.42)),
    ((-0.56, -0.2, 0.01), (0.05, 0.4, 0.42)),
    ((0.0, 0.8, -0.21), (1.16, 1.6, 0.05)),
    ((0.0, 0.75, 0.0), (0.05, 1.5, 0.45)),
    ((-0.56, 0.8, 0.01), (0.04, 1.6, 0.42)),
    ((0.56, 0.8, 0.01), (0.04, 1.6, 0.42)),
)

# The left drawer; the right one is its mirror image in x.
_CABINET_DRAWER = (
    ((-0.278, -0.35, 0.0), (0.45, 0.025, 0.35), _CABINET_WOOD),
    ((-0.278, -0.238, -0.1635), (0.45, 0.2, 0.025), _CABINET_WOOD),
    ((-0.48, -0.238, 0.0), (0.025, 0.2, 0.35), _CABINET_WOOD),
    ((-0.075, -0.238, 0.0), (0.025, 0.2, 0.35), _CABINET_WOOD),
    ((-0.278, -0.2, 0.18), (0.5, 0.34, 0.04), _CABINET_DARK),
    ((-0.278, -0.15, 0.2), (0.08, 0.035, 0.04), _CABINET_WOOD),
)


@dataclass
class Cabinet:
    """A two-drawer cabinet whose drawers slide out with o/O and p/P."""

    position: Vec3 = Vec3()
    left_position: Vec3 = Vec3()
    right_position: Vec3 = Vec3()

    def draw(
        self,
        prims: Primitives,
        position: Vec3,
        rotation: Vec3,
        scale: Vec3,
        enable_input: bool = False,
    ) -> Matrix:
        """Draw the cabinet; drawer offsets apply only with ``enable_input``."""
        cube = _drawer(prims.cube)
        global_matrix = prims.cube.transform(position + self.position, rotation, scale)

        for pos, size in _CABINET_FRAME:
            cube(pos, size, _CABINET_DARK)

        for offset, mirrored in ((self.left_position, False), (self.right_position, True)):
            local = translate(offset) if enable_input else identity()
            prims.cube.transform_matrix(global_matrix * local)
            for pos, size, color in _CABINET_DRAWER:
                cube(_mirror_x(pos) if mirrored else pos, size, color)

        prims.cube.reset()
        return global_matrix

    @staticmethod
    def _slide(offset: Vec3, opening: bool) -> Vec3:
        if opening:
            z = min(offset.z + DRAWER_STEP, DRAWER_TRAVEL)
        else:
            z = max(offset.z - DRAWER_STEP, 0.0)
        return Vec3(offset.x, offset.y, z)

    def on_key(self, key: str) -> bool:
        """o/O close/open the left drawer, p/P the right; True if handled."""
        if key in ("o", "O"):
            self.left_position = self._slide(self.left_position, key == "O")
        elif key in ("p", "P"):
            self.right_position = self._slide(self.right_position, key == "P")
        else:
            return False
        return True


# --------------------------------------------------------------- computer

_COMPUTER_PARTS = (
    ((0.0, 0.0, 0.0), _NO_ROT, (0.05, 0.4, 0.6), WHITE),
    ((0.0, 0.2, 0.0), _NO_ROT, (0.07, 0.05, 0.7), BLACK),
    ((0.0, -0.2, 0.0), _NO_ROT, (0.07, 0.05, 0.7), BLACK),
    ((0.0, 0.0, 0.325), _NO_ROT, (0.07, 0.4, 0.05), BLACK),
    ((0.0, 0.0, -0.325), _NO_ROT, (0.07, 0.4, 0.05), BLACK),
    ((-0.05, 0.0, 0.0), _NO_ROT, (0.05, 0.4, 0.6), _grey(0.05)),
    ((-0.1, -0.15, 0.0), (0.0, 0.0, -15.0), (0.05, 0.4, 0.2), _grey(0.15)),
    ((-0.08, -0.35, 0.0), _NO_ROT, (0.4, 0.08, 0.5), BLACK),
)


@dataclass
class Computer:
    """A monitor on a stand; a/A nudge it along x."""

    position: Vec3 = Vec3()

    def draw(self, prims: Primitives, position: Vec3, rotation: Vec3, scale: Vec3) -> Matrix:
        """Draw the monitor and reset the cube transform."""
        cube = _drawer(prims.cube)
        global_matrix = prims.cube.transform(position + self.position, rotation, scale)
        for pos, rot, size, color in _COMPUTER_PARTS:
            cube(pos, size, color, rot)
        prims.cube.reset()
        return global_matrix

    def on_key(self, key: str) -> bool:
        """'a' moves toward -x, 'A' toward +x; True if handled."""
        if key == "a":
            self.position = self.position - Vec3(NUDGE_STEP, 0.0, 0.0)
        elif key == "A":
            self.position = self.position + Vec3(NUDGE_STEP, 0.0, 0.0)
        else:
            return False
        return True


# ------------------------------------------------------------------ shelf


@dataclass
class Shelf:
    """A three-level hierarchy of boxes; 'a' nudges it along -x."""

    position: Vec3 = Vec3()

    def draw(self, prims: Primitives, position: Vec3, rotation: Vec3, scale: Vec3) -> Matrix:
        """Draw each box as a child of the one before it."""
        cube = _drawer(prims.cube)
        global_matrix = prims.cube.transform(position + self.position, rotation, scale)
        cube((0.0, 0.0, 0.0), (1.0, 1.0, 1.0), WHITE)

        current = prims.cube.transform_matrix(global_matrix * scale_matrix(2) * rotate_y(100))
        cube((1.0, 1.0, 1.0), (0.2, 0.2, 3.0), WHITE)

        prims.cube.transform_matrix(current * rotate_y(50))
        cube((1.0, 0.0, 1.0), (1.0, 1.0, 3.0), WHITE)

        prims.cube.reset()
        return global_matrix

    def on_key(self, key: str) -> bool:
        """'a' moves the shelf toward -x; True if handled."""
        if key != "a":
            return False
        self.position = self.position - Vec3(NUDGE_STEP, 0.0, 0.0)
        return True


# ------------------------------------------------------------------- lamp

_LAMP_MOVES = {
    "a": Vec3(-NUDGE_STEP, 0.0, 0.0),
    "d": Vec3(NUDGE_STEP, 0.0, 0.0),
    "s": Vec3(0.0, 0.0, -NUDGE_STEP),
    "w": Vec3(0.0, 0.0, NUDGE_STEP),
    "q": Vec3(0.0, -NUDGE_STEP, 0.0),
    "e": Vec3(0.0, NUDGE_STEP, 0.0),
}
_LAMP_TURNS = {
    "r": Vec3(0.0, 0.0, 1.0),
    "t": Vec3(0.0, 1.0, 0.0),
}


@dataclass
class Lamp:
    """A hanging lamp that carries a point light and glows in its colour."""

    position: Vec3 = Vec3()
    rotation: Vec3 = Vec3()

    def draw(
        self,
        prims: Primitives,
        position: Vec3,
        rotation: Vec3,
        scale: Vec3,
        light: PointLight,
    ) -> Matrix:
        """Draw the lamp, move ``light`` to its origin and reset the transforms."""
        position = position + self.position
        rotation = rotation + self.rotation

        transform = prims.cylinder.transform(position, rotation, scale)
        prims.sphere.transform(position, rotation, scale)
        prims.plane2.transform(position, rotation, scale)
        prims.cube.transform(position, rotation, scale)

        light.set_transform_matrix(transform * translate(0, 0, 0))

        metal = _grey(0.8)
        shade = _grey(0.2)
        cylinder = _drawer(prims.cylinder)
        cylinder((0.0, 2.5, 0.0), (0.4, 0.1, 0.4), metal)
        cylinder((0.0, 2.55, 0.0), (0.45, 0.02, 0.45), _grey(0.5))
        cylinder((0.0, 1.8, 0.0), (0.05, 1.5, 0.05), metal)
        cylinder((0.0, 0.85, 0.0), (0.35, 0.4, 0.35), shade)
        cylinder((0.0, 0.4, 0.0), (0.38, 0.025, 0.38), _grey(0.1))
        cylinder((0.0, 0.52, 0.0), (0.02, 0.1, 0.02), Vec4(1.0, 0.8, 0.4, 1.0), (90.0, 0.0, 0.0))

        _drawer(prims.sphere)(
            (0.0, 0.5, 0.0),
            (0.6, 0.6, 0.6),
            Vec4.from_vec3(light.diffuse, 1.0),
            shader=EMISSION_SHADER,
        )

        _drawer(prims.cube)((0.0, 1.2, 0.0), (0.4, 0.1, 0.4), BLACK)

        plane2 = _drawer(prims.plane2)
        plane2((0.0, 0.8, 0.41), (1.0, 0.1, 1.0), BLACK, (60.0, 0.0, 0.0))
        plane2((0.0, 0.8, -0.41), (1.0, 0.1, 1.0), BLACK, (120.0, 0.0, 0.0))
        plane2((-0.41, 0.8, 0.0), (1.0, 0.1, 1.0), BLACK, (90.0, -30.0, 90.0))
        plane2((0.41, 0.8, 0.0), (1.0, 0.1, 1.0), BLACK, (90.0, 30.0, 90.0))

        prims.sphere.reset()
        prims.cylinder.reset()
        prims.cube.reset()
        prims.plane2.reset()
        return transform

    def on_key(self, key: str) -> bool:
        """a/d, q/e, s/w move along x, y, z; r and t turn; True if handled."""
        if key in _LAMP_MOVES:
            self.position = self.position + _LAMP_MOVES[key]
        elif key in _LAMP_TURNS:
            self.rotation = self.rotation + _LAMP_TURNS[key]
        else:
            return False
        return True


# ------------------------------------------------------------- fan store

_STORE_FRAME = _grey(0.5)
_STORE_FRAME1 = _grey(0.4)
_STORE_FRAME2 = _grey(0.9)
_STORE_DARK = _grey(0.1)
_STORE_GREY = _grey(0.2)
_STORE_WALL = Vec4(0.0, 255.0, 255.0, 255.0) / 255.0
_STORE_FLOOR = Vec4(0.85, 0.75, 0.6, 1.0)

_STORE_CYLINDERS = (
    ((21.0, 2.0, 10.0), (15.0, 0.1, 15.0), _STORE_GREY),
    ((-2.0, 4.0, 15.0), (20.0, 4.0, 12.0), _STORE_GREY),
    ((-2.0, 6.0, 15.0), (21.5, 1.0, 13.5), _STORE_FRAME2),
)

_STORE_CUBES = (
    # floor, ceiling and roof
    ((0.0, 1.78, 0.0), _NO_ROT, (65.0, 0.5, 45.0), _STORE_FLOOR),
    ((0.0, 0.0, 0.0), _NO_ROT, (70.0, 4.0, 50.0), _STORE_FRAME),
    ((0.0, 40.5, 0.0), _NO_ROT, (72.0, 1.5, 52.0), _STORE_FRAME),
    ((0.0, 48.0, 0.0), _NO_ROT, (70.0, 15.0, 50.0), _STORE_FRAME1),
    ((0.0, 55.0, 0.0), _NO_ROT, (72.0, 1.5, 52.0), _STORE_FRAME),
    # walls
    ((-33.0, 20.0, 0.0), _NO_ROT, (2.0, 40.0, 48.0), _STORE_WALL),
    ((33.0, 20.0, 0.0), _NO_ROT, (2.0, 40.0, 48.0), _STORE_WALL),
    ((0.0, 20.0, -23.0), _NO_ROT, (68.0, 40.0, 2.0), _STORE_WALL),
    # corner posts and skirting
    ((-33.0, 5.0, -23.0), _NO_ROT, (3.0, 8.0, 3.0), _STORE_DARK),
    ((-33.0, 5.0, 23.0), _NO_ROT, (3.0, 8.0, 3.0), _STORE_DARK),
    ((33.0, 5.0, -23.0), _NO_ROT, (3.0, 8.0, 3.0), _STORE_DARK),
    ((-33.0, 8.0, 0.0), _NO_ROT, (2.8, 2.0, 48.0), _STORE_DARK),
    ((33.0, 8.0, 0.0), _NO_ROT, (2.8, 2.0, 48.0), _STORE_DARK),
    ((-33.0, 5.0, 0.0), _NO_ROT, (2.8, 6.0, 48.0), _STORE_GREY),
    ((33.0, 5.0, 0.0), _NO_ROT, (2.8, 6.0, 48.0), _STORE_GREY),
    ((0.0, 8.0, -23.0), _NO_ROT, (68.0, 2.0, 2.8), _STORE_DARK),
    ((0.0, 5.0, -23.0), _NO_ROT, (68.0, 6.0, 2.4), _STORE_GREY),
    # glass door frame
    ((-10.0, 3.0, 23.0), _NO_ROT, (48.0, 2.0, 2.0), _STORE_DARK),
    ((30.0, 3.0, 23.0), _NO_ROT, (5.0, 2.0, 2.0), _STORE_DARK),
    ((23.0, 35.0, 23.0), _NO_ROT, (20.0, 2.0, 1.95), _STORE_DARK),
    ((33.0, 5.0, 23.0), _NO_ROT, (3.0, 8.0, 3.0), _STORE_DARK),
    ((14.0, 20.0, 23.0), _NO_ROT, (2.0, 40.0, 2.0), _STORE_DARK),
    ((-8.0, 20.0, 23.0), _NO_ROT, (2.0, 40.0, 2.0), _STORE_DARK),
    ((28.0, 18.0, 23.0), _NO_ROT, (2.0, 35.0, 2.0), _STORE_DARK),
    ((33.0, 3.0, 0.0), _NO_ROT, (2.0, 2.0, 48.0), _STORE_DARK),
    # steps
    ((21.0, 1.0, 26.0), _NO_ROT, (20.0, 2.0, 2.0), _STORE_FRAME1),
    ((21.0, -0.5, 27.0), _NO_ROT, (20.0, 2.0, 5.0), _STORE_FRAME1),
    # road
    ((0.0, -2.0, 0.0), _NO_ROT, (100.0, 1.0, 100.0), _STORE_FRAME),
    # glass reflections
    ((3.0, 15.0, 23.0), (0.0, 0.0, 45.0), (10.0, 2.0, 0.01), WHITE),
    ((3.0, 25.0, 23.0), (0.0, 0.0, 45.0), (10.0, 2.0, 0.01), WHITE),
    ((-20.0, 15.0, 23.0), (0.0, 0.0, 45.0), (10.0, 2.0, 0.01), WHITE),
    ((-20.0, 25.0, 23.0), (0.0, 0.0, 45.0), (10.0, 2.0, 0.01), WHITE),
)


def draw_fan_store(prims: Primitives, position: Vec3, rotation: Vec3, scale: Vec3) -> Matrix:
    """Draw the shop building: floor, walls, door frame, steps and road."""
    global_matrix = prims.cube.transform(position, rotation, scale)
    prims.cylinder.transform(position, rotation, scale)

    cylinder = _drawer(prims.cylinder)
    for pos, size, color in _STORE_CYLINDERS:
        cylinder(pos, size, color)

    cube = _drawer(prims.cube)
    for pos, rot, size, color in _STORE_CUBES:
        cube(pos, size, color, rot)
    return global_matrix


# ------------------------------------------------------------------ table

_TABLE_LIGHT = _grey(0.9)
_TABLE_DARK = _grey(0.1)
_TABLE_LEG = Vec4(0.36, 0.25, 0.20, 1.0)

_TABLE_PARTS = (
    ((0.0, 0.0, 0.0), (1.1, 0.05, 0.6), _TABLE_DARK),
    ((0.0, -0.25, -0.2), (0.95, 0.5, 0.05), _TABLE_LIGHT),
    ((-0.45, -0.25, 0.0), (0.05, 0.5, 0.45), _TABLE_LIGHT),
    ((0.45, -0.25, 0.0), (0.05, 0.5, 0.45), _TABLE_LIGHT),
    ((0.47, -0.25, 0.22), (0.05, 0.5, 0.05), _TABLE_LEG),
    ((-0.47, -0.25, 0.22), (0.05, 0.5, 0.05), _TABLE_LEG),
    ((0.47, -0.25, -0.22), (0.05, 0.5, 0.05), _TABLE_LEG),
    ((-0.47, -0.25, -0.22), (0.05, 0.5, 0.05), _TABLE_LEG),
    ((0.0, -0.2, -0.23), (1.0, 0.05, 0.05), _TABLE_DARK),
    ((0.48, -0.2, -0.0025), (0.05, 0.05, 0.505), _TABLE_DARK),
    ((-0.48, -0.2, -0.0025), (0.05, 0.05, 0.505), _TABLE_DARK),
    ((0.0, -0.5, -0.23), (1.0, 0.05, 0.05), _TABLE_DARK),
    ((0.48, -0.5, -0.0025), (0.05, 0.05, 0.505), _TABLE_DARK),
    ((-0.48, -0.5, -0.0025), (0.05, 0.05, 0.505), _TABLE_DARK),
)


def draw_table(prims: Primitives, position: Vec3, rotation: Vec3, scale: Vec3) -> Matrix:
    """Draw a desk with side panels and cross bars."""
    global_matrix = prims.cube.transform(position, rotation, scale)
    cube = _drawer(prims.cube)
    for pos, size, color in _TABLE_PARTS:
        cube(pos, size, color)
    return global_matrix


# ----------------------------------------------------------------- chairs


def draw_chair(prims: Primitives, position: Vec3, rotation: Vec3, scale: Vec3) -> Matrix:
    """Draw a wooden chair with a cushion and a slatted back."""
    global_matrix = prims.cylinder.transform(position, rotation, scale)
    prims.cube.transform(position, rotation, scale)

    wood = _grey(0.9)
    cushion = _grey(0.1)
    cylinder = _drawer(prims.cylinder)
    cube = _drawer(prims.cube)

    cylinder((0.0, 0.55, 0.0), (0.6, 0.05, 0.6), wood)
    cylinder((0.0, 0.6, 0.0), (0.7, 0.03, 0.7), cushion)
    cube((0.0, 0.55, 0.0), (0.8, 0.06, 0.8), wood)

    leg = 0.38
    for x, z in ((leg, leg), (-leg, leg), (leg, -leg), (-leg, -leg)):
        cylinder((x, 0.3, z), (0.06, 0.6, 0.06), wood)

    cube((0.0, 0.2, leg), (0.75, 0.04, 0.06), wood)
    cube((0.0, 0.2, -leg), (0.75, 0.04, 0.06), wood)
    cube((leg, 0.2, 0.0), (0.06, 0.04, 0.75), wood)
    cube((-leg, 0.2, 0.0), (0.06, 0.04, 0.75), wood)

    back_height = 1.2
    cube((0.0, 1.0, -0.4), (0.55, 0.06, 0.06), wood)
    cube((0.0, 0.8, -0.4), (0.55, 0.06, 0.06), wood)
    for i in range(-2, 3):
        cube((i * 0.13, 0.9, -0.4), (0.06, back_height, 0.06), wood)

    cylinder((-leg, 0.85, -0.4), (0.06, 1.1, 0.06), wood)
    cylinder((leg, 0.85, -0.4), (0.06, 1.1, 0.06), wood)
    return global_matrix


def draw_chair1(prims: Primitives, position: Vec3, rotation: Vec3, scale: Vec3) -> Matrix:
    """Draw an office chair on a five-spoke base."""
    global_matrix = prims.cylinder.transform(position, rotation, scale)
    prims.cube.transform(position, rotation, scale)

    seat = _grey(0.1)
    metal = _grey(0.5)
    cylinder = _drawer(prims.cylinder)
    cube = _drawer(prims.cube)

    cylinder((0.0, -0.3, 0.0), (0.1, 0.4, 0.1), metal)
    for i in range(5):
        angle = i * (360.0 / 5)
        cube((0.0, -0.5, 0.0), (0.75, 0.05, 0.1), metal, (0.0, angle, 0.0))

    cube((0.0, 0.0, 0.0), (0.6, 0.1, 0.6), seat)
    cube((0.0, 0.6, -0.3), (0.65, 0.9, 0.1), seat, (-10.0, 0.0, 0.0))
    cube((0.0, 1.1, -0.3), (0.4, 0.2, 0.1), seat)
    cube((-0.35, 0.2, 0.0), (0.1, 0.3, 0.5), seat)
    cube((0.35, 0.2, 0.0), (0.1, 0.3, 0.5), seat)
    cylinder((0.0, -0.15, 0.0), (0.2, 0.3, 0.2), metal)
    return global_matrix


# ------------------------------------------------------ keyboard and mouse

_KEYBOARD_BODY = _grey(0.2)
_KEYBOARD_KEYS = _grey(0.7)

_KEYBOARD_PARTS = (
    ((0.0, 0.0, 0.0), (2.0, 0.1, 0.8), _KEYBOARD_BODY),
    ((0.8, 0.05, 0.0), (0.3, 0.04, 0.6), _KEYBOARD_KEYS),
    ((-0.4, 0.05, 0.0), (1.0, 0.04, 0.3), _KEYBOARD_KEYS),
    ((-0.4, 0.05, -0.25), (1.0, 0.04, 0.1), _KEYBOARD_KEYS),
    ((-0.45, 0.05, 0.25), (0.6, 0.04, 0.1), _KEYBOARD_KEYS),
    ((-0.85, 0.05, 0.25), (0.1, 0.04, 0.1), _KEYBOARD_KEYS),
    ((0.0, 0.05, 0.25), (0.2, 0.04, 0.1), _KEYBOARD_KEYS),
    ((0.4, 0.05, 0.25), (0.3, 0.04, 0.08), _KEYBOARD_KEYS),
    ((0.4, 0.05, -0.15), (0.3, 0.04, 0.3), _KEYBOARD_KEYS),
    ((0.4, 0.05, 0.2), (0.08, 0.04, 0.15), _KEYBOARD_KEYS),
)

_MOUSE_PARTS = (
    ((0.0, 0.0, 0.0), (0.3, 0.1, 0.5), _KEYBOARD_BODY),
    ((0.0, 0.05, 0.0), (0.25, 0.1, 0.45), _KEYBOARD_BODY),
    ((-0.06, 0.065, -0.1), (0.07, 0.1, 0.12), _KEYBOARD_KEYS),
    ((0.06, 0.065, -0.1), (0.07, 0.1, 0.12), _KEYBOARD_KEYS),
)


def draw_keyboard(prims: Primitives, position: Vec3, rotation: Vec3, scale: Vec3) -> Matrix:
    """Draw a keyboard: a dark base with lighter key blocks."""
    global_matrix = prims.cylinder.transform(position, rotation, scale)
    prims.cube.transform(position, rotation, scale)
    cube = _drawer(prims.cube)
    for pos, size, color in _KEYBOARD_PARTS:
        cube(pos, size, color)
    return global_matrix


def draw_mouse(prims: Primitives, position: Vec3, rotation: Vec3, scale: Vec3) -> Matrix:
    """Draw a computer mouse with two buttons."""
    global_matrix = prims.cylinder.transform(position, rotation, scale)
    prims.cube.transform(position, rotation, scale)
    cube = _drawer(prims.cube)
    for pos, size, color in _MOUSE_PARTS:
        cube(pos, size, color)
    return global_matrix