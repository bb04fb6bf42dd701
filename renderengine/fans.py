"""The shop's fans: ceiling, circular, wall-mounted and portable.

Each fan keeps its animation state (blade spin, head sweep) and advances it
by one step every time it is drawn.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .furniture import WHITE
from .matrices import Matrix, identity, rotate_x, rotate_y, translate
from .meshes import DEFAULT_SHADER, DrawCall, Primitive, Primitives
from .vectors import Vec3, Vec4

Triple = Tuple[float, float, float]
Color = Union[Vec3, Vec4]

_NO_ROT: Triple = (0.0, 0.0, 0.0)
BLADE_COUNT = 3
SWEEP_LIMIT = 30.0
TILT_LIMIT = 40.0
TILT_STEP = 0.55


def _put(
    prim: Primitive,
    pos: Triple,
    size: Triple,
    color: Color,
    rot: Triple = _NO_ROT,
) -> DrawCall:
    return prim.draw(Vec3(*pos), Vec3(*rot), Vec3(*size), color, DEFAULT_SHADER)


def _blades(prim: Primitive, size: Triple, color: Color) -> None:
    """Draw evenly spaced blades about the current model matrix's y axis."""
    for i in range(BLADE_COUNT):
        _put(prim, (0.0, 0.0, 0.0), size, color, (0.0, i * (360.0 / BLADE_COUNT), 0.0))


# ------------------------------------------------------------ ceiling fan


@dataclass
class CeilingFan:
    """A ceiling fan switched on with 'm' and off with 'n'."""

    rotate: Vec3 = Vec3()
    on: bool = False
    angle: float = 0.0

    def draw(
        self,
        prims: Primitives,
        position: Vec3,
        rotation: Vec3,
        scale: Vec3,
        enable_input: bool = False,
    ) -> Matrix:
        """Draw the fan and, when it is on, turn the blades one degree."""
        if enable_input:
            rotation = rotation + self.rotate

        if self.on:
            self.angle += 1.0
            if self.angle >= 360.0:
                self.angle -= 360.0

        global_matrix = prims.cylinder.transform(position, rotation, scale)
        prims.plane2.transform(position, rotation, scale)

        _put(prims.cylinder, (0.0, 0.0, 0.0), (2.0, 0.7, 2.0), WHITE)

        local = rotate_y(self.rotate.y) if enable_input else identity()
        prims.cube.transform_matrix(global_matrix * local)

        _put(prims.cylinder, (0.0, -0.8, 0.0), (0.6, 1.0, 0.6), WHITE)
        _put(prims.cylinder, (0.0, -1.5, 0.0), (2.0, 1.0, 2.0), WHITE)

        prims.plane2.transform_matrix(global_matrix * rotate_y(self.angle))
        blade = (2.0, 0.3, 8.0)
        _put(prims.plane2, (0.0, -1.5, 4.0), blade, WHITE)
        _put(prims.plane2, (-4.0, -1.5, -2.3), blade, WHITE, (0.0, -120.0, 0.0))
        _put(prims.plane2, (4.0, -1.5, -2.3), blade, WHITE, (0.0, 120.0, 0.0))
        prims.plane2.transform_matrix(global_matrix)
        return global_matrix

    def on_key(self, key: str) -> bool:
        """'m' switches the fan on, 'n' off; True if handled."""
        if key == "m":
            self.on = True
        elif key == "n":
            self.on = False
        else:
            return False
        return True


# ----------------------------------------------------------- circular fan

_CIRCULAR_RED = Vec3(1.0, 0.0, 0.0)
_CIRCULAR_BLADE = Vec3(0.7, 0.7, 0.0)


@dataclass
class CircularFan:
    """A box fan on a stand whose head tilts with 'u' and 'i'."""

    rot_axis: float = 0.0
    blade_rotation: float = 0.0

    @staticmethod
    def _frame(prim: Primitive, offset: Triple, color: Color) -> None:
        ox, oy, oz = offset
        for (x, y, z), size in (
            ((0.0, 0.5, 0.0), (1.8, 0.05, 0.05)),
            ((0.0, 1.8, 0.0), (1.8, 0.05, 0.05)),
            ((-0.75, 1.15, 0.0), (0.05, 1.5, 0.05)),
            ((0.75, 1.15, 0.0), (0.05, 1.5, 0.05)),
        ):
            _put(prim, (ox + x, oy + y, oz + z), size, color)

    def draw(
        self,
        prims: Primitives,
        position: Vec3,
        rotation: Vec3,
        scale: Vec3,
        enable_input: bool = False,
    ) -> Matrix:
        """Draw the fan, spin the blades one degree and reset the cube transform."""
        self.blade_rotation += 1.0
        cube = prims.cube
        red = _CIRCULAR_RED
        global_matrix = cube.transform(position, rotation, scale)

        _put(cube, (0.0, -1.0, 0.0), (2.0, 0.3, 2.0), red)
        _put(cube, (0.0, -0.77, -0.7), (0.4, 0.1, 0.4), red)

        _put(cube, (0.0, -0.55, 0.0), (0.2, 0.5, 0.2), red)
        _put(cube, (0.0, -0.4, 0.0), (1.5, 0.2, 0.2), red)
        _put(cube, (0.95, 0.25, 0.0), (0.2, 1.5, 0.2), red, (0.0, 0.0, -20.0))
        _put(cube, (-0.95, 0.25, 0.0), (0.2, 1.5, 0.2), red, (0.0, 0.0, 20.0))
        _put(cube, (-1.0, 0.95, 0.0), (0.5, 0.12, 0.12), red, (0.0, 0.0, 30.0))
        _put(cube, (1.0, 0.95, 0.0), (0.5, 0.12, 0.12), red, (0.0, 0.0, -30.0))

        head = cube.transform_matrix(global_matrix * rotate_x(self.rot_axis))
        _put(cube, (0.0, 1.2, 0.0), (1.0, 1.0, 1.0), red)
        _put(cube, (0.0, 1.2, 0.0), (0.3, 0.1, 0.1), red)

        self._frame(cube, (0.0, 0.0, 0.85), red)
        self._frame(cube, (0.0, 0.0, -0.85), red)

        rail = (0.05, 0.05, 1.7)
        for x, y in ((0.75, 0.5), (-0.75, 1.85), (-0.75, 0.5), (0.75, 1.85), (0.75, 1.0), (-0.75, 1.0)):
            _put(cube, (x, y, 0.0), rail, red)

        cube.transform_matrix(
            head * translate(0.0, 1.25, -0.55) * rotate_x(90) * rotate_y(self.blade_rotation)
        )
        _blades(cube, (0.2, 0.05, 1.85), _CIRCULAR_BLADE)

        cube.reset()
        return global_matrix

    def on_key(self, key: str) -> bool:
        """'u' tilts the head up, 'i' down, within limits; True if it moved."""
        if key == "u":
            if self.rot_axis > TILT_LIMIT:
                return False
            self.rot_axis += TILT_STEP
        elif key == "i":
            if self.rot_axis < -TILT_LIMIT:
                return False
            self.rot_axis -= TILT_STEP
        else:
            return False
        return True


# ---------------------------------------------------------------- wall fan

_WALL_BODY = Vec4(1.0, 1.0, 0.0, 1.0)
_GREY_BLADE = Vec3(0.7, 0.7, 0.7)


@dataclass
class WallFan:
    """A wall-mounted fan whose head sweeps back and forth."""

    motor_rot: float = 0.0
    blade_rot: float = 0.0
    direction: float = 1.0

    def draw(
        self,
        prims: Primitives,
        position: Vec3,
        rotation: Vec3,
        scale: Vec3,
        enable_input: bool = False,
    ) -> Matrix:
        """Draw the fan, advance blade and sweep, and reset the cube transform."""
        self.blade_rot += 2.0
        self.motor_rot += 0.1 * self.direction
        if self.motor_rot > SWEEP_LIMIT:
            self.direction = -1.0
        if self.motor_rot < -SWEEP_LIMIT:
            self.direction = 1.0

        cube = prims.cube
        c = _WALL_BODY
        global_matrix = cube.transform(position, rotation, scale)

        _put(cube, (0.0, 1.0, 0.0), (1.75, 2.5, 0.15), c)
        _put(cube, (0.0, 1.5, 0.15), (1.0, 1.5, 0.15), c)

        _put(cube, (0.0, 1.5, 0.75), (0.74, 0.74, 1.5), c)
        _put(cube, (0.0, 1.9, 1.85), (0.74, 0.74, 1.5), c, (-40.0, 0.0, 0.0))

        pivot = Vec3(0.0, 3.0, 2.85)
        motor = cube.transform_matrix(
            global_matrix * translate(pivot) * rotate_y(self.motor_rot) * translate(-pivot)
        )
        _put(cube, (0.0, 3.0, 2.85), (2.0, 2.0, 3.5), c, (40.0, 0.0, 0.0))
        _put(cube, (0.0, 2.75, 3.25), (0.75, 0.75, 3.95), c, (40.0, 0.0, 0.0))

        cube.transform_matrix(
            motor * translate(0.0, 1.5, 4.85) * rotate_x(-50) * rotate_y(self.blade_rot)
        )
        _blades(cube, (0.3, 0.1, 4.0), _GREY_BLADE)

        cube.reset()
        return global_matrix


# ------------------------------------------------------------ portable fan

_PORTABLE_GREEN = Vec3(0.2, 0.8, 0.2)


@dataclass
class PortableFan:
    """A standing fan whose head sweeps back and forth."""

    direction: float = 1.0
    rot_axis: float = 0.0
    blade_rotation: float = 0.0

    def draw(
        self,
        prims: Primitives,
        position: Vec3,
        rotation: Vec3,
        scale: Vec3,
        enable_input: bool = False,
    ) -> Matrix:
        """Draw the fan, advance blade and sweep, and reset the cube transform."""
        self.blade_rotation += 1.0
        self.rot_axis += 0.15 * self.direction
        if self.rot_axis > SWEEP_LIMIT:
            self.direction = -1.0
        if self.rot_axis < -SWEEP_LIMIT:
            self.direction = 1.0

        cube = prims.cube
        green = _PORTABLE_GREEN
        global_matrix = cube.transform(position, rotation, scale)

        _put(cube, (0.0, -1.0, 0.0), (1.5, 0.2, 1.5), green)
        _put(cube, (0.0, 0.0, 0.0), (0.2, 1.5, 0.2), green)
        _put(cube, (0.0, 1.0, 0.0), (0.5, 0.3, 0.5), green)

        head = cube.transform_matrix(global_matrix * rotate_y(self.rot_axis))
        _put(cube, (0.0, 1.0, -0.5), (1.0, 1.0, 1.0), green)
        _put(cube, (0.0, 1.0, -1.1), (0.24, 0.24, 0.75), green)

        cube.transform_matrix(
            head * translate(0.0, 1.0, -1.25) * rotate_x(90) * rotate_y(self.blade_rotation)
        )
        _blades(cube, (0.3, 0.1, 2.0), _GREY_BLADE)

        cube.reset()
        return global_matrix

    def on_loop(self) -> None:
        """Turn the blades a little between frames."""
        self.blade_rotation += 0.1