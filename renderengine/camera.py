"""Perspective camera that moves and turns in response to key presses."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

from .matrices import Matrix, look_at, perspective
from .vectors import Vec3, Vec4, cross, dot, normalize

CAM_MOVE_SPEED = 2.0
FIELD_OF_VIEW = 60.0


def rotate_axis(position: Vec3, angle: float, axis: Vec3) -> Vec3:
    """Rotate ``position`` by ``angle`` radians about ``axis`` (Rodrigues' formula)."""
    a = normalize(axis)
    cos_theta = math.cos(angle)
    sin_theta = math.sin(angle)
    return (
        position * cos_theta
        + cross(a, position) * sin_theta
        + a * (dot(a, position) * (1 - cos_theta))
    )


@dataclass
class Camera:
    """A perspective camera looking from ``eye_position`` toward ``target_position``."""

    window_width: int = 0
    window_height: int = 0
    eye_position: Vec4 = Vec4(0.0, 0.0, 1.0, 1.0)
    target_position: Vec4 = Vec4(0.0, 0.0, 0.0, 1.0)
    up_direction: Vec4 = Vec4(0.0, 1.0, 0.0, 1.0)
    z_near: float = 0.1
    z_far: float = 1000.0
    motion_speed: float = 0.5
    yaw: float = field(default=0.0)

    def forward(self) -> Vec3:
        """Vector from the eye to the target (not normalised)."""
        return (self.target_position - self.eye_position).xyz()

    def up(self) -> Vec3:
        """Unit up vector perpendicular to the viewing direction."""
        fwd = normalize(self.forward())
        global_right = normalize(cross(self.up_direction, fwd))
        return normalize(cross(fwd, global_right))

    def right(self) -> Vec3:
        """Unit vector to the camera's side, perpendicular to up and forward."""
        return normalize(cross(self.up(), normalize(self.forward())))

    def position3(self) -> Vec3:
        """The eye position without its w component."""
        return self.eye_position.xyz()

    def setup(self, window_width: int, window_height: int, z_near: float, z_far: float) -> None:
        """Set the viewport size and the near and far clipping distances."""
        self.window_width = window_width
        self.window_height = window_height
        self.z_near = z_near
        self.z_far = z_far

    def set_position(self, position: Union[Vec3, Vec4]) -> None:
        """Place the eye and look one unit along +z from it."""
        if isinstance(position, Vec3):
            position = Vec4.from_vec3(position)
        self.eye_position = position
        self.target_position = self.eye_position + Vec3(0.0, 0.0, 1.0)

    def set_target(self, position: Vec4) -> None:
        """Point the camera at ``position``."""
        self.target_position = position

    def move(self, delta: Union[Vec3, Vec4]) -> None:
        """Shift both the eye and the target by ``delta``."""
        self.eye_position = self.eye_position + delta
        self.target_position = self.target_position + delta

    def rotate(self, delta_x: float) -> None:
        """Turn about the vertical axis; the target ends one unit from the eye."""
        self.yaw += delta_x / 30
        eye = self.eye_position
        self.target_position = Vec4(
            eye.x + math.sin(self.yaw), eye.y, eye.z + math.cos(self.yaw), 1.0
        )

    def set_speed(self, speed: float) -> None:
        """Set the mouse motion speed."""
        self.motion_speed = speed

    def handle_key(self, key: str) -> bool:
        """Move or turn for one of the keys a, d, w, s, q, e, r, t.

        Returns True when the key was one of them.
        """
        if key == "a":
            self.move(self.right() * CAM_MOVE_SPEED)
        elif key == "d":
            self.move(-self.right() * CAM_MOVE_SPEED)
        elif key == "s":
            self.move(-self.forward() * CAM_MOVE_SPEED)
        elif key == "w":
            self.move(self.forward() * CAM_MOVE_SPEED)
        elif key == "q":
            self.move(-self.up() * CAM_MOVE_SPEED)
        elif key == "e":
            self.move(self.up() * CAM_MOVE_SPEED)
        elif key == "r":
            self.rotate(1)
        elif key == "t":
            self.rotate(-1)
        else:
            return False
        return True

    def view_matrix(self) -> Matrix:
        """World-to-camera transform."""
        return look_at(self.eye_position, self.target_position, self.up_direction)

    def projection_matrix(self) -> Matrix:
        """Perspective projection with a 60 degree vertical field of view."""
        aspect = self.window_width / self.window_height
        return perspective(FIELD_OF_VIEW, aspect, self.z_near, self.z_far)