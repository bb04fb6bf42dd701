"""Directional and point lights and the shader uniforms they produce."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Union

from .matrices import Matrix
from .vectors import Vec3, Vec4

MAX_POINT_LIGHT_COUNT = 10


@dataclass
class Light:
    """A light with a position and ambient, diffuse and specular colours."""

    position: Vec3 = Vec3(0.0, 0.0, 0.0)
    ambient: Vec3 = Vec3(1.0, 1.0, 1.0)
    diffuse: Vec3 = Vec3(1.0, 1.0, 1.0)
    specular: Vec3 = Vec3(1.0, 1.0, 1.0)

    def set_position(self, position: Vec3) -> None:
        """Move the light to ``position``."""
        self.position = position

    def set_transform_matrix(self, matrix: Matrix) -> None:
        """Place the light at the origin of the frame given by ``matrix``."""
        self.position = (matrix * Vec4(0.0, 0.0, 0.0, 1.0)).xyz()


@dataclass
class DirectionalLight(Light):
    """A light shining along ``direction`` from infinitely far away."""

    direction: Vec3 = Vec3(0.0, 0.0, 0.0)


@dataclass
class PointLight(Light):
    """A light radiating from a point with distance attenuation."""

    constant: float = 1.0
    linear: float = 0.032
    quadratic: float = 0.012
    radius: float = 10.0


class LightLimitError(Exception):
    """Raised when no more point lights can be added."""


UniformValue = Union[int, float, Vec3, Vec4]


@dataclass
class LightSet:
    """One directional light and up to ``max_point_lights`` point lights."""

    max_point_lights: int = MAX_POINT_LIGHT_COUNT
    directional: DirectionalLight = field(default_factory=DirectionalLight)
    point_lights: List[PointLight] = field(default_factory=list)

    def set_directional(self, position: Vec3, direction: Vec3) -> DirectionalLight:
        """Replace the directional light and return the new one."""
        self.directional = DirectionalLight(position=position, direction=direction)
        return self.directional

    def add_point_light(self, position: Vec3) -> PointLight:
        """Add a point light at ``position`` and return it."""
        if len(self.point_lights) >= self.max_point_lights:
            raise LightLimitError("Max point light count reached!")
        light = PointLight(position=position)
        self.point_lights.append(light)
        return light

    def uniforms(self, camera_position: Vec3) -> Dict[str, UniformValue]:
        """Uniform names and values describing the lights and the viewer."""
        d = self.directional
        values: Dict[str, UniformValue] = {
            "viewPosition": camera_position,
            "directionalLight.direction": d.direction,
            "directionalLight.ambient": d.ambient,
            "directionalLight.diffuse": d.diffuse,
            "directionalLight.specular": d.specular,
            "pointLightCount": len(self.point_lights),
        }
        for i, light in enumerate(self.point_lights):
            prefix = f"pointLights[{i}]."
            values.update(
                {
                    prefix + "position": light.position,
                    prefix + "ambient": light.ambient,
                    prefix + "diffuse": light.diffuse,
                    prefix + "specular": light.specular,
                    prefix + "constant": light.constant,
                    prefix + "linear": light.linear,
                    prefix + "quadratic": light.quadratic,
                    prefix + "radius": light.radius,
                }
            )
        return values

    def clear(self) -> None:
        """Drop every point light and reset the directional light."""
        self.point_lights.clear()
        self.directional = DirectionalLight()