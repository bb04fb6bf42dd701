"""Small 2-, 3- and 4-component float vectors with the usual arithmetic."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass, fields
from typing import Callable, Iterator, Optional, Tuple, Union

Scalar = Union[int, float]


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class _VectorOps:
    """Arithmetic helpers shared by all vector sizes."""

    __slots__ = ()

    def _components(self) -> Tuple[float, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def _coerce(self, other: object) -> Optional[Tuple[float, ...]]:
        # A bare number stands for a vector with every component equal to it.
        if _is_scalar(other):
            return (float(other),) * len(fields(self))
        if type(other) is type(self):
            return other._components()
        return None

    def _build(self, components):
        return type(self)(*components)

    def _binary(self, other: object, op: Callable[[float, float], float]):
        comps = self._coerce(other)
        if comps is None:
            return NotImplemented
        return self._build(op(a, b) for a, b in zip(self._components(), comps))

    def _scaled(self, factor: Scalar):
        return self._build(c * factor for c in self._components())

    def _mul(self, other: object):
        if _is_scalar(other):
            return self._scaled(other)
        return self._binary(other, operator.mul)

    def _rmul(self, other: object):
        if not _is_scalar(other):
            return NotImplemented
        return self._scaled(other)

    def _div(self, scalar: object):
        if not _is_scalar(scalar):
            return NotImplemented
        return self._scaled(1.0 / scalar)

    def _text(self) -> str:
        return "( " + ", ".join(f"{c:g}" for c in self._components()) + " )"


@dataclass(frozen=True, slots=True)
class Vec2(_VectorOps):
    """Two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y)[index]

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __mul__(self, other):
        return self._mul(other)

    def __rmul__(self, other):
        return self._rmul(other)

    def __truediv__(self, scalar):
        return self._div(scalar)

    def __str__(self) -> str:
        return self._text()


@dataclass(frozen=True, slots=True)
class Vec3(_VectorOps):
    """Three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __mul__(self, other):
        return self._mul(other)

    def __rmul__(self, other):
        return self._rmul(other)

    def __truediv__(self, scalar):
        return self._div(scalar)

    def __str__(self) -> str:
        return self._text()

    @classmethod
    def splat(cls, value: Scalar) -> "Vec3":
        """A vector with all three components set to ``value``."""
        return cls(value, value, value)

    @classmethod
    def from_vec2(cls, v: Vec2, z: Scalar) -> "Vec3":
        """Extend a 2D vector with a z component."""
        return cls(v.x, v.y, z)


@dataclass(frozen=True, slots=True)
class Vec4(_VectorOps):
    """Four-component vector; a Vec3 operand is promoted with w = 1."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def _coerce(self, other: object) -> Optional[Tuple[float, ...]]:
        if isinstance(other, Vec3):
            return (other.x, other.y, other.z, 1.0)
        return _VectorOps._coerce(self, other)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z, self.w)[index]

    def __neg__(self) -> "Vec4":
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __mul__(self, other):
        if _is_scalar(other):
            return self._scaled(other)
        comps = self._coerce(other)
        if comps is None:
            return NotImplemented
        ox, oy, oz, _ = comps
        # The w component is scaled by the other vector's z, as the engine does.
        return Vec4(self.x * ox, self.y * oy, self.z * oz, self.w * oz)

    def __rmul__(self, other):
        return self._rmul(other)

    def __truediv__(self, scalar):
        return self._div(scalar)

    def __str__(self) -> str:
        return self._text()

    @classmethod
    def from_vec3(cls, v: Vec3, w: Scalar = 1.0) -> "Vec4":
        """Extend a 3D vector with a w component (1 by default)."""
        return cls(v.x, v.y, v.z, w)

    def xyz(self) -> Vec3:
        """The first three components."""
        return Vec3(self.x, self.y, self.z)


AnyVec = Union[Vec2, Vec3, Vec4]


def dot(u: AnyVec, v: AnyVec) -> float:
    """Dot product of two vectors of the same size.

    For Vec4 the w terms are summed rather than multiplied, matching the
    engine's lighting maths.
    """
    if type(u) is not type(v):
        raise TypeError(f"cannot take dot of {type(u).__name__} and {type(v).__name__}")
    if isinstance(u, Vec4):
        return u.x * v.x + u.y * v.y + u.z * v.z + u.w + v.w
    return sum(a * b for a, b in zip(u, v))


def length(v: AnyVec) -> float:
    """Euclidean length, ``sqrt(dot(v, v))``."""
    return math.sqrt(dot(v, v))


def normalize(v: AnyVec) -> AnyVec:
    """``v`` divided by its length; raises ZeroDivisionError for a zero vector."""
    return v / length(v)


def cross(a: Union[Vec3, Vec4], b: Union[Vec3, Vec4]) -> Vec3:
    """Cross product of the xyz parts of two vectors."""
    for operand in (a, b):
        if not isinstance(operand, (Vec3, Vec4)):
            raise TypeError(f"cross needs Vec3 or Vec4, got {type(operand).__name__}")
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )