"""Unit meshes (cube, cylinder, planes, sphere) and the draw calls that use them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, Iterator, List, Protocol, Sequence, Tuple, Union

from .matrices import Matrix, identity, trs
from .vectors import Vec3, Vec4, cross, normalize

DEFAULT_SHADER = "default"
CYLINDER_SIDES = 256
SPHERE_SLICES = 32
SPHERE_STACKS = 32

# Face order shared by the box-shaped meshes; each face is drawn as two triangles.
_BOX_FACES = (
    (1, 0, 3, 2),
    (2, 3, 7, 6),
    (3, 0, 4, 7),
    (6, 5, 1, 2),
    (4, 5, 6, 7),
    (5, 4, 0, 1),
)


@dataclass(frozen=True)
class Mesh:
    """Triangle list with one normal per vertex."""

    name: str
    points: Tuple[Vec4, ...]
    normals: Tuple[Vec3, ...]

    def __post_init__(self) -> None:
        if len(self.points) != len(self.normals):
            raise ValueError(
                f"mesh {self.name!r} has {len(self.points)} points "
                f"but {len(self.normals)} normals"
            )
        if len(self.points) % 3:
            raise ValueError(f"mesh {self.name!r} is not a list of triangles")

    @property
    def vertex_count(self) -> int:
        """Number of vertices drawn."""
        return len(self.points)


def _quad(vertices: Sequence[Vec4], a: int, b: int, c: int, d: int):
    """Two triangles a-b-c and a-c-d sharing one flat normal."""
    u = vertices[b] - vertices[a]
    v = vertices[c] - vertices[b]
    normal = normalize(cross(u, v))
    for index in (a, b, c, a, c, d):
        yield vertices[index], normal


def _box_mesh(name: str, vertices: Sequence[Vec4]) -> Mesh:
    pairs = [pair for face in _BOX_FACES for pair in _quad(vertices, *face)]
    return Mesh(
        name=name,
        points=tuple(p for p, _ in pairs),
        normals=tuple(n for _, n in pairs),
    )


def _box_vertices(back_left: float, back_right: float) -> List[Vec4]:
    return [
        Vec4(-0.5, -0.5, 0.5, 1.0),
        Vec4(-0.5, 0.5, 0.5, 1.0),
        Vec4(0.5, 0.5, 0.5, 1.0),
        Vec4(0.5, -0.5, 0.5, 1.0),
        Vec4(back_left, -0.5, -0.5, 1.0),
        Vec4(back_left, 0.5, -0.5, 1.0),
        Vec4(back_right, 0.5, -0.5, 1.0),
        Vec4(back_right, -0.5, -0.5, 1.0),
    ]


@lru_cache(maxsize=None)
def build_cube() -> Mesh:
    """Unit cube centred on the origin, 36 vertices."""
    return _box_mesh("cube", _box_vertices(-0.5, 0.5))


@lru_cache(maxsize=None)
def build_plane() -> Mesh:
    """Box whose back face spans only the left half in x."""
    return _box_mesh("plane", _box_vertices(-0.5, 0.0))


@lru_cache(maxsize=None)
def build_plane2() -> Mesh:
    """Box whose back face narrows to x in [-0.2, 0.2]; used for fan blades."""
    return _box_mesh("plane2", _box_vertices(-0.2, 0.2))


@lru_cache(maxsize=None)
def build_cylinder(sides: int = CYLINDER_SIDES) -> Mesh:
    """Unit-height cylinder of radius 0.5 about the y axis, with both caps."""
    if sides < 3:
        raise ValueError("a cylinder needs at least 3 sides")
    step = 2.0 * math.pi / sides
    ring = [(math.cos(i * step) * 0.5, math.sin(i * step) * 0.5) for i in range(sides)]
    top = [Vec4(x, 0.5, z, 1.0) for x, z in ring]
    bottom = [Vec4(x, -0.5, z, 1.0) for x, z in ring]
    vertices = top + bottom

    pairs: List[Tuple[Vec4, Vec3]] = []
    for i in range(sides):
        nxt = (i + 1) % sides
        pairs.extend(_quad(vertices, i, nxt, nxt + sides, i + sides))

    up = Vec3(0.0, 1.0, 0.0)
    top_center = Vec4(0.0, 0.5, 0.0, 1.0)
    for i in range(sides):
        nxt = (i + 1) % sides
        pairs.extend((p, up) for p in (top_center, top[i], top[nxt]))

    down = Vec3(0.0, -1.0, 0.0)
    bottom_center = Vec4(0.0, -0.5, 0.0, 1.0)
    for i in range(sides):
        nxt = (i + 1) % sides
        pairs.extend((p, down) for p in (bottom_center, bottom[nxt], bottom[i]))

    return Mesh(
        name="cylinder",
        points=tuple(p for p, _ in pairs),
        normals=tuple(n for _, n in pairs),
    )


def _sphere_point(radius: float, phi: float, theta: float) -> Vec4:
    return Vec4(
        radius * math.sin(phi) * math.cos(theta),
        radius * math.cos(phi),
        radius * math.sin(phi) * math.sin(theta),
        1.0,
    )


@lru_cache(maxsize=None)
def build_sphere(slices: int = SPHERE_SLICES, stacks: int = SPHERE_STACKS) -> Mesh:
    """Sphere of radius 0.5 built from ``stacks`` bands of ``slices`` quads."""
    if slices < 3:
        raise ValueError("a sphere needs at least 3 slices")
    if stacks < 2:
        raise ValueError("a sphere needs at least 2 stacks")
    radius = 0.5
    d_phi = math.pi / stacks
    d_theta = 2.0 * math.pi / slices
    points: List[Vec4] = []
    normals: List[Vec3] = []
    for i in range(stacks):
        phi1, phi2 = i * d_phi, (i + 1) * d_phi
        for j in range(slices):
            theta1, theta2 = j * d_theta, (j + 1) * d_theta
            a = _sphere_point(radius, phi1, theta1)
            b = _sphere_point(radius, phi1, theta2)
            c = _sphere_point(radius, phi2, theta2)
            d = _sphere_point(radius, phi2, theta1)
            for p in (a, b, c, a, c, d):
                points.append(p)
                normals.append(normalize(p.xyz()))
    return Mesh(name="sphere", points=tuple(points), normals=tuple(normals))


Color = Union[Vec3, Vec4]


@dataclass(frozen=True)
class DrawCall:
    """One mesh to draw with a model matrix, colour and shader name."""

    mesh: Mesh
    model: Matrix
    color: Vec4
    shader: object = DEFAULT_SHADER


class DrawSink(Protocol):
    def submit(self, call: DrawCall) -> None: ...


@dataclass
class DrawList:
    """Draw calls collected in submission order."""

    calls: List[DrawCall] = field(default_factory=list)

    def submit(self, call: DrawCall) -> None:
        """Append a call."""
        self.calls.append(call)

    def clear(self) -> None:
        """Drop every call."""
        self.calls.clear()

    def __iter__(self) -> Iterator[DrawCall]:
        return iter(self.calls)

    def __len__(self) -> int:
        return len(self.calls)


def _as_color(color: Color) -> Vec4:
    if isinstance(color, Vec3):
        return Vec4.from_vec3(color, 1.0)
    return color


class Primitive:
    """A mesh with a current parent model matrix, drawn into a sink."""

    def __init__(self, mesh: Mesh, sink: DrawSink) -> None:
        self.mesh = mesh
        self.sink = sink
        self.model_matrix: Matrix = identity()

    def draw(
        self,
        position: Vec3,
        rotation: Vec3,
        scale: Vec3,
        color: Color,
        shader: object = DEFAULT_SHADER,
    ) -> DrawCall:
        """Submit an instance placed by ``position``, ``rotation`` and ``scale``
        inside the current model matrix; returns the submitted call."""
        call = DrawCall(
            mesh=self.mesh,
            model=self.model_matrix * trs(position, rotation, scale),
            color=_as_color(color),
            shader=shader,
        )
        self.sink.submit(call)
        return call

    def transform(self, position: Vec3, rotation: Vec3, scale: Vec3) -> Matrix:
        """Set the model matrix from a translation, rotation and scale."""
        self.model_matrix = trs(position, rotation, scale)
        return self.model_matrix

    def transform_matrix(self, matrix: Matrix) -> Matrix:
        """Set the model matrix directly."""
        self.model_matrix = matrix
        return self.model_matrix

    def reset(self) -> None:
        """Restore the identity model matrix."""
        self.model_matrix = identity()


class Primitives:
    """The five primitive shapes, all drawing into one sink."""

    def __init__(self, sink: DrawSink) -> None:
        self.sink = sink
        self.cube = Primitive(build_cube(), sink)
        self.cylinder = Primitive(build_cylinder(), sink)
        self.plane = Primitive(build_plane(), sink)
        self.plane2 = Primitive(build_plane2(), sink)
        self.sphere = Primitive(build_sphere(), sink)
        self.meshes: Tuple[Mesh, ...] = tuple(
            p.mesh for p in (self.cube, self.cylinder, self.plane, self.plane2, self.sphere)
        )

    def _all(self) -> Iterable[Primitive]:
        return (self.cube, self.cylinder, self.plane, self.plane2, self.sphere)