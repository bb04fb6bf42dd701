"""Square float matrices and the 4x4 transform generators used by the renderer."""

from __future__ import annotations

import math
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from .vectors import Vec2, Vec3, Vec4

Number = Union[int, float]
Row = Tuple[float, ...]

_VECTOR_TYPES = {2: Vec2, 3: Vec3, 4: Vec4}


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Matrix:
    """An immutable square matrix stored row by row."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[Number]]) -> None:
        data = tuple(tuple(float(c) for c in row) for row in rows)
        size = len(data)
        if size == 0 or any(len(row) != size for row in data):
            raise ValueError("a matrix needs a non-empty, square set of rows")
        self._rows: Tuple[Row, ...] = data

    @classmethod
    def diagonal(cls, size: int = 4, value: Number = 1.0) -> "Matrix":
        """A ``size`` by ``size`` matrix with ``value`` on the diagonal."""
        if size < 1:
            raise ValueError("matrix size must be at least 1")
        return cls(
            [[value if i == j else 0.0 for j in range(size)] for i in range(size)]
        )

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def __getitem__(self, index):
        """``m[i]`` is row ``i``; ``m[i, j]`` is the entry at row i, column j."""
        if isinstance(index, tuple):
            row, col = index
            return self._rows[row][col]
        return self._rows[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._rows]!r})"

    def _check_same_size(self, other: "Matrix") -> None:
        if other.size != self.size:
            raise ValueError(
                f"matrix sizes differ: {self.size}x{self.size} and {other.size}x{other.size}"
            )

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_size(other)
        return Matrix(
            [a + b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)
        )

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_size(other)
        return Matrix(
            [a - b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)
        )

    def __mul__(self, other):
        if _is_scalar(other):
            return Matrix([c * other for c in row] for row in self._rows)
        if isinstance(other, Matrix):
            self._check_same_size(other)
            columns = tuple(zip(*other._rows))
            return Matrix(
                [sum(a * b for a, b in zip(row, col)) for col in columns]
                for row in self._rows
            )
        if isinstance(other, (Vec2, Vec3, Vec4)):
            comps = tuple(other)
            # A 3D point is promoted with w = 1 when it meets a 4x4 matrix.
            if isinstance(other, Vec3) and self.size == 4:
                comps = comps + (1.0,)
            if len(comps) != self.size:
                raise ValueError(
                    f"cannot multiply a {self.size}x{self.size} matrix by "
                    f"{type(other).__name__}"
                )
            result = (sum(a * b for a, b in zip(row, comps)) for row in self._rows)
            return _VECTOR_TYPES[self.size](*result)
        return NotImplemented

    def __rmul__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return self * other

    def __truediv__(self, scalar):
        if not _is_scalar(scalar):
            return NotImplemented
        return self * (1.0 / scalar)

    def flat(self) -> Tuple[float, ...]:
        """All entries in row-major order."""
        return tuple(c for row in self._rows for c in row)

    def __str__(self) -> str:
        lines = ("( " + ", ".join(f"{c:g}" for c in row) + " )" for row in self._rows)
        return "\n" + "".join(line + "\n" for line in lines)


def _build(entries: Dict[Tuple[int, int], float], size: int = 4) -> Matrix:
    """An identity matrix with some entries replaced."""
    rows = [[1.0 if i == j else 0.0 for j in range(size)] for i in range(size)]
    for (i, j), value in entries.items():
        rows[i][j] = value
    return Matrix(rows)


def identity() -> Matrix:
    """The 4x4 identity matrix."""
    return Matrix.diagonal(4, 1.0)


def transpose(m: Matrix) -> Matrix:
    """Rows and columns swapped."""
    return Matrix(zip(*m))


def matrix_comp_mult(a: Matrix, b: Matrix) -> Matrix:
    """Entry-by-entry product of two matrices of the same size."""
    if a.size != b.size:
        raise ValueError("matrix sizes differ")
    return Matrix([x * y for x, y in zip(ra, rb)] for ra, rb in zip(a, b))


def rotate_x(theta: Number) -> Matrix:
    """Rotation about the x axis by ``theta`` degrees."""
    angle = math.radians(theta)
    c, s = math.cos(angle), math.sin(angle)
    return _build({(1, 1): c, (2, 2): c, (2, 1): s, (1, 2): -s})


def rotate_y(theta: Number) -> Matrix:
    """Rotation about the y axis by ``theta`` degrees."""
    angle = math.radians(theta)
    c, s = math.cos(angle), math.sin(angle)
    return _build({(0, 0): c, (2, 2): c, (0, 2): s, (2, 0): -s})


def rotate_z(theta: Number) -> Matrix:
    """Rotation about the z axis by ``theta`` degrees."""
    angle = math.radians(theta)
    c, s = math.cos(angle), math.sin(angle)
    return _build({(0, 0): c, (1, 1): c, (1, 0): s, (0, 1): -s})


def _three(
    x: Union[Number, Vec3, Vec4], y: Optional[Number], z: Optional[Number], uniform: bool
) -> Tuple[float, float, float]:
    if isinstance(x, (Vec3, Vec4)):
        if y is not None or z is not None:
            raise TypeError("pass either a vector or three numbers")
        return x.x, x.y, x.z
    if y is None and z is None and uniform:
        return x, x, x
    if y is None or z is None:
        raise TypeError("three components are needed")
    return x, y, z


def translate(
    x: Union[Number, Vec3, Vec4], y: Optional[Number] = None, z: Optional[Number] = None
) -> Matrix:
    """Translation by ``(x, y, z)``, or by the xyz part of a vector."""
    tx, ty, tz = _three(x, y, z, uniform=False)
    return _build({(0, 3): tx, (1, 3): ty, (2, 3): tz})


def scale(
    x: Union[Number, Vec3, Vec4], y: Optional[Number] = None, z: Optional[Number] = None
) -> Matrix:
    """Scaling by ``(x, y, z)``, by a vector, or uniformly by a single number."""
    sx, sy, sz = _three(x, y, z, uniform=True)
    return _build({(0, 0): sx, (1, 1): sy, (2, 2): sz})


def ortho(
    left: Number, right: Number, bottom: Number, top: Number, z_near: Number, z_far: Number
) -> Matrix:
    """Orthographic projection of the given box onto the unit cube."""
    return _build(
        {
            (0, 0): 2.0 / (right - left),
            (1, 1): 2.0 / (top - bottom),
            (2, 2): 2.0 / (z_near - z_far),
            (3, 3): 1.0,
            (0, 3): -(right + left) / (right - left),
            (1, 3): -(top + bottom) / (top - bottom),
            (2, 3): -(z_far + z_near) / (z_far - z_near),
        }
    )


def ortho2d(left: Number, right: Number, bottom: Number, top: Number) -> Matrix:
    """Orthographic projection with near and far at -1 and 1."""
    return ortho(left, right, bottom, top, -1.0, 1.0)


def frustum(
    left: Number, right: Number, bottom: Number, top: Number, z_near: Number, z_far: Number
) -> Matrix:
    """Perspective projection for an off-axis viewing frustum.

    The bottom-right entry is left at 1, as the engine does.
    """
    return _build(
        {
            (0, 0): 2.0 * z_near / (right - left),
            (0, 2): (right + left) / (right - left),
            (1, 1): 2.0 * z_near / (top - bottom),
            (1, 2): (top + bottom) / (top - bottom),
            (2, 2): -(z_far + z_near) / (z_far - z_near),
            (2, 3): -2.0 * z_far * z_near / (z_far - z_near),
            (3, 2): -1.0,
        }
    )


def perspective(fovy: Number, aspect: Number, z_near: Number, z_far: Number) -> Matrix:
    """Perspective projection from a vertical field of view in degrees.

    The bottom-right entry is left at 1, as the engine does.
    """
    top = math.tan(math.radians(fovy) / 2) * z_near
    right = top * aspect
    return _build(
        {
            (0, 0): z_near / right,
            (1, 1): z_near / top,
            (2, 2): -(z_far + z_near) / (z_far - z_near),
            (2, 3): -2.0 * z_far * z_near / (z_far - z_near),
            (3, 2): -1.0,
        }
    )


def _direction(v: Union[Vec3, Vec4]) -> Vec4:
    return Vec4(v.x, v.y, v.z, 0.0)


def look_at(eye: Union[Vec3, Vec4], at: Union[Vec3, Vec4], up: Union[Vec3, Vec4]) -> Matrix:
    """View matrix for a camera at ``eye`` looking toward ``at``."""
    from .vectors import cross, normalize

    n = normalize(_direction(Vec4(eye.x - at.x, eye.y - at.y, eye.z - at.z, 0.0)))
    u = normalize(_direction(cross(up, n)))
    v = normalize(_direction(cross(n, u)))
    t = Vec4(0.0, 0.0, 0.0, 1.0)
    basis = Matrix([tuple(u), tuple(v), tuple(n), tuple(t)])
    return basis * translate(-eye.x, -eye.y, -eye.z)


def trs(position: Vec3, rotation: Vec3, scaling: Vec3) -> Matrix:
    """Translate, then rotate about x, y and z (degrees), then scale."""
    return (
        translate(position)
        * rotate_x(rotation.x)
        * rotate_y(rotation.y)
        * rotate_z(rotation.z)
        * scale(scaling)
    )