"""Shader loading and drawing of uploaded meshes through OpenGL."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple, Union

from .matrices import Matrix, identity, transpose
from .vectors import Vec2, Vec3, Vec4

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_SHADERS: Dict[str, Tuple[str, str]] = {
    "default": ("objects/cube/cube_vshader.glsl", "objects/cube/cube_fshader.glsl"),
    "emission": ("objects/vShader.glsl", "objects/fShader.glsl"),
}

_GL_ERRORS = {
    0x0000: "GL_NO_ERROR",
    0x0501: "GL_INVALID_VALUE",
    0x0500: "GL_INVALID_ENUM",
    0x0502: "GL_INVALID_OPERATION",
    0x0503: "GL_STACK_OVERFLOW",
    0x0504: "GL_STACK_UNDERFLOW",
    0x0505: "GL_OUT_OF_MEMORY",
}


class ShaderError(Exception):
    """A shader could not be read, compiled or linked."""


def error_string(code: int) -> str:
    """Symbolic name of an OpenGL error code."""
    return _GL_ERRORS.get(code, f"unknown GL error 0x{code:04X}")


def read_shader_source(path: PathLike) -> str:
    """The full text of a shader source file."""
    try:
        with open(path, "r") as handle:
            return handle.read()
    except OSError as exc:
        raise ShaderError(f"Failed to read {os.fspath(path)}") from exc


def _uniform_value(value):
    if isinstance(value, Matrix):
        # Matrices are stored row by row; the GPU expects columns.
        return transpose(value).flat()
    if isinstance(value, (Vec2, Vec3, Vec4)):
        return tuple(value)
    if isinstance(value, bool):
        return int(value)
    return value


class ShaderProgram:
    """A linked vertex and fragment shader pair."""

    def __init__(self, program, vertex_path: str = "", fragment_path: str = "") -> None:
        self.program = program
        self.vertex_path = vertex_path
        self.fragment_path = fragment_path

    def use(self) -> None:
        """Make this program current."""
        self.program.use()

    def set_uniform(self, name: str, value) -> bool:
        """Set a uniform; returns False when the program has no such uniform."""
        if name not in self.program.uniforms:
            return False
        self.program[name] = _uniform_value(value)
        return True


def load_program(vertex_path: PathLike, fragment_path: PathLike) -> ShaderProgram:
    """Compile and link a program from two shader files and make it current."""
    vertex_source = read_shader_source(vertex_path)
    fragment_source = read_shader_source(fragment_path)

    from pyglet.graphics.shader import Shader, ShaderException
    from pyglet.graphics.shader import ShaderProgram as _LinkedProgram

    compiled = []
    for path, source, kind in (
        (vertex_path, vertex_source, "vertex"),
        (fragment_path, fragment_source, "fragment"),
    ):
        try:
            compiled.append(Shader(source, kind))
        except ShaderException as exc:
            raise ShaderError(f"{os.fspath(path)} failed to compile:\n{exc}") from None
    try:
        linked = _LinkedProgram(*compiled)
    except ShaderException as exc:
        raise ShaderError(f"Shader program failed to link\n{exc}") from None

    program = ShaderProgram(linked, os.fspath(vertex_path), os.fspath(fragment_path))
    program.use()
    return program


@dataclass(frozen=True)
class _MeshData:
    count: int
    positions: Tuple[float, ...]
    normals: Tuple[float, ...]


class GLRenderer:
    """Holds shaders and mesh data and draws calls with the current frame state.

    A draw call carries ``mesh`` (a name, or an object with a ``name``),
    ``shader`` (a name or a ShaderProgram), ``model`` (a Matrix) and
    ``color`` (a Vec4).
    """

    def __init__(self) -> None:
        self._shaders: Dict[str, ShaderProgram] = {}
        self._meshes: Dict[str, _MeshData] = {}
        self._vertex_lists: Dict[Tuple[str, int], object] = {}
        self.view: Matrix = identity()
        self.projection: Matrix = identity()
        self.light_uniforms: Mapping[str, object] = {}

    def add_shader(self, name: str, vertex_path: PathLike, fragment_path: PathLike) -> ShaderProgram:
        """Load a program and register it under ``name``."""
        program = load_program(vertex_path, fragment_path)
        self._shaders[name] = program
        return program

    def upload(self, name: str, mesh) -> int:
        """Register a mesh's ``points`` and ``normals``; returns its vertex count."""
        points = list(mesh.points)
        normals = list(mesh.normals)
        if len(points) != len(normals):
            raise ValueError(
                f"mesh {name!r} has {len(points)} points but {len(normals)} normals"
            )
        data = _MeshData(
            count=len(points),
            positions=tuple(c for p in points for c in (p.x, p.y, p.z, p.w)),
            normals=tuple(c for n in normals for c in (n.x, n.y, n.z)),
        )
        self._meshes[name] = data
        for key in [k for k in self._vertex_lists if k[0] == name]:
            del self._vertex_lists[key]
        return data.count

    def set_frame(
        self, view: Matrix, projection: Matrix, light_uniforms: Mapping[str, object]
    ) -> None:
        """Set the camera matrices and light uniforms used by later draws."""
        self.view = view
        self.projection = projection
        self.light_uniforms = dict(light_uniforms)

    def _resolve_shader(self, shader) -> ShaderProgram:
        if isinstance(shader, ShaderProgram):
            return shader
        try:
            return self._shaders[shader]
        except KeyError:
            raise KeyError(f"no shader named {shader!r}") from None

    def _vertex_list(self, mesh_name: str, program: ShaderProgram, data: _MeshData):
        key = (mesh_name, id(program.program))
        vlist: Optional[object] = self._vertex_lists.get(key)
        if vlist is None:
            from pyglet.gl import GL_TRIANGLES

            attributes = program.program.attributes
            arrays = {}
            if "vPosition" in attributes:
                arrays["vPosition"] = ("f", data.positions)
            if "vNormal" in attributes:
                arrays["vNormal"] = ("f", data.normals)
            vlist = program.program.vertex_list(data.count, GL_TRIANGLES, **arrays)
            self._vertex_lists[key] = vlist
        return vlist

    def submit(self, call) -> None:
        """Draw one call with the current frame state."""
        mesh_name = getattr(call.mesh, "name", call.mesh)
        try:
            data = self._meshes[mesh_name]
        except KeyError:
            raise KeyError(f"mesh {mesh_name!r} has not been uploaded") from None
        program = self._resolve_shader(getattr(call, "shader", "default"))

        from pyglet.gl import GL_TRIANGLES

        program.use()
        program.set_uniform("view", self.view)
        program.set_uniform("projection", self.projection)
        program.set_uniform("model", call.model)
        program.set_uniform("mainColor", call.color)
        for name, value in self.light_uniforms.items():
            program.set_uniform(name, value)
        self._vertex_list(mesh_name, program, data).draw(GL_TRIANGLES)
        program.program.stop()