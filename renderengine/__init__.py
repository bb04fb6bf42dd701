"""A small 3D scene renderer: vectors, matrices, camera, lights, meshes and a fan-store scene."""

__version__ = "0.1.0"
__all__ = [
    "vectors",
    "matrices",
    "textfile",
    "ui",
    "camera",
    "lighting",
    "gl",
    "meshes",
    "furniture",
    "fans",
    "app",
]