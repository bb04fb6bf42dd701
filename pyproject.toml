[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "renderengine"
version = "0.1.0"
description = "A small OpenGL scene renderer: vector and matrix maths, a camera, lights, meshes and an animated fan-store scene."
requires-python = ">=3.10"
dependencies = [
    "pyglet",
]
keywords = ["opengl", "3d", "rendering", "scene", "camera", "lighting", "mesh"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
renderengine = "renderengine.app:main"

[tool.hatch.build.targets.wheel]
packages = ["renderengine"]

[tool.pytest.ini_options]
addopts = "-ra"
