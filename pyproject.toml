[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terrascene"
version = "0.1.0"
description = "Scene math and data preparation for a small real-time terrain renderer: vectors, matrices, noise heightmaps, plane meshes, OBJ loading, camera, input and frame timing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "3d",
    "rendering",
    "terrain",
    "heightmap",
    "noise",
    "matrix",
    "vector",
    "camera",
    "obj",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["terrascene"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
