[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "openlima"
version = "0.1.0"
description = "Building blocks for a small game engine: colours, vectors, key mapping, resources, Wavefront meshes, scene graphs, lights and cameras"
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "scene graph", "wavefront obj", "vector", "color", "resources", "keyboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
    "Operating System :: OS Independent",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["openlima"]

[tool.pytest.ini_options]
addopts = "-ra"
