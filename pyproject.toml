[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enginebravo"
version = "0.1.0"
description = "2D game engine core: game objects, particles, tile-map graphs and network packet bookkeeping"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "particles", "tilemap", "graph", "networking", "gameobject"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enginebravo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
