[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treasure"
version = "0.1.0"
description = "Game logic for a tile-based treasure collecting puzzle: map loading and validation, moves, XPM image decoding"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tiles", "xpm", "map"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["treasure"]

[tool.pytest.ini_options]
addopts = "-ra"
