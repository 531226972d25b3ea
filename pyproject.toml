[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gameoflife"
version = "0.1.0"
description = "A parallel Conway's Game of Life on a wrapping board, with PGM image input and output and an optional live window"
requires-python = ">=3.10"
keywords = ["game of life", "cellular automaton", "conway", "pgm", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gameoflife = "gameoflife.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gameoflife"]

[tool.pytest.ini_options]
addopts = "-ra"
