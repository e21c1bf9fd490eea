[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minesweep"
version = "0.1.0"
description = "Minesweeper game logic with easy, medium and hard boards, and a terminal front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["minesweeper", "game", "puzzle", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minesweep = "minesweep.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minesweep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
