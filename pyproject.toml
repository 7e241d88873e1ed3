[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "darkdungeon"
version = "0.1.0"
description = "A small turn-based dungeon crawler played in the terminal, with heroes, accessories, stress and save files."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "roguelike", "dungeon", "turn-based", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
darkdungeon = "darkdungeon.game:main"

[tool.hatch.build.targets.wheel]
packages = ["darkdungeon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
