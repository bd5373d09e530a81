[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonrpg"
version = "0.1.0"
description = "A small turn-based dungeon role-playing game for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "dungeon", "game", "terminal", "turn-based"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
dungeonrpg = "dungeonrpg.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeonrpg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
