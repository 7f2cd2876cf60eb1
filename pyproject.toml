[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "baggob"
version = "0.1.0"
description = "Game rules for a backpack-management dungeon crawler: grid vectors, combat, dungeon rooms, message feed, timed effects, mouse hover and menu transitions."
requires-python = ">=3.10"
keywords = ["game", "roguelike", "inventory", "dungeon", "combat"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["baggob"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
