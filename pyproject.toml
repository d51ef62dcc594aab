[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monkgame"
version = "0.1.0"
description = "A small text-based dungeon crawler: guide a monk through rooms of goblins and upgrades to the treasure."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "dungeon", "text-adventure", "terminal", "role-playing"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
monkgame = "monkgame.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["monkgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
