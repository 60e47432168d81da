[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dyegame"
version = "0.1.0"
description = "Game logic for a simulation of dyeing and clearing targets: targets, player marker, game mode, HUD and player controller"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "targets", "signals", "game-logic"]
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
    "Topic :: Games/Entertainment :: Simulation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dyegame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
