[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classicsnake"
version = "1.0.0"
description = "The classic Snake arcade game on a grid, with a menu, pause screen and saved high score"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["snake", "game", "arcade", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
classicsnake = "classicsnake.game:main"

[tool.hatch.build.targets.wheel]
packages = ["classicsnake"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
