[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "battleship"
version = "0.2.2"
description = "Battleship game for the terminal with a bot and several play modes"
requires-python = ">=3.10"
dependencies = []
keywords = ["battleship", "game", "board game", "bot", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
battleship = "battleship.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["battleship"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
