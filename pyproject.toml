[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starbattle"
version = "1.0.0"
description = "A two-player terminal fleet battle game with starships, gifts and bonus turns"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "battleship", "terminal", "board-game", "starships"]
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
starbattle = "starbattle.game:main"

[tool.hatch.build.targets.wheel]
packages = ["starbattle"]

[tool.pytest.ini_options]
addopts = "-ra"
