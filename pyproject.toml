[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qsmino"
version = "0.1.0"
description = "Rules for a falling-block puzzle game: grade tables, practice piece sequences and palette layering"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "game", "pentomino", "tetromino", "grades", "piece-sequence"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qsmino"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
