[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventkit"
version = "0.1.0"
description = "Advent of Code 2022 puzzle solutions with helpers to download, read, scaffold and time them"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "aoc", "puzzles", "solutions", "scaffolding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.scripts]
adventkit-download = "adventkit.commands:download_main"
adventkit-read = "adventkit.commands:read_main"
adventkit-run-all = "adventkit.commands:run_all_main"
adventkit-scaffold = "adventkit.commands:scaffold_main"

[tool.hatch.build.targets.wheel]
packages = ["adventkit"]

[tool.pytest.ini_options]
addopts = "-ra"
