[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aockit"
version = "0.1.0"
description = "Puzzle solvers for cave routes, binary diagnostics, octopus flashes, paper folding and snailfish arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "graphs", "routes", "snailfish", "paper-folding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aockit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
