[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent24"
version = "0.1.0"
description = "Solvers for the twenty-five puzzles of a December 2024 programming advent calendar"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "algorithms", "grid", "dynamic-programming"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
advent24 = "advent24.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["advent24"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
