[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cccsolve"
version = "0.1.0"
description = "Solutions to junior and senior programming contest problems, usable as a library or from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["programming contest", "competitive programming", "puzzles", "algorithms", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cccsolve = "cccsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cccsolve"]

[tool.pytest.ini_options]
addopts = "-ra"
