[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicealgos"
version = "0.1.0"
description = "Classic algorithm exercises in plain Python: arrays, intervals, trees, linked lists, graphs, grids, heaps, strings and dynamic programming."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "dynamic-programming", "exercises", "practice"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["practicealgos"]

[tool.pytest.ini_options]
addopts = "-ra"
