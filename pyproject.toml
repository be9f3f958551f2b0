[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskbook"
version = "0.1.0"
description = "Classic algorithm problems on heaps, lists, sorting, trees and graphs, solved as plain Python functions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "heaps",
    "sorting",
    "binary-search-tree",
    "graphs",
    "shortest-paths",
    "minimum-spanning-tree",
    "2-sat",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["taskbook"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
