[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fendcore"
version = "0.1.0"
description = "Building blocks for a unit-aware calculator: built-in unit tables, unit name resolution, an expression parser and a compact binary encoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "units", "unit conversion", "parser", "serialization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fendcore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
