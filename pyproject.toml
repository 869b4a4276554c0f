[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mpmfnum"
version = "0.1.0"
description = "Number formats with explicit rounding contexts: unbounded binary floats, exact arithmetic and posits."
requires-python = ">=3.10"
dependencies = []
keywords = ["floating-point", "rounding", "posit", "arbitrary-precision", "number-formats"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
packages = ["mpmfnum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
