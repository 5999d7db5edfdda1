[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "densematrix"
version = "0.1.0"
description = "A small dense matrix of floats with arithmetic, determinant, inverse and complements"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "linear algebra", "determinant", "inverse", "gaussian elimination"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["densematrix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
