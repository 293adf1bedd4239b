[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slvsgeom"
version = "0.6.0"
description = "Geometry helpers for constraint sketches: quaternions, projections, angles and arc lengths."
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "cad", "quaternion", "projection", "angle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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
packages = ["slvsgeom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
