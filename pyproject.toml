[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "caesar"
version = "0.1.0"
description = "Numerical helpers for physical simulation: interpolation, root finding, linear algebra, physical properties of water, ice and air, and small utilities."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "numerics",
    "interpolation",
    "root-finding",
    "linear-algebra",
    "physics",
    "thermodynamics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["caesar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
