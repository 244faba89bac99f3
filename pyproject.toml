[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bubblesim"
version = "0.1.0"
description = "Dimensionless N-body gravity simulation with a fourth-order Runge-Kutta integrator"
requires-python = ">=3.10"
dependencies = []
keywords = ["n-body", "gravity", "simulation", "runge-kutta", "physics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bubblesim = "bubblesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bubblesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
