[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seirgrid"
version = "0.1.0"
description = "A cellular-automaton SEIR epidemic simulation on a grid, with box-counting dimension estimates and CSV statistics"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["seir", "epidemic", "cellular-automaton", "simulation", "fractal-dimension"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
seirgrid = "seirgrid.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["seirgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
