[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cardiomech"
version = "0.1.0"
description = "Hyperelastic material laws, fibre frames, conductivity tensors and time integration for cardiac tissue"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = [
    "cardiac mechanics",
    "hyperelasticity",
    "continuum mechanics",
    "finite elements",
    "electrophysiology",
    "fibre orientation",
    "volumetric growth",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cardiomech"]

[tool.pytest.ini_options]
addopts = "-ra"
