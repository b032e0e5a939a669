[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kinetica"
version = "0.1.0"
description = "A small mass-aggregate particle physics engine with vectors, matrices, force generators and contact resolution"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "particles", "simulation", "springs", "contacts", "vectors", "matrices"]
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
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kinetica"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
