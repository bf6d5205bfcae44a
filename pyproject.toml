[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lanespec"
version = "0.1.0"
description = "Lane types, lane specifications and lane editing helpers for OpenStreetMap roads"
requires-python = ">=3.10"
dependencies = []
keywords = ["openstreetmap", "osm", "lanes", "roads", "streets", "gis", "placement", "sidewalk"]
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
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lanespec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
