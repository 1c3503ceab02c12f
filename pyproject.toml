[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grftools"
version = "0.1.0"
description = "Tools for identifying and stripping Transport Tycoon NewGRF container files"
requires-python = ">=3.10"
dependencies = []
keywords = ["grf", "newgrf", "openttd", "ttd", "transport tycoon", "sprites", "palette"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grfid = "grftools.grfid:main"
grfstrip = "grftools.grfstrip:main"

[tool.hatch.build.targets.wheel]
packages = ["grftools"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
