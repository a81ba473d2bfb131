[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "h5types"
version = "0.7.0"
description = "Pure-Python descriptions of HDF5 datatypes, strings, variable-length arrays and library enumerations."
requires-python = ">=3.10"
dependencies = []
keywords = ["hdf5", "datatypes", "compound", "strings", "scientific"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["h5types"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
