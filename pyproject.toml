[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "csrgraph"
version = "0.1.0"
description = "Edge-list parsers for common graph file formats, integer numeric helpers, bit arrays and sorted-array searches"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "edge-list", "matrix-market", "snap", "dimacs", "konect", "numeric", "bitarray", "binary-search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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

[tool.setuptools.packages.find]
include = ["csrgraph*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
