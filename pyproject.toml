[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algocol"
version = "1.2.0"
description = "Classic data structures with pluggable comparison and hash functions: array lists, heaps, AVL trees, hash tables and Bloom filters"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "heap",
    "binary-heap",
    "binomial-heap",
    "avl-tree",
    "hash-table",
    "bloom-filter",
    "arraylist",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algocol"]

[tool.hatch.build.targets.sdist]
include = ["algocol", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
