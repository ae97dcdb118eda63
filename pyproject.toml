[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polytables"
version = "0.1.0"
description = "Symbol tables of three-variable polynomials with operation counting: unordered array, chained hash table and red-black tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["polynomial", "symbol table", "hash table", "red-black tree", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["polytables"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
