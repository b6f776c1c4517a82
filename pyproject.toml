[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spltoolkit"
version = "0.1.0"
description = "Classic collections, option parsing, random numbers, directed graphs and geometric shape models"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "collections",
    "hashmap",
    "priority-queue",
    "graph",
    "options",
    "geometry",
    "education",
]
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spltoolkit"]

[tool.pytest.ini_options]
addopts = "-ra"
