[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labtools"
version = "0.1.0"
description = "Random walk simulations, balanced sequences, cosine distances and matrix products"
requires-python = ">=3.10"
dependencies = []
keywords = ["fisher-yates", "prefix-sum", "random-walk", "cosine-similarity", "matrix"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labtools-scrambler = "labtools.scrambler:main"
labtools-valley = "labtools.valley:main"
labtools-balanced = "labtools.balanced:main"
labtools-cosine = "labtools.cosine:main"
labtools-matrix = "labtools.matrix:main"

[tool.hatch.build.targets.wheel]
packages = ["labtools"]

[tool.pytest.ini_options]
addopts = "-ra"
