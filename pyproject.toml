[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubescape"
version = "0.1.0"
description = "Text helpers for a grid-map game: character tests, C-style string and printf routines, a linked list and a line reader"
requires-python = ">=3.10"
keywords = ["strings", "printf", "linked-list", "tokenizer", "line-reader"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cubescape"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
