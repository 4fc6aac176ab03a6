[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marisakit"
version = "0.4.0"
description = "Building blocks of a static MARISA-style trie: magic header, traversal history, key ranges, keys, search state and suffix tail storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["trie", "marisa", "data-structure", "search", "suffix"]
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
packages = ["marisakit"]

[tool.pytest.ini_options]
addopts = "-ra"
