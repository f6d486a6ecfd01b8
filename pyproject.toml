[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vecindex"
version = "0.1.0"
description = "Core building blocks for vector index libraries: configs, datasets, bitsets, thread pools, serialization helpers and index metadata."
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "index", "similarity-search", "ann", "knn", "bitset", "thread-pool"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vecindex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
