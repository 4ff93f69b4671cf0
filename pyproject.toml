[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lrukit"
version = "0.1.0"
description = "Building blocks for least-recently-used caches: entry records, tuple hashing, insertion results, hit statistics, callbacks and last-access tracking."
requires-python = ">=3.10"
dependencies = []
keywords = ["lru", "cache", "statistics", "callbacks", "hashing"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lrukit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
