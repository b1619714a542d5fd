[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doggie_daycare"
version = "1.0.0"
description = "A collection of dog-themed terminal mini-games behind a single menu."
requires-python = ">=3.10"
keywords = ["game", "terminal", "tic-tac-toe", "word-search", "memory", "dogs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
doggie-daycare = "doggie_daycare.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["doggie_daycare"]

[tool.pytest.ini_options]
addopts = "-ra"
