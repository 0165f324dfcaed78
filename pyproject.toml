[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "territorywar"
version = "0.1.0"
description = "A small console game of territories, armies, dice battles and secret missions"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "strategy", "territories", "dice", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
territorywar = "territorywar.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["territorywar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
