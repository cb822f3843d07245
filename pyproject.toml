[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shargpy"
version = "1.1.2rc1"
description = "Command line argument parsing with typed options, flags, positional arguments, validators and HTML help page building blocks."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "argument-parser",
    "command-line",
    "cli",
    "options",
    "validators",
    "html",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shargpy-viewers = "shargpy.viewers:main"

[tool.hatch.build.targets.wheel]
packages = ["shargpy"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
