[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trainlytics"
version = "0.1.0"
description = "Command-line workout routine planner and training logger with JSON storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["fitness", "workout", "training", "log", "routine", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trainlytics = "trainlytics.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["trainlytics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
