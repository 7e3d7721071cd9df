[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "castaway"
version = "0.1.0"
description = "A turn-based text survival game: explore an island, craft, hunt, cook and try to escape."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "survival", "text-adventure", "terminal", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
castaway = "castaway.game:main"

[tool.hatch.build.targets.wheel]
packages = ["castaway"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
