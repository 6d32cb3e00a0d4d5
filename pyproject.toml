[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "navalboard"
version = "0.1.0"
description = "Battleship board placement with straight and diagonal ships and area-of-effect abilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["battleship", "board game", "grid", "naval"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
navalboard = "navalboard.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["navalboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
