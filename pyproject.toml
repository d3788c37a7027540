[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duelarena"
version = "0.1.0"
description = "Two small turn-based duel games for two players at one terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "duel", "turn-based", "terminal", "ascii-art"]
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
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
duelarena = "duelarena.combat:main"
duelarena-elements = "duelarena.elements_game:main"

[tool.hatch.build.targets.wheel]
packages = ["duelarena"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
