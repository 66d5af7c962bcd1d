[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shelfkeeper"
version = "0.4.0"
description = "A small library catalogue: validated dates, console menus, publications and books with a tab-separated record format."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "catalogue", "books", "publications", "menu", "console"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shelfkeeper = "shelfkeeper.libapp:main"

[tool.hatch.build.targets.wheel]
packages = ["shelfkeeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
