[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "borinrpg"
version = "0.1.0"
description = "A small terminal role-playing game: fight beasts and trolls, level up, buy weapons and potions."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "game", "terminal", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
borinrpg = "borinrpg.game:main"

[tool.setuptools.packages.find]
include = ["borinrpg*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
