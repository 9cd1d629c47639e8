[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tetrix"
version = "1.0.0"
description = "A small falling-block puzzle game played in a pygame window"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "falling blocks", "pygame", "tetromino"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
tetrix = "tetrix.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tetrix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
