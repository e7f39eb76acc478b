[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "talequest"
version = "0.1.0"
description = "A small terminal text adventure driven by typed commands and free-form actions"
requires-python = ">=3.10"
dependencies = []
keywords = ["text adventure", "game", "interactive fiction", "role-playing", "terminal"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
talequest = "talequest.game:main"

[tool.hatch.build.targets.wheel]
packages = ["talequest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
