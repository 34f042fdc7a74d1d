[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flocon"
version = "0.1.0"
description = "Opération Flocon: a terminal tower-defence game on a snowy mountain"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tower-defence", "terminal", "emoji"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
flocon = "flocon.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["flocon"]

[tool.pytest.ini_options]
addopts = "-ra"
