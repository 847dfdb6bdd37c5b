[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qzdl"
version = "3.3.0.0"
description = "Launcher configuration for Doom source ports: IWADs, PWADs, multiplayer settings and command lines"
requires-python = ">=3.10"
dependencies = []
keywords = ["doom", "launcher", "wad", "source-port", "zdl"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qzdl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
