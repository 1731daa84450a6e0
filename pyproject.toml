[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "outbreak"
version = "0.1.0"
description = "Game rules for a cooperative zombie shooter: state machines, match flow, safe zones, HUD text and weapons."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "shooter", "zombie", "state-machine", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["outbreak"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
