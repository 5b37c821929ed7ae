[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "penguinroom"
version = "0.1.0"
description = "Game model for a penguin chat room: players, penguin sprites, clothing, paper dolls, item catalogue, localization and HUD state."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "penguin", "chat", "sprite", "virtual-world"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Multi-User Dungeons (MUD)",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["penguinroom"]

[tool.hatch.build.targets.sdist]
include = ["penguinroom", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
