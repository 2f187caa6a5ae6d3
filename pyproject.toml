[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pppgame"
version = "0.1.0"
description = "Round-based shooter game logic: weapons, pick-ups, quests, rounds, scoring and menus."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "shooter", "rounds", "quests", "simulation"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pppgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
