[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exodus"
version = "0.1.0"
description = "Turn-based deck-building game rules: cards, status effects, enemy attack patterns, combat turns, rewards, world-map nodes and run saves."
requires-python = ">=3.10"
dependencies = []
keywords = ["deck-building", "card game", "roguelike", "turn-based", "game logic"]
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
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["exodus"]

[tool.pytest.ini_options]
addopts = "-ra"
