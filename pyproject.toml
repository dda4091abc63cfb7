[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dominion"
version = "0.1.0"
description = "A deterministic engine for the Dominion deck-building card game, with a seeded multi-stream Lehmer random generator, a scripted two-player game and an interactive console."
requires-python = ">=3.10"
dependencies = []
keywords = ["dominion", "card game", "deck-building", "board game", "simulation", "lehmer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dominion-playdom = "dominion.playdom:main"
dominion-player = "dominion.player:main"

[tool.hatch.build.targets.wheel]
packages = ["dominion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
