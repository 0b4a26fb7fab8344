[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "footleague"
version = "0.1.0"
description = "An in-memory football league register of teams, players, stadiums and matches, with queries and a command shell."
requires-python = ">=3.10"
dependencies = []
keywords = ["football", "league", "teams", "matches", "players", "shell"]
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
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
footleague = "footleague.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["footleague"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
