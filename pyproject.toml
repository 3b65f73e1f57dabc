[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "whitequeen"
version = "0.1.0"
description = "A small terminal role-playing game with a title screen state machine and a turn-based goblin fight."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "terminal", "ansi", "turn-based"]
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
whitequeen-battle = "whitequeen.combat:main"

[tool.hatch.build.targets.wheel]
packages = ["whitequeen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
