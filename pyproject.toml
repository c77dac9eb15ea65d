[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paddlekit"
version = "0.1.0"
description = "A single-paddle pong game and a small actor/component game-loop framework built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "pong", "pygame", "actor", "component", "game-loop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
paddlekit-pong = "paddlekit.pong:main"

[tool.hatch.build.targets.wheel]
packages = ["paddlekit"]

[tool.pytest.ini_options]
addopts = "-ra"
