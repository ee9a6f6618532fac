[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gnengine"
version = "0.1.0"
description = "A small 2D game engine on pygame: typed events, input tracking, textures, text and scenes."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "pygame", "2d", "events", "input"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gnengine = "gnengine.application:main"

[tool.hatch.build.targets.wheel]
packages = ["gnengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
