[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pangsim"
version = "0.1.0"
description = "Headless game model of a ball-splitting arcade shooter: shapes, physics, collisions and draw commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "simulation", "collision", "physics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pangsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
