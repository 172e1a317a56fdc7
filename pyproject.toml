[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zombiearena"
version = "0.1.0"
description = "A top-down wave survival shooter: fend off bloaters, chasers and crawlers in a growing arena."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "shooter", "arcade", "zombies", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zombiearena = "zombiearena.app:main"

[tool.hatch.build.targets.wheel]
packages = ["zombiearena"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
