[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wherestarget"
version = "0.1.0"
description = "Where's Target? - a small arcade shooting game: track the wandering target and click to hit it."
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooting", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wherestarget = "wherestarget.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wherestarget"]

[tool.pytest.ini_options]
addopts = "-ra"
