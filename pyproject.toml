[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "territory"
version = "1.0.0"
description = "Territorial Dispute: an arcade game of planting cannons and wheels to clear an enemy block field"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "pygame", "tower defense"]
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
territory = "territory.app:main"

[tool.hatch.build.targets.wheel]
packages = ["territory"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
