[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polaris"
version = "0.1.0"
description = "A small pygame-based application engine with a window loop, pluggable renderers and a leveled logger."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["engine", "pygame", "game", "renderer", "logging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
polaris = "polaris.application:main"

[tool.hatch.build.targets.wheel]
packages = ["polaris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
