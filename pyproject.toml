[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "overhead"
version = "0.1.0"
description = "Building blocks for an overhead scrolling shooter drawn through a small tile-and-sprite picture processor"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["game", "tiles", "sprites", "ppu", "arcade", "shooter", "png"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["overhead"]

[tool.pytest.ini_options]
addopts = "-ra"
