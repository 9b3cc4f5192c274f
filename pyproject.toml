[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shootemup"
version = "0.1.0"
description = "A small side-scrolling shoot 'em up and window/sprite demos built on pygame"
requires-python = ">=3.10"
keywords = ["game", "shooter", "shmup", "pygame", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
shootemup = "shootemup.app:main"
shootemup-window = "shootemup.demos:window_main"
shootemup-sprite = "shootemup.demos:sprite_main"

[tool.hatch.build.targets.wheel]
packages = ["shootemup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
