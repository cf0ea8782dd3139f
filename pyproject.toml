[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tugofwar"
version = "0.1.0"
description = "A multi-process tug-of-war simulation with a referee, player processes and a pygame display"
requires-python = ">=3.10"
keywords = ["tug-of-war", "simulation", "game", "fifo", "multiprocess", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tugofwar-referee = "tugofwar.referee:main"
tugofwar-player = "tugofwar.players:main"
tugofwar-draw = "tugofwar.draw:main"
tugofwar-pipe-demo = "tugofwar.pipe_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["tugofwar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
