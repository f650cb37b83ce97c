[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamelab"
version = "0.1.0"
description = "Small game-AI playgrounds: Perlin noise, a hexagonal catch-the-cat game, maze cells and boid flocking."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "perlin-noise",
    "procedural-generation",
    "hex-grid",
    "flocking",
    "boids",
    "game-ai",
    "simulation",
]
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
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gamelab-catchthecat = "gamelab.catchthecat:main"
gamelab-flock = "gamelab.flock:main"

[tool.hatch.build.targets.wheel]
packages = ["gamelab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
