"""Game-AI playgrounds: Perlin noise, catch-the-cat, maze cells and flocking."""

__version__ = "0.1.0"