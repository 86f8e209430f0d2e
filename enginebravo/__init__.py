"""2D game engine core: game objects, particles, tile-map graphs and network packet bookkeeping."""

__version__ = "0.1.0"