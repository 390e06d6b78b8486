"""Tile-based maze-chase arcade game engine."""

__version__ = "1.0.0"
