"""Maze game: text maze loading, navigation, and path search."""

__version__ = "1.0.0"
