# Console module
from .display import MazeDisplay, render_grid
from .game import MazeGame

__all__ = [
    "MazeDisplay",
    "MazeGame",
    "render_grid",
]
