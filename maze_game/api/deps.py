"""API dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from maze_game.config import Settings, get_settings
from maze_game.core.maze_parser import ParsedMaze
from maze_game.services.maze_registry import (
    MazeNotRegisteredError,
    MazeRegistry,
    get_maze_registry,
)


# Type aliases for cleaner route signatures
Registry = Annotated[MazeRegistry, Depends(get_maze_registry)]
AppSettings = Annotated[Settings, Depends(get_settings)]


def get_registered_maze(slug: str, registry: Registry) -> ParsedMaze:
    """Look up a maze by slug or fail with 404."""
    try:
        return registry.get(slug)
    except MazeNotRegisteredError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Maze not found: {slug}",
        )


RegisteredMaze = Annotated[ParsedMaze, Depends(get_registered_maze)]
