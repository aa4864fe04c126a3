"""Maze routes for listing mazes and searching paths."""

import logging
import random
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from maze_game.api.deps import AppSettings, RegisteredMaze, Registry
from maze_game.core.grid import CellType, Grid, Path
from maze_game.core.maze_parser import validate_maze_text
from maze_game.core.pathfinding import NoPathExistsError, enumerate_paths, shortest_path
from maze_game.schemas.maze import (
    MazeDetail,
    MazeListItem,
    MazeListResponse,
    MazeValidateRequest,
    MazeValidateResponse,
    PathListResponse,
    PathResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/maze", tags=["Mazes"])


def _path_response(grid: Grid, path: Path, marker: CellType) -> PathResponse:
    return PathResponse(
        steps=path.steps,
        positions=path.to_list(),
        grid_data=grid.with_path(path, marker).to_text(),
    )


@router.get(
    "",
    response_model=MazeListResponse,
)
async def list_mazes(registry: Registry) -> MazeListResponse:
    """List all loaded mazes.

    Grid data is not included - use GET /v1/maze/{slug} for full details.
    """
    maze_items = [
        MazeListItem.model_validate(maze.to_dict())
        for maze in registry.list_mazes()
    ]

    return MazeListResponse(
        mazes=maze_items,
        total=len(maze_items),
    )


@router.post(
    "/validate",
    response_model=MazeValidateResponse,
)
async def validate_maze(
    request: MazeValidateRequest,
    settings: AppSettings,
) -> MazeValidateResponse:
    """Check maze text without registering it."""
    is_valid, error = validate_maze_text(
        request.grid_data,
        max_rows=settings.max_rows,
        max_cols=settings.max_cols,
    )
    return MazeValidateResponse(valid=is_valid, error=error)


@router.get(
    "/{slug}",
    response_model=MazeDetail,
)
async def get_maze(maze: RegisteredMaze) -> MazeDetail:
    """Get detailed information about a specific maze, including grid data."""
    return MazeDetail(**maze.to_dict(), grid_data=maze.grid.to_text())


@router.get(
    "/{slug}/shortest-path",
    response_model=PathResponse,
)
async def get_shortest_path(maze: RegisteredMaze) -> PathResponse:
    """Shortest path from start to exit (breadth-first search).

    Path cells are marked "b" in the returned grid.
    """
    try:
        path = shortest_path(maze.grid)
    except NoPathExistsError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No path exists",
        )

    logger.info(f"Shortest path for {maze.slug}: {path.steps} steps")
    return _path_response(maze.grid, path, CellType.SHORTEST_PATH)


@router.get(
    "/{slug}/paths",
    response_model=PathListResponse,
)
async def get_possible_paths(
    maze: RegisteredMaze,
    settings: AppSettings,
    count: Optional[int] = Query(None, ge=1, description="Number of paths to search for"),
    seed: Optional[int] = Query(None, description="Seed for a reproducible result"),
) -> PathListResponse:
    """Possible paths from start to exit (randomized depth-first search).

    Paths are not necessarily shortest and may repeat. Path cells are
    marked "^" in each returned grid.
    """
    limit = min(count or settings.max_paths_to_show, settings.max_paths_to_show)
    rng = random.Random(seed if seed is not None else settings.random_seed)

    paths = list(enumerate_paths(maze.grid, rng, limit))
    if not paths:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No path exists",
        )

    return PathListResponse(
        paths=[_path_response(maze.grid, path, CellType.PATH) for path in paths],
        total=len(paths),
        distinct=len({path.positions for path in paths}),
    )
