# Core module
from .grid import CellType, Direction, Grid, Path, Position
from .maze_engine import (
    MazeEngine,
    MoveResult,
    NavigationState,
    SessionClosedError,
    SessionNotFoundError,
)
from .maze_parser import (
    DuplicateMarkerError,
    EmptyMazeError,
    InconsistentRowLengthError,
    MarkerError,
    MazeLoadError,
    MazeNotFoundError,
    MazeTooLargeError,
    MazeUnreadableError,
    MissingMarkerError,
    ParsedMaze,
    parse_maze_text,
    load_maze_file,
    load_maze_stream,
    load_all_mazes,
    validate_maze_text,
)
from .pathfinding import NoPathExistsError, enumerate_paths, find_one_path, shortest_path

__all__ = [
    "CellType",
    "Direction",
    "Grid",
    "Path",
    "Position",
    "MazeEngine",
    "MoveResult",
    "NavigationState",
    "SessionClosedError",
    "SessionNotFoundError",
    "DuplicateMarkerError",
    "EmptyMazeError",
    "InconsistentRowLengthError",
    "MarkerError",
    "MazeLoadError",
    "MazeNotFoundError",
    "MazeTooLargeError",
    "MazeUnreadableError",
    "MissingMarkerError",
    "ParsedMaze",
    "parse_maze_text",
    "load_maze_file",
    "load_maze_stream",
    "load_all_mazes",
    "validate_maze_text",
    "NoPathExistsError",
    "enumerate_paths",
    "find_one_path",
    "shortest_path",
]
