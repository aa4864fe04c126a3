"""
Maze Parser for the maze game.

Loads and validates maze text from strings, streams and files.

Maze Format:
    S = Start position (exactly one)
    E = Exit (exactly one)
    # = Wall (impassable)
    Any other character = Open floor

All rows must have the same length. Empty lines are ignored.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from .grid import CellType, Grid, Position

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROWS = 105
DEFAULT_MAX_COLS = 105


class MazeLoadError(Exception):
    """Base exception for mazes that cannot be loaded."""

    pass


class MazeNotFoundError(MazeLoadError, FileNotFoundError):
    """Exception raised when the maze source does not exist."""

    pass


class MazeUnreadableError(MazeLoadError):
    """Exception raised when the maze source exists but cannot be read."""

    pass


class EmptyMazeError(MazeLoadError):
    """Exception raised when the maze has no rows."""

    pass


class InconsistentRowLengthError(MazeLoadError):
    """Exception raised when a row differs in length from the first row."""

    pass


class MazeTooLargeError(MazeLoadError):
    """Exception raised when the maze exceeds the configured bounds."""

    pass


class MarkerError(MazeLoadError):
    """Base exception for start/exit marker problems."""

    pass


class MissingMarkerError(MarkerError):
    """Exception raised when the start or exit marker is missing."""

    pass


class DuplicateMarkerError(MarkerError):
    """Exception raised when the start or exit marker appears more than once."""

    pass


@dataclass
class ParsedMaze:
    """A named maze loaded from a file."""

    slug: str
    name: str
    grid: Grid

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "slug": self.slug,
            "name": self.name,
            "rows": self.grid.rows,
            "cols": self.grid.cols,
            "start": self.grid.start.to_dict(),
            "exit": self.grid.exit.to_dict(),
        }


def _split_rows(maze_text: str) -> list[str]:
    """Split text into rows, dropping line terminators and empty lines."""
    rows = []
    for line in maze_text.split("\n"):
        line = line.rstrip("\r")
        if not line:
            continue
        rows.append(line)
    return rows


def parse_maze_text(
    maze_text: str,
    max_rows: int = DEFAULT_MAX_ROWS,
    max_cols: int = DEFAULT_MAX_COLS,
) -> Grid:
    """
    Parse maze text into a validated grid.

    Args:
        maze_text: Multi-line string representing the maze grid.
        max_rows: Largest number of rows accepted.
        max_cols: Largest number of columns accepted.

    Returns:
        Grid with its start and exit positions located.

    Raises:
        EmptyMazeError: If the text holds no rows.
        InconsistentRowLengthError: If rows differ in length.
        MazeTooLargeError: If the maze exceeds max_rows or max_cols.
        MissingMarkerError: If there is no start or no exit.
        DuplicateMarkerError: If there is more than one start or exit.
    """
    rows = _split_rows(maze_text)

    if not rows:
        raise EmptyMazeError("Maze is empty")

    cols = len(rows[0])
    if cols > max_cols:
        raise MazeTooLargeError(
            f"Maze has {cols} columns; at most {max_cols} are allowed"
        )

    for index, line in enumerate(rows[1:], start=1):
        if len(line) != cols:
            raise InconsistentRowLengthError(
                f"All rows must have the same length: row {index} has "
                f"{len(line)} characters, expected {cols}"
            )

    if len(rows) > max_rows:
        raise MazeTooLargeError(
            f"Maze has {len(rows)} rows; at most {max_rows} are allowed"
        )

    # Find start and exit positions
    start_pos: Optional[Position] = None
    exit_pos: Optional[Position] = None

    for r, line in enumerate(rows):
        for c, char in enumerate(line):
            if char == CellType.START.value:
                if start_pos is not None:
                    raise DuplicateMarkerError(
                        f"Multiple start positions found: first at "
                        f"({start_pos.row}, {start_pos.col}), second at ({r}, {c})"
                    )
                start_pos = Position(r, c)
            elif char == CellType.EXIT.value:
                if exit_pos is not None:
                    raise DuplicateMarkerError(
                        f"Multiple exit positions found: first at "
                        f"({exit_pos.row}, {exit_pos.col}), second at ({r}, {c})"
                    )
                exit_pos = Position(r, c)

    if start_pos is None:
        raise MissingMarkerError("Maze must have a start position (S)")

    if exit_pos is None:
        raise MissingMarkerError("Maze must have an exit position (E)")

    return Grid([list(line) for line in rows], start_pos, exit_pos)


def load_maze_stream(
    stream: TextIO,
    max_rows: int = DEFAULT_MAX_ROWS,
    max_cols: int = DEFAULT_MAX_COLS,
) -> Grid:
    """
    Load a maze from an open text stream.

    Raises:
        MazeUnreadableError: If the stream cannot be read or decoded.
        MazeLoadError: If the maze is invalid (see parse_maze_text).
    """
    try:
        maze_text = stream.read()
    except (OSError, ValueError) as e:
        raise MazeUnreadableError(f"Failed to read maze stream: {e}") from e

    return parse_maze_text(maze_text, max_rows=max_rows, max_cols=max_cols)


def load_maze_file(
    file_path: Path | str,
    max_rows: int = DEFAULT_MAX_ROWS,
    max_cols: int = DEFAULT_MAX_COLS,
) -> Grid:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.
        max_rows: Largest number of rows accepted.
        max_cols: Largest number of columns accepted.

    Returns:
        Validated Grid.

    Raises:
        MazeNotFoundError: If the file doesn't exist.
        MazeUnreadableError: If the path is not a readable text file.
        MazeLoadError: If the maze is invalid (see parse_maze_text).
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise MazeNotFoundError(f"Maze file not found: {file_path}")

    if not file_path.is_file():
        raise MazeUnreadableError(f"Path is not a file: {file_path}")

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeUnreadableError(f"Failed to read maze file: {e}") from e

    grid = parse_maze_text(maze_text, max_rows=max_rows, max_cols=max_cols)
    logger.info(f"Loaded maze {file_path} ({grid.rows}x{grid.cols})")
    return grid


def load_all_mazes(
    mazes_dir: Path | str,
    max_rows: int = DEFAULT_MAX_ROWS,
    max_cols: int = DEFAULT_MAX_COLS,
) -> list[ParsedMaze]:
    """
    Load all maze files from a directory.

    Invalid maze files are logged and skipped.

    Args:
        mazes_dir: Path to the directory containing *.txt maze files.

    Returns:
        List of ParsedMaze objects sorted by filename.

    Raises:
        MazeNotFoundError: If the directory doesn't exist.
        MazeUnreadableError: If the path is not a directory.
    """
    mazes_dir = Path(mazes_dir)

    if not mazes_dir.exists():
        raise MazeNotFoundError(f"Mazes directory not found: {mazes_dir}")

    if not mazes_dir.is_dir():
        raise MazeUnreadableError(f"Path is not a directory: {mazes_dir}")

    mazes = []
    for maze_file in sorted(mazes_dir.glob("*.txt")):
        try:
            grid = load_maze_file(maze_file, max_rows=max_rows, max_cols=max_cols)
        except MazeLoadError as e:
            logger.warning(f"Failed to load {maze_file}: {e}")
            continue

        mazes.append(
            ParsedMaze(
                slug=maze_file.stem,
                name=maze_file.stem.replace("_", " ").replace("-", " ").title(),
                grid=grid,
            )
        )

    return mazes


def validate_maze_text(
    maze_text: str,
    max_rows: int = DEFAULT_MAX_ROWS,
    max_cols: int = DEFAULT_MAX_COLS,
) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text, max_rows=max_rows, max_cols=max_cols)
        return True, None
    except MazeLoadError as e:
        return False, str(e)
