"""
Maze Engine

Core maze logic built on a loaded grid:
- Manual navigation sessions (move validation, exit detection, quitting)
- Shortest path via breadth-first search
- Possible paths via randomized depth-first search
- Text visualization of the grid, paths and player position

The engine never modifies its grid. Path displays are drawn on copies, so
one mode never leaks markers into another.
"""

import logging
import random
import uuid
from dataclasses import dataclass
from typing import Literal, Optional

from .grid import CellType, Direction, Grid, Path, Position
from .maze_parser import DEFAULT_MAX_COLS, DEFAULT_MAX_ROWS, parse_maze_text
from .pathfinding import enumerate_paths, find_one_path, shortest_path

logger = logging.getLogger(__name__)


class SessionNotFoundError(ValueError):
    """Exception raised for an unknown session id."""

    pass


class SessionClosedError(ValueError):
    """Exception raised when acting on a session that has ended."""

    pass


@dataclass
class NavigationState:
    """Current state of a manual navigation session."""
    session_id: str
    position: Position
    start_position: Position
    steps: int = 0
    status: Literal["active", "completed", "quit"] = "active"

    @property
    def reached(self) -> bool:
        return self.status == "completed"

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.session_id,
            "current_position": self.position.to_dict(),
            "steps": self.steps,
            "status": self.status,
        }


@dataclass
class MoveResult:
    """Result of a move action."""
    status: Literal["moved", "blocked", "completed"]
    position: Position
    steps: int
    message: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        result = {
            "status": self.status,
            "position": self.position.to_dict(),
            "steps": self.steps,
        }
        if self.message:
            result["message"] = self.message
        return result


class MazeEngine:
    """
    Maze engine for a single loaded grid.

    Handles navigation sessions and path searches.

    Example usage:
        engine = MazeEngine.from_text(maze_text)
        session = engine.create_session()

        # Walls leave the player in place with a "blocked" result
        result = engine.move(session.session_id, Direction.RIGHT)

        # Searches never touch the engine's grid
        path = engine.shortest_path()
        print(engine.visualize(path=path))
    """

    def __init__(self, grid: Grid):
        """
        Initialize maze engine with a validated grid.

        Args:
            grid: Grid produced by the maze parser.
        """
        self.grid = grid

        # Active sessions
        self._sessions: dict[str, NavigationState] = {}

    @classmethod
    def from_text(
        cls,
        maze_text: str,
        max_rows: int = DEFAULT_MAX_ROWS,
        max_cols: int = DEFAULT_MAX_COLS,
    ) -> "MazeEngine":
        """Build an engine from maze text. Raises MazeLoadError if invalid."""
        return cls(parse_maze_text(maze_text, max_rows=max_rows, max_cols=max_cols))

    def create_session(self, session_id: Optional[str] = None) -> NavigationState:
        """
        Create a new navigation session at the start position.

        Args:
            session_id: Optional custom session ID. If not provided, generates UUID.

        Returns:
            NavigationState for the new session.
        """
        if session_id is None:
            session_id = f"sess_{uuid.uuid4().hex[:12]}"

        state = NavigationState(
            session_id=session_id,
            position=self.grid.start,
            start_position=self.grid.start,
        )
        self._sessions[session_id] = state
        logger.debug(f"Session {session_id} created at {state.position}")
        return state

    def get_session(self, session_id: str) -> Optional[NavigationState]:
        """Get session state by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """End and remove a session."""
        if session_id in self._sessions:
            del self._sessions[session_id]
            return True
        return False

    def _active_session(self, session_id: str) -> NavigationState:
        state = self._sessions.get(session_id)
        if state is None:
            raise SessionNotFoundError(f"Session not found: {session_id}")
        if not state.is_active:
            raise SessionClosedError(f"Session already ended (status: {state.status})")
        return state

    def move(self, session_id: str, direction: Direction) -> MoveResult:
        """
        Move one cell in a direction.

        A move into a wall or off the grid is not an error: the position is
        unchanged and the result status is "blocked".

        Args:
            session_id: Active session ID.
            direction: Direction to move.

        Returns:
            MoveResult with new state.

        Raises:
            SessionNotFoundError: If the session does not exist.
            SessionClosedError: If the session has completed or quit.
        """
        state = self._active_session(session_id)

        new_pos = state.position.move(direction)

        if not self.grid.is_passable(new_pos):
            return MoveResult(
                status="blocked",
                position=state.position,
                steps=state.steps,
                message="Invalid movement! Cannot go through walls or out of bounds.",
            )

        state.position = new_pos
        state.steps += 1

        if new_pos == self.grid.exit:
            state.status = "completed"
            logger.info(f"Session {session_id} reached the exit in {state.steps} steps")
            return MoveResult(
                status="completed",
                position=state.position,
                steps=state.steps,
                message="Congratulations! You reached the exit!",
            )

        return MoveResult(
            status="moved",
            position=state.position,
            steps=state.steps,
        )

    def quit(self, session_id: str) -> NavigationState:
        """
        Quit a session without reaching the exit.

        Raises:
            SessionNotFoundError: If the session does not exist.
            SessionClosedError: If the session has already ended.
        """
        state = self._active_session(session_id)
        state.status = "quit"
        logger.info(f"Session {session_id} quit after {state.steps} steps")
        return state

    def shortest_path(self) -> Path:
        """Shortest path from start to exit. Raises NoPathExistsError."""
        return shortest_path(self.grid)

    def find_path(self, rng: random.Random) -> Optional[Path]:
        """One randomized depth-first path, or None if the exit is unreachable."""
        return find_one_path(self.grid, rng)

    def possible_paths(self, rng: random.Random, limit: int) -> list[Path]:
        """Up to limit randomized depth-first paths."""
        return list(enumerate_paths(self.grid, rng, limit))

    def visualize(
        self,
        session_id: Optional[str] = None,
        path: Optional[Path] = None,
        marker: CellType = CellType.PATH,
    ) -> str:
        """
        Generate ASCII visualization of maze.

        Args:
            session_id: If provided, shows player position as "@".
            path: If provided, draws the path with the given marker.
            marker: Marker used for path cells.

        Returns:
            ASCII string representation.
        """
        grid = self.grid.with_path(path, marker) if path is not None else self.grid

        player_pos = None
        if session_id:
            state = self._sessions.get(session_id)
            if state:
                player_pos = state.position

        lines = grid.lines()
        if player_pos is not None:
            row = lines[player_pos.row]
            lines[player_pos.row] = row[:player_pos.col] + "@" + row[player_pos.col + 1:]

        return "\n".join(lines)
