"""In-memory registry of loaded mazes and their navigation sessions."""

import logging
from pathlib import Path
from typing import Optional

from maze_game.config import get_settings
from maze_game.core.maze_engine import MazeEngine, NavigationState
from maze_game.core.maze_parser import ParsedMaze, load_all_mazes

logger = logging.getLogger(__name__)


class MazeNotRegisteredError(KeyError):
    """Exception raised for an unknown maze slug."""

    pass


class MazeRegistry:
    """Holds one engine per loaded maze and maps session ids back to them.

    Finished sessions (completed or quit) stay readable until they are
    removed or until more than max_finished_sessions of them pile up, at
    which point the oldest are dropped.
    """

    def __init__(self, max_finished_sessions: Optional[int] = None):
        if max_finished_sessions is None:
            max_finished_sessions = get_settings().max_finished_sessions
        self.max_finished_sessions = max_finished_sessions
        self._mazes: dict[str, ParsedMaze] = {}
        self._engines: dict[str, MazeEngine] = {}
        self._session_mazes: dict[str, str] = {}

    def add(self, maze: ParsedMaze) -> None:
        """
        Register a maze, replacing any maze with the same slug.

        Re-adding an identical grid keeps the existing engine and its
        sessions. A changed grid gets a new engine, and sessions on the
        old one are removed.
        """
        current = self._engines.get(maze.slug)
        self._mazes[maze.slug] = maze
        if current is not None and current.grid == maze.grid:
            return

        if current is not None:
            stale = [sid for sid, slug in self._session_mazes.items() if slug == maze.slug]
            for session_id in stale:
                del self._session_mazes[session_id]
            if stale:
                logger.info(f"Maze {maze.slug} changed, dropped {len(stale)} sessions")
        self._engines[maze.slug] = MazeEngine(maze.grid)

    def load_directory(
        self,
        mazes_dir: Path | str,
        max_rows: Optional[int] = None,
        max_cols: Optional[int] = None,
    ) -> int:
        """
        Load every *.txt maze in a directory.

        Returns:
            Number of mazes registered.
        """
        settings = get_settings()
        mazes = load_all_mazes(
            mazes_dir,
            max_rows=max_rows or settings.max_rows,
            max_cols=max_cols or settings.max_cols,
        )
        for maze in mazes:
            self.add(maze)
        logger.info(f"Registered {len(mazes)} mazes from {mazes_dir}")
        return len(mazes)

    def list_mazes(self) -> list[ParsedMaze]:
        return [self._mazes[slug] for slug in sorted(self._mazes)]

    def get(self, slug: str) -> ParsedMaze:
        maze = self._mazes.get(slug)
        if maze is None:
            raise MazeNotRegisteredError(slug)
        return maze

    def engine(self, slug: str) -> MazeEngine:
        engine = self._engines.get(slug)
        if engine is None:
            raise MazeNotRegisteredError(slug)
        return engine

    def create_session(self, slug: str) -> NavigationState:
        state = self.engine(slug).create_session()
        self._session_mazes[state.session_id] = slug
        self._prune_finished()
        return state

    def end_session(self, session_id: str) -> bool:
        """Remove a session from its engine and from the index."""
        slug = self._session_mazes.pop(session_id, None)
        if slug is None:
            return False
        engine = self._engines.get(slug)
        if engine is not None:
            engine.end_session(session_id)
        logger.debug(f"Session {session_id} removed")
        return True

    def session_count(self) -> int:
        return len(self._session_mazes)

    def _prune_finished(self) -> None:
        finished = []
        for session_id, slug in self._session_mazes.items():
            state = self._engines[slug].get_session(session_id)
            if state is None or not state.is_active:
                finished.append(session_id)

        # Oldest first, since the index keeps creation order
        excess = len(finished) - self.max_finished_sessions
        for session_id in finished[:max(excess, 0)]:
            self.end_session(session_id)

    def session_engine(self, session_id: str) -> Optional[MazeEngine]:
        """Engine owning a session, or None if the session is unknown."""
        slug = self._session_mazes.get(session_id)
        if slug is None:
            return None
        return self._engines.get(slug)

    def session_maze(self, session_id: str) -> Optional[str]:
        return self._session_mazes.get(session_id)

    def clear(self) -> None:
        self._mazes.clear()
        self._engines.clear()
        self._session_mazes.clear()


_maze_registry: Optional[MazeRegistry] = None


def get_maze_registry() -> MazeRegistry:
    """Get singleton maze registry."""
    global _maze_registry
    if _maze_registry is None:
        _maze_registry = MazeRegistry()
    return _maze_registry
