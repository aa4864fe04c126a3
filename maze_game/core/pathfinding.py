"""
Path search over a maze grid.

- shortest_path: breadth-first search with parent pointers. Always returns a
  minimum-step path; ties are broken by the fixed up/down/left/right order.
- find_one_path: depth-first search with backtracking and a shuffled
  direction order per cell, so repeated calls tend to return different paths.
"""

import logging
import random
from collections import deque
from typing import Iterator, Optional

from .grid import Direction, Grid, Path, Position

logger = logging.getLogger(__name__)


class NoPathExistsError(Exception):
    """Exception raised when the exit cannot be reached from the start."""

    pass


def _reconstruct(parents: dict[Position, Optional[Position]], goal: Position) -> Path:
    """Walk parent pointers back from goal and return the forward path."""
    positions = []
    current: Optional[Position] = goal
    while current is not None:
        positions.append(current)
        current = parents[current]
    positions.reverse()
    return Path(tuple(positions))


def shortest_path(grid: Grid) -> Path:
    """
    Find the shortest path from start to exit.

    Args:
        grid: Maze to search. Read only.

    Returns:
        Path from start to exit with the fewest steps.

    Raises:
        NoPathExistsError: If the exit is unreachable.
    """
    start, goal = grid.start, grid.exit

    # Doubles as the visited set: a cell is visited once it has a parent entry
    parents: dict[Position, Optional[Position]] = {start: None}
    queue = deque([start])
    found = False

    while queue and not found:
        current = queue.popleft()

        for neighbor in grid.neighbors(current):
            if neighbor in parents:
                continue

            parents[neighbor] = current
            if neighbor == goal:
                found = True
                break
            queue.append(neighbor)

    if not found:
        logger.info(f"No path from {start} to {goal} ({len(parents)} cells explored)")
        raise NoPathExistsError("No path exists!")

    path = _reconstruct(parents, goal)
    logger.debug(f"Shortest path found: {path.steps} steps")
    return path


def _shuffled_neighbors(grid: Grid, pos: Position, rng: random.Random) -> Iterator[Position]:
    directions = list(Direction)
    rng.shuffle(directions)
    return iter(grid.neighbors(pos, order=directions))


def find_one_path(grid: Grid, rng: random.Random) -> Optional[Path]:
    """
    Find one path from start to exit using randomized depth-first search.

    A cell is visited only while it is on the current path: it is marked
    when entered and unmarked when the search backtracks out of it, so a
    sibling branch may still pass through it later.

    Args:
        grid: Maze to search. Read only.
        rng: Random source used to shuffle the direction order at each cell.

    Returns:
        A path from start to exit, not necessarily the shortest, or None if
        the exit is unreachable.
    """
    start, goal = grid.start, grid.exit

    path = [start]
    visited = {start}
    # One pending-neighbor iterator per cell on the current path
    frames = [_shuffled_neighbors(grid, start, rng)]

    while frames:
        advanced = False
        for neighbor in frames[-1]:
            if neighbor in visited:
                continue

            path.append(neighbor)
            if neighbor == goal:
                return Path(tuple(path))

            visited.add(neighbor)
            frames.append(_shuffled_neighbors(grid, neighbor, rng))
            advanced = True
            break

        if not advanced:
            frames.pop()
            visited.discard(path.pop())

    logger.info(f"No path from {start} to {goal}")
    return None


def enumerate_paths(grid: Grid, rng: random.Random, limit: int) -> Iterator[Path]:
    """
    Yield up to limit paths, one randomized search each.

    Paths are not guaranteed to be distinct. Stops early if a search fails.
    """
    for _ in range(limit):
        path = find_one_path(grid, rng)
        if path is None:
            return
        yield path
