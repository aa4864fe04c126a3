"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from maze_game.core.maze_parser import ParsedMaze, parse_maze_text
from maze_game.main import app
from maze_game.services.maze_registry import MazeRegistry, get_maze_registry


# 3x3 maze with a single shortest path of 4 steps
SIMPLE_MAZE = """S..
.#.
..E"""

# Two separate routes around the central wall block
LOOPS_MAZE = """#########
#S..#...#
#.#.#.#.#
#.#...#.#
#.###.#.#
#.....#.E
#########"""

# Start and exit in disconnected regions
SEALED_MAZE = """#######
#S.#..#
#..#.E#
#######"""


@pytest.fixture
def loops_grid():
    return parse_maze_text(LOOPS_MAZE)


@pytest.fixture
def sealed_grid():
    return parse_maze_text(SEALED_MAZE)


@pytest.fixture
def registry() -> MazeRegistry:
    """Registry preloaded with the sample mazes."""
    registry = MazeRegistry()
    for slug, text in [
        ("simple", SIMPLE_MAZE),
        ("loops", LOOPS_MAZE),
        ("sealed", SEALED_MAZE),
    ]:
        registry.add(ParsedMaze(slug=slug, name=slug.title(), grid=parse_maze_text(text)))
    return registry


@pytest_asyncio.fixture(scope="function")
async def client(registry) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client backed by the sample registry."""

    app.dependency_overrides[get_maze_registry] = lambda: registry

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
