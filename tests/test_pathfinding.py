"""Tests for breadth-first and randomized depth-first path search."""

import random

import pytest

from maze_game.core.grid import CellType, Grid, Path, Position
from maze_game.core.maze_parser import parse_maze_text
from maze_game.core.pathfinding import (
    NoPathExistsError,
    enumerate_paths,
    find_one_path,
    shortest_path,
)


# Small mazes checked against an exhaustive search
SMALL_MAZES = [
    "S..\n.#.\n..E",
    "S.E",
    "SE",
    "S#E\n...",
    "S...\n.##.\n....\n##.E",
    "S.#.\n..#.\n#...\n.#.E",
    "S....\n.###.\n.#E#.\n.#.#.\n.....",
    "#S#\n#.#\n#.#\n#E#",
    "S.#..\n#.#.#\n.....\n.#.#.\n..#.E",
]

DISCONNECTED_MAZES = [
    "S#E",
    "S.#\n.#.\n#.E",
    "#######\n#S.#..#\n#..#.E#\n#######",
]


def brute_force_min_steps(grid: Grid):
    """Minimum steps over every simple path, or None if unreachable."""
    best = None

    def walk(pos, visited, steps):
        nonlocal best
        if pos == grid.exit:
            if best is None or steps < best:
                best = steps
            return
        for neighbor in grid.neighbors(pos):
            if neighbor not in visited:
                visited.add(neighbor)
                walk(neighbor, visited, steps + 1)
                visited.remove(neighbor)

    walk(grid.start, {grid.start}, 0)
    return best


def assert_valid_path(grid: Grid, path: Path):
    """Path runs start to exit through distinct, adjacent, open cells."""
    assert path.start == grid.start
    assert path.end == grid.exit
    assert len(set(path.positions)) == len(path.positions)
    for pos in path.positions:
        assert grid.is_passable(pos)
        assert grid.get_cell(pos) != CellType.WALL
    for current, following in zip(path.positions, path.positions[1:]):
        assert current.is_adjacent(following)


class TestShortestPath:
    """Tests for breadth-first search."""

    def test_three_by_three_example(self):
        """Test the 3x3 example maze and its tie-broken path."""
        grid = parse_maze_text("S..\n.#.\n..E")

        path = shortest_path(grid)

        assert path.steps == 4
        assert path.positions == (
            Position(0, 0),
            Position(1, 0),
            Position(2, 0),
            Position(2, 1),
            Position(2, 2),
        )

    @pytest.mark.parametrize("maze_text", SMALL_MAZES)
    def test_matches_brute_force_minimum(self, maze_text):
        """Test that BFS steps equal the exhaustive minimum."""
        grid = parse_maze_text(maze_text)
        assert shortest_path(grid).steps == brute_force_min_steps(grid)

    @pytest.mark.parametrize("maze_text", SMALL_MAZES)
    def test_path_is_valid(self, maze_text):
        """Test that the reconstructed path is a valid walk."""
        grid = parse_maze_text(maze_text)
        assert_valid_path(grid, shortest_path(grid))

    @pytest.mark.parametrize("maze_text", DISCONNECTED_MAZES)
    def test_no_path_raises(self, maze_text):
        """Test that unreachable exits raise NoPathExistsError."""
        grid = parse_maze_text(maze_text)
        assert brute_force_min_steps(grid) is None
        with pytest.raises(NoPathExistsError, match="No path exists"):
            shortest_path(grid)

    def test_adjacent_exit(self):
        """Test a single-step maze."""
        path = shortest_path(parse_maze_text("SE"))
        assert path.steps == 1

    def test_does_not_modify_grid(self, loops_grid):
        """Test that searching leaves the grid untouched."""
        before = loops_grid.to_text()
        shortest_path(loops_grid)
        assert loops_grid.to_text() == before

    def test_repeatable(self, loops_grid):
        """Test that repeated searches return the same path."""
        assert shortest_path(loops_grid) == shortest_path(loops_grid)

    def test_large_open_grid(self):
        """Test a maximum-size open grid."""
        rows = ["." * 105 for _ in range(105)]
        rows[0] = "S" + rows[0][1:]
        rows[-1] = rows[-1][:-1] + "E"
        grid = parse_maze_text("\n".join(rows))

        assert shortest_path(grid).steps == 208


class TestFindOnePath:
    """Tests for randomized depth-first search."""

    @pytest.mark.parametrize("maze_text", SMALL_MAZES)
    def test_path_is_valid(self, maze_text):
        """Test that DFS paths are valid walks for many seeds."""
        grid = parse_maze_text(maze_text)
        for seed in range(10):
            path = find_one_path(grid, random.Random(seed))
            assert path is not None
            assert_valid_path(grid, path)

    @pytest.mark.parametrize("maze_text", SMALL_MAZES)
    def test_never_shorter_than_bfs(self, maze_text):
        """Test that DFS paths are at least as long as the shortest."""
        grid = parse_maze_text(maze_text)
        minimum = shortest_path(grid).steps
        for seed in range(10):
            assert find_one_path(grid, random.Random(seed)).steps >= minimum

    @pytest.mark.parametrize("maze_text", DISCONNECTED_MAZES)
    def test_no_path_returns_none(self, maze_text):
        """Test that unreachable exits return None."""
        grid = parse_maze_text(maze_text)
        assert find_one_path(grid, random.Random(0)) is None

    def test_reseeded_searches_find_distinct_paths(self, loops_grid):
        """Test that different seeds produce more than one route."""
        paths = {find_one_path(loops_grid, random.Random(seed)).positions for seed in range(50)}
        assert len(paths) >= 2

    def test_same_seed_is_reproducible(self, loops_grid):
        """Test that a seeded search is deterministic."""
        first = find_one_path(loops_grid, random.Random(42))
        second = find_one_path(loops_grid, random.Random(42))
        assert first == second

    def test_dead_ends_are_dropped_from_path(self):
        """Test that cells left behind on backtracking are not in the path."""
        grid = parse_maze_text("..S..\n#.#.#\n#...#\n##.##\n##E##")
        for seed in range(30):
            path = find_one_path(grid, random.Random(seed))
            assert path is not None
            assert_valid_path(grid, path)

    def test_deep_search_does_not_hit_recursion_limit(self):
        """Test a long serpentine corridor at maximum size."""
        rows = []
        for r in range(105):
            if r % 2 == 0:
                rows.append("." * 105)
            elif r % 4 == 1:
                rows.append("#" * 104 + ".")
            else:
                rows.append("." + "#" * 104)
        rows[0] = "S" + rows[0][1:]
        # Row 103 opens on the left, so the corridor ends bottom right
        rows[-1] = rows[-1][:-1] + "E"
        grid = parse_maze_text("\n".join(rows))

        path = find_one_path(grid, random.Random(1))

        assert path is not None
        assert path.steps == shortest_path(grid).steps


class TestEnumeratePaths:
    """Tests for the path enumeration helper."""

    def test_yields_up_to_limit(self, loops_grid):
        paths = list(enumerate_paths(loops_grid, random.Random(3), 5))
        assert len(paths) == 5
        for path in paths:
            assert_valid_path(loops_grid, path)

    def test_stops_when_unreachable(self, sealed_grid):
        assert list(enumerate_paths(sealed_grid, random.Random(3), 5)) == []

    def test_zero_limit(self, loops_grid):
        assert list(enumerate_paths(loops_grid, random.Random(3), 0)) == []
