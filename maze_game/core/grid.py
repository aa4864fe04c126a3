"""
Grid model for the maze game.

A grid is a rectangular block of characters loaded from a text maze:

    # = Wall (impassable)
    S = Start position
    E = Exit (goal)
    ^ = Path marker (possible path display)
    b = Shortest path marker
    anything else = Open floor

Positions are (row, col) pairs with row 0 at the top.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class CellType(Enum):
    """Types of cells in the maze."""
    WALL = "#"
    OPEN = "."
    START = "S"
    EXIT = "E"
    PATH = "^"
    SHORTEST_PATH = "b"

    @classmethod
    def from_char(cls, char: str) -> "CellType":
        """Convert character to CellType. Unknown characters are open floor."""
        mapping = {
            "#": cls.WALL,
            "S": cls.START,
            "E": cls.EXIT,
            "^": cls.PATH,
            "b": cls.SHORTEST_PATH,
        }
        return mapping.get(char, cls.OPEN)


class Direction(Enum):
    """Movement directions, in the fixed neighbor order up, down, left, right."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (d_row, d_col) for this direction."""
        deltas = {
            Direction.UP: (-1, 0),
            Direction.DOWN: (1, 0),
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
        }
        return deltas[self]


@dataclass(frozen=True)
class Position:
    """2D position in the maze."""
    row: int
    col: int

    def move(self, direction: Direction) -> "Position":
        """Return new position after moving in direction."""
        d_row, d_col = direction.delta
        return Position(self.row + d_row, self.col + d_col)

    def is_adjacent(self, other: "Position") -> bool:
        """True if other is one orthogonal step away."""
        return abs(self.row - other.row) + abs(self.col - other.col) == 1

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"row": self.row, "col": self.col}


@dataclass(frozen=True)
class Path:
    """Ordered positions from Start to Exit, both inclusive."""
    positions: tuple[Position, ...]

    @property
    def steps(self) -> int:
        """Number of moves along the path."""
        return len(self.positions) - 1

    @property
    def start(self) -> Position:
        return self.positions[0]

    @property
    def end(self) -> Position:
        return self.positions[-1]

    def to_list(self) -> list[dict]:
        """Convert to a list of position dictionaries."""
        return [pos.to_dict() for pos in self.positions]


class Grid:
    """
    Rectangular maze grid with a single start and a single exit.

    Grids are built by the maze parser, which enforces the shape and marker
    invariants. The canonical grid of a session is never annotated; callers
    use copy() or with_path() to get a working copy for display.
    """

    def __init__(self, cells: list[list[str]], start: Position, exit: Position):
        self._cells = cells
        self._start = start
        self._exit = exit

    @property
    def rows(self) -> int:
        return len(self._cells)

    @property
    def cols(self) -> int:
        return len(self._cells[0]) if self._cells else 0

    @property
    def start(self) -> Position:
        """The fixed start position."""
        return self._start

    @property
    def exit(self) -> Position:
        """The fixed exit position."""
        return self._exit

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.rows and 0 <= pos.col < self.cols

    def get_char(self, pos: Position) -> str:
        """Get the raw character stored at position."""
        if not self.in_bounds(pos):
            raise IndexError(f"Position out of bounds: ({pos.row}, {pos.col})")
        return self._cells[pos.row][pos.col]

    def get_cell(self, pos: Position) -> CellType:
        """Get cell type at position."""
        return CellType.from_char(self.get_char(pos))

    def set_cell(self, pos: Position, cell: CellType) -> None:
        """Overwrite the cell at position. Only used on working copies."""
        if not self.in_bounds(pos):
            raise IndexError(f"Position out of bounds: ({pos.row}, {pos.col})")
        self._cells[pos.row][pos.col] = cell.value

    def is_passable(self, pos: Position) -> bool:
        """True if pos is inside the grid and not a wall."""
        if not self.in_bounds(pos):
            return False
        return self._cells[pos.row][pos.col] != CellType.WALL.value

    def neighbors(
        self,
        pos: Position,
        order: Optional[Iterable[Direction]] = None,
    ) -> list[Position]:
        """
        Get passable orthogonal neighbors of a position.

        Args:
            pos: Position to expand.
            order: Direction order to emit neighbors in. Defaults to
                up, down, left, right.

        Returns:
            Passable neighbor positions in the requested order.
        """
        directions = list(Direction) if order is None else order
        result = []
        for direction in directions:
            candidate = pos.move(direction)
            if self.is_passable(candidate):
                result.append(candidate)
        return result

    def copy(self) -> "Grid":
        """Return an independent working copy."""
        return Grid([list(row) for row in self._cells], self._start, self._exit)

    def with_path(self, path: Path, marker: CellType = CellType.PATH) -> "Grid":
        """
        Return a copy with the path drawn on it.

        Start and exit keep their own markers; every cell in between is
        overwritten with the given marker.
        """
        annotated = self.copy()
        for pos in path.positions:
            if pos in (self._start, self._exit):
                continue
            annotated.set_cell(pos, marker)
        return annotated

    def lines(self) -> list[str]:
        """Rows as strings."""
        return ["".join(row) for row in self._cells]

    def to_text(self) -> str:
        return "\n".join(self.lines())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._cells == other._cells
            and self._start == other._start
            and self._exit == other._exit
        )

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, start={self._start}, exit={self._exit})"
