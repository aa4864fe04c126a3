"""Console rendering for the maze game using rich."""

import time
from typing import Callable, Optional

from rich.console import Console
from rich.text import Text

from maze_game.core.grid import CellType, Grid, Position

CELL_STYLES = {
    CellType.WALL: "yellow",
    CellType.START: "bold bright_blue",
    CellType.EXIT: "bold bright_blue",
    CellType.PATH: "red",
    CellType.SHORTEST_PATH: "green",
}

PLAYER_CHAR = "^"
PLAYER_STYLE = "bold red"


def render_grid(grid: Grid, player: Optional[Position] = None) -> Text:
    """
    Build a colored rendering of the grid.

    Args:
        grid: Grid to draw, usually an annotated copy.
        player: If provided, drawn as a red "^" over the cell.

    Returns:
        rich Text with one line per grid row.
    """
    text = Text()
    for r, line in enumerate(grid.lines()):
        for c, char in enumerate(line):
            if player is not None and (r, c) == (player.row, player.col):
                text.append(PLAYER_CHAR, style=PLAYER_STYLE)
            else:
                text.append(char, style=CELL_STYLES.get(CellType.from_char(char)))
        text.append("\n")
    return text


class MazeDisplay:
    """Screen, prompt and pacing collaborator for the console game."""

    def __init__(
        self,
        console: Optional[Console] = None,
        delay_seconds: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        read_line: Optional[Callable[[str], str]] = None,
    ):
        self.console = console or Console(highlight=False)
        self.delay_seconds = delay_seconds
        self._sleep = sleep
        self._read_line = read_line

    def clear(self) -> None:
        self.console.clear()

    def render(self, grid: Grid, player: Optional[Position] = None) -> None:
        self.console.print(render_grid(grid, player))

    def message(self, text: str, style: Optional[str] = None) -> None:
        self.console.print(text, style=style, markup=False, highlight=False)

    def error(self, text: str) -> None:
        self.message(text, style="red")

    def pause(self) -> None:
        """Hold a transient message on screen."""
        if self.delay_seconds > 0:
            self._sleep(self.delay_seconds)

    def ask(self, prompt: str, style: str = "cyan") -> str:
        """Prompt for a line of input and return it stripped."""
        if self._read_line is not None:
            self.console.print(Text(prompt, style=style), end="")
            answer = self._read_line(prompt)
        else:
            answer = self.console.input(Text(prompt, style=style))
        return answer.strip()
