"""
Console maze game.

Menu loop over the three maze modes:
1. Manual navigation with w/a/s/d
2. Possible paths via randomized depth-first search
3. Shortest path via breadth-first search
"""

import logging
import random

from maze_game.core.grid import CellType, Direction
from maze_game.core.maze_engine import MazeEngine
from maze_game.core.pathfinding import NoPathExistsError

from .display import MazeDisplay

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


class MazeGame:
    """Interactive console session over one loaded maze."""

    def __init__(
        self,
        engine: MazeEngine,
        display: MazeDisplay,
        rng: random.Random,
        max_paths_to_show: int = 20,
    ):
        self.engine = engine
        self.display = display
        self.rng = rng
        self.max_paths_to_show = max_paths_to_show

    def play_manual(self) -> bool:
        """
        Run manual navigation until the exit is reached or the player quits.

        Returns:
            True if the exit was reached.
        """
        state = self.engine.create_session()
        session_id = state.session_id

        try:
            while True:
                self.display.clear()
                self.display.render(self.engine.grid, player=state.position)

                if state.reached:
                    self.display.message("Congratulations! You reached the exit!\n", style="green")
                    return True

                answer = self.display.ask("Move (w a s d) or q to quit: ", style="white")
                key = answer[:1].lower()

                if key == "q":
                    self.engine.quit(session_id)
                    self.display.error("You quit the game.")
                    return False

                direction = KEY_DIRECTIONS.get(key)
                if direction is None:
                    self.display.error("Invalid movement! Use w, a, s, d or q to quit.")
                    self.display.pause()
                    continue

                result = self.engine.move(session_id, direction)
                if result.status == "blocked":
                    self.display.error(result.message)
                    self.display.pause()
        finally:
            self.engine.end_session(session_id)

    def show_some_solutions(self) -> int:
        """
        Show randomized paths one at a time, asking before each new one.

        Returns:
            Number of paths shown.
        """
        self.display.message("Searching for possible paths...\n", style="yellow")
        self.display.pause()

        count = 0
        while count < self.max_paths_to_show:
            path = self.engine.find_path(self.rng)

            if path is None:
                self.display.error("No more paths found.")
                self.display.pause()
                break

            count += 1

            self.display.clear()
            self.display.message(
                f"\n--- Possible Path #{count} (length: {path.steps} steps) ---",
                style="yellow",
            )
            self.display.render(self.engine.grid.with_path(path, CellType.PATH))

            if count >= self.max_paths_to_show:
                self.display.message("\nMaximum number of paths reached.")
                self.display.pause()
                break

            answer = self.display.ask("\nDo you want to see another path? (y/n): ")
            if answer[:1].lower() != "y":
                break

        logger.debug(f"Showed {count} possible paths")
        return count

    def show_shortest_path(self) -> bool:
        """
        Show the breadth-first shortest path.

        Returns:
            True if a path exists.
        """
        try:
            path = self.engine.shortest_path()
        except NoPathExistsError:
            self.display.error("No path exists!")
            self.display.pause()
            return False

        self.display.clear()
        self.display.message(f"Shortest path (length: {path.steps} steps):", style="yellow")
        self.display.render(self.engine.grid.with_path(path, CellType.SHORTEST_PATH))
        return True

    def show_menu(self) -> str:
        self.display.message(
            "\n=== Maze Game Menu ===\n"
            "1 - Play manually (WASD)\n"
            f"2 - Show some possible solutions (up to {self.max_paths_to_show} paths)\n"
            "3 - Show shortest path (BFS)\n"
            "4 - Exit",
            style="cyan",
        )
        return self.display.ask("Your choice: ")

    def run(self) -> int:
        """
        Main menu loop.

        Returns:
            Process exit code.
        """
        modes = {
            "1": self.play_manual,
            "2": self.show_some_solutions,
            "3": self.show_shortest_path,
        }

        while True:
            choice = self.show_menu()

            if choice == "4":
                self.display.message("Goodbye!", style="yellow")
                return 0

            mode = modes.get(choice)
            if mode is None:
                self.display.error("Invalid option!")
                continue

            mode()

            self.display.message("\n1 - Return to menu\n2 - Exit program", style="cyan")
            if self.display.ask("Your choice: ") != "1":
                self.display.message("Goodbye!", style="yellow")
                return 0
