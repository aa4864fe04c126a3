"""Console entry point: python -m maze_game [maze_file]."""

import argparse
import logging
import random
import sys
from typing import Optional

from rich.console import Console

from maze_game.config import get_settings
from maze_game.console import MazeDisplay, MazeGame
from maze_game.core.maze_engine import MazeEngine
from maze_game.core.maze_parser import MazeLoadError, load_maze_file

logger = logging.getLogger("maze_game")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maze-game",
        description="Play a text maze, list possible paths, or show the shortest path.",
    )
    parser.add_argument(
        "maze_file",
        nargs="?",
        help="Maze text file (default: MAZE_MAZE_FILE or maze.txt)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the possible-paths search",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    settings = get_settings()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = Console(highlight=False)
    maze_file = args.maze_file or settings.maze_file

    try:
        grid = load_maze_file(maze_file, max_rows=settings.max_rows, max_cols=settings.max_cols)
    except MazeLoadError as e:
        logger.error(f"Could not load {maze_file}: {e}")
        console.print(f"Error: {e}", style="red", markup=False)
        console.print("Program terminated.", style="red")
        return 1

    seed = args.seed if args.seed is not None else settings.random_seed
    game = MazeGame(
        engine=MazeEngine(grid),
        display=MazeDisplay(console=console, delay_seconds=settings.message_delay_seconds),
        rng=random.Random(seed),
        max_paths_to_show=settings.max_paths_to_show,
    )

    try:
        return game.run()
    except (KeyboardInterrupt, EOFError):
        console.print("\nGoodbye!", style="yellow")
        return 0


if __name__ == "__main__":
    sys.exit(main())
