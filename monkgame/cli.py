"""Command-line entry point for the game."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

from .console import Console
from .dungeon import Dungeon
from .entities import Monk


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Create a monk, generate a dungeon and explore it."""
    parser = argparse.ArgumentParser(prog="monkgame", description="Guide a monk through a dungeon.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the dungeon's randomness")
    args = parser.parse_args(argv)

    console = Console()
    monk = Monk("Hero", "A brave monk seeking adventure!", output=console.write)
    dungeon = Dungeon(random.Random(args.seed))
    dungeon.generate()
    try:
        dungeon.explore(monk, console)
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())