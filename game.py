from __future__ import annotations

# Facade module that re-exports Bookshelf core functionality.
# Single-responsibility modules live under bookshelf_core/*.

import sys

from bookshelf_core.board import (
    Color,
    Shelf,
    Shelves,
    copy_shelves,
    free_space,
    is_complete,
    is_homogeneous,
    top_color,
    top_run_length,
)
from bookshelf_core.config import GameConfig
from bookshelf_core.deal import deal_shelves, shelves_from_rows
from bookshelf_core.errors import ColorMismatch, EmptySource, InsufficientSpace, MoveError
from bookshelf_core.moves import (
    can_move,
    is_game_finished,
    is_shelves_valid,
    legal_moves,
    move_books,
    top_batch,
)
from bookshelf_core.render import colored_shelves, pretty_shelves


def start_game(config: GameConfig | None = None, seed: int | None = None) -> int:
    """Deals a fresh board and plays it interactively on stdin/stdout."""
    from bookshelf_core.cli import play

    cfg = config or GameConfig.default()
    print('Starting the game...')
    shelves = deal_shelves(cfg, seed=seed)
    return play(cfg.height, shelves, render=colored_shelves)


def main() -> None:
    # CLI driver delegated to bookshelf_core.cli
    from bookshelf_core.cli import main as _main
    sys.exit(_main())


if __name__ == '__main__':
    main()
