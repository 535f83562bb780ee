from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence

from .board import Color, Shelves
from .config import GameConfig


def deal_shelves(config: GameConfig, seed: Optional[int] = None) -> Shelves:
    """Shuffles `height` books of each color and stacks them shelf by shelf."""
    rng = random.Random(seed)
    books: List[Color] = []
    for color in range(1, config.colors + 1):
        books.extend([color] * config.height)
    rng.shuffle(books)
    shelves: Shelves = []
    for i in range(config.quantity):
        # Leftover shelves come out empty once the books run out.
        shelves.append(books[i * config.height:(i + 1) * config.height])
    return shelves


def shelves_from_rows(rows: Iterable[Sequence[int]], height: int) -> Shelves:
    """Builds a board from literal rows (bottom book first), checking capacity and colors."""
    shelves: Shelves = []
    for i, row in enumerate(rows):
        shelf = list(row)
        if len(shelf) > height:
            raise ValueError(f'Shelf {i + 1} holds {len(shelf)} books, capacity is {height}')
        for book in shelf:
            if isinstance(book, bool) or not isinstance(book, int) or book < 1:
                raise ValueError(f'Shelf {i + 1} has invalid color {book!r}')
        shelves.append(shelf)
    return shelves
