from __future__ import annotations

from collections import Counter
from typing import List, Optional, Tuple

from .board import Color, Shelf, Shelves, free_space, is_complete, top_color, top_run_length
from .errors import ColorMismatch, EmptySource, InsufficientSpace


def top_batch(shelf: Shelf) -> Tuple[Optional[Color], int]:
    """Returns (color, size) of the run of books that would move off the shelf together."""
    return top_color(shelf), top_run_length(shelf)


def _check_index(shelves: Shelves, index: int, label: str) -> None:
    if not 0 <= index < len(shelves):
        raise IndexError(f'{label} shelf {index} out of range 0..{len(shelves) - 1}')


def move_books(source_shelf: int, target_shelf: int, height: int, shelves: Shelves) -> int:
    """
    Moves the run of same-colored books on top of the source shelf onto the target shelf.

    The whole run moves together, so it must fit on the target and the target's top book
    (if any) must share its color. Every check happens before the shelves are touched:
    a rejected move leaves the board exactly as it was. Returns the number of books moved.
    """
    _check_index(shelves, source_shelf, 'source')
    _check_index(shelves, target_shelf, 'target')
    source = shelves[source_shelf]
    target = shelves[target_shelf]
    if not source:
        raise EmptySource(source_shelf, target_shelf)
    color, size = top_batch(source)
    if source_shelf == target_shelf:
        # With the run lifted off, the shelf top is whatever sat below it.
        if size < len(source):
            raise ColorMismatch(source_shelf, target_shelf, color, source[-size - 1])
        return size
    if target and target[-1] != color:
        raise ColorMismatch(source_shelf, target_shelf, color, target[-1])
    free = free_space(height, target)
    if size > free:
        raise InsufficientSpace(source_shelf, target_shelf, size, free)
    batch = source[-size:]
    del source[-size:]
    target.extend(batch)
    return size


def can_move(source_shelf: int, target_shelf: int, height: int, shelves: Shelves) -> bool:
    """Same rules as move_books, without touching the board."""
    source = shelves[source_shelf]
    target = shelves[target_shelf]
    if not source:
        return False
    color, size = top_batch(source)
    if source_shelf == target_shelf:
        return size == len(source)
    if target and target[-1] != color:
        return False
    return size <= free_space(height, target)


def legal_moves(height: int, shelves: Shelves) -> List[Tuple[int, int]]:
    """Lists every (source, target) pair between distinct shelves that move_books accepts."""
    moves: List[Tuple[int, int]] = []
    for s in range(len(shelves)):
        for t in range(len(shelves)):
            if s != t and can_move(s, t, height, shelves):
                moves.append((s, t))
    return moves


def is_shelves_valid(height: int, shelves: Shelves) -> bool:
    """True when each color's book count is a multiple of the shelf height."""
    counts = Counter(book for shelf in shelves for book in shelf)
    return all(count % height == 0 for count in counts.values())


def is_game_finished(height: int, shelves: Shelves) -> bool:
    """The game is won once the board is valid and every shelf is empty or complete."""
    return is_shelves_valid(height, shelves) and all(
        len(shelf) == 0 or is_complete(height, shelf) for shelf in shelves
    )
