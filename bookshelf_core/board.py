from __future__ import annotations

from typing import List, Optional

Color = int  # positive color id; only equality matters
Shelf = List[Color]  # bottom first, last element is the top
Shelves = List[Shelf]


def top_color(shelf: Shelf) -> Optional[Color]:
    """Returns the color on top of the shelf, or None when it is empty."""
    return shelf[-1] if shelf else None


def top_run_length(shelf: Shelf) -> int:
    """Counts the contiguous books sharing the top color."""
    if not shelf:
        return 0
    color = shelf[-1]
    count = 0
    for book in reversed(shelf):
        if book != color:
            break
        count += 1
    return count


def free_space(height: int, shelf: Shelf) -> int:
    return height - len(shelf)


def is_homogeneous(shelf: Shelf) -> bool:
    """True when every book on the shelf has the same color (empty counts)."""
    return all(book == shelf[0] for book in shelf)


def is_complete(height: int, shelf: Shelf) -> bool:
    """A complete shelf is full and holds a single color."""
    return len(shelf) == height and is_homogeneous(shelf)


def copy_shelves(shelves: Shelves) -> Shelves:
    return [list(shelf) for shelf in shelves]
