from __future__ import annotations

from typing import Callable, List, Optional

from termcolor import colored

from .board import Color, Shelves

# Terminal color per color id, in ANSI palette order starting at 1 (red).
PALETTE: List[str] = [
    'red',
    'green',
    'yellow',
    'blue',
    'magenta',
    'cyan',
    'white',
    'dark_grey',
    'light_red',
    'light_green',
    'light_yellow',
    'light_blue',
    'light_magenta',
    'light_cyan',
]


def _two_digits(num: int) -> str:
    return str(num).rjust(2, '0')


def color_name(color: Color) -> str:
    return PALETTE[(color - 1) % len(PALETTE)]


def _grid(height: int, shelves: Shelves, paint: Callable[[Color, str], str]) -> str:
    lines: List[str] = []
    for level in range(height - 1, -1, -1):
        row: List[str] = []
        for shelf in shelves:
            cell = paint(shelf[level], _two_digits(shelf[level])) if level < len(shelf) else '  '
            row.append(f'| {cell} ')
        lines.append(''.join(row) + '|')
    lines.append('-' * (len(shelves) * 5 + 1))
    lines.append(''.join(f'| {_two_digits(i + 1)} ' for i in range(len(shelves))) + '|')
    return '\n'.join(lines)


def pretty_shelves(height: int, shelves: Shelves) -> str:
    """Draws the shelves side by side as stacks, top row first, with 1-based shelf numbers below."""
    return _grid(height, shelves, lambda color, text: text)


def colored_shelves(height: int, shelves: Shelves, force_color: Optional[bool] = None) -> str:
    """Same layout as pretty_shelves with each book painted in its terminal color."""
    return _grid(
        height,
        shelves,
        lambda color, text: colored(text, color_name(color), force_color=force_color),
    )
