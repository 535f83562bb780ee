from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from .board import Shelves
from .config import GameConfig
from .deal import deal_shelves
from .errors import MoveError
from .moves import is_game_finished, legal_moves, move_books
from .render import colored_shelves, pretty_shelves

Move = Tuple[int, int]
Renderer = Callable[[int, Shelves], str]


class Abort(Exception):
    """Raised when the player leaves the game before finishing it."""


def parse_shelf_number(text: str, quantity: int) -> int:
    """Converts a 1-based shelf number typed by the player into a 0-based index."""
    try:
        number = int(text.strip())
    except ValueError:
        raise ValueError(f'{text.strip()!r} is not a shelf number') from None
    if not 1 <= number <= quantity:
        raise ValueError(f'Shelf must be between 1 and {quantity}, got {number}')
    return number - 1


def parse_script(text: str, quantity: int) -> List[Move]:
    """Parses scripted moves such as '1:4,2:3' (1-based) into 0-based pairs."""
    moves: List[Move] = []
    for item in text.split(','):
        item = item.strip()
        if not item:
            continue
        parts = item.split(':')
        if len(parts) != 2:
            raise ValueError(f'Could not parse move {item!r}, expected source:target')
        moves.append((parse_shelf_number(parts[0], quantity), parse_shelf_number(parts[1], quantity)))
    return moves


def _ask_shelf(label: str, quantity: int, height: int, shelves: Shelves, ask: Callable[[str], str]) -> int:
    while True:
        try:
            text = ask(f'Enter the {label} shelf (1-{quantity}): ').strip()
        except (EOFError, KeyboardInterrupt):
            raise Abort() from None
        if text.lower() in ('q', 'quit'):
            raise Abort()
        if text.lower() == 'hint':
            hints = legal_moves(height, shelves)
            if hints:
                s, t = hints[0]
                print(f'Try moving shelf {s + 1} to shelf {t + 1}.')
            continue
        try:
            return parse_shelf_number(text, quantity)
        except ValueError as exc:
            print(f'Could not parse: {exc}. Try again.')


def prompt_moves(
    height: int, shelves: Shelves, ask: Optional[Callable[[str], str]] = None
) -> Iterator[Move]:
    """Interactive move source: keeps asking the player for a source and a target shelf."""
    ask = ask or input
    quantity = len(shelves)
    while True:
        source = _ask_shelf('source', quantity, height, shelves, ask)
        target = _ask_shelf('target', quantity, height, shelves, ask)
        yield source, target


def play(
    height: int,
    shelves: Shelves,
    moves: Optional[Iterator[Move]] = None,
    render: Renderer = pretty_shelves,
) -> int:
    """Runs the game loop until the shelves are sorted. Returns a process exit status."""
    if moves is None:
        moves = prompt_moves(height, shelves)
    print(render(height, shelves))
    while not is_game_finished(height, shelves):
        if not legal_moves(height, shelves):
            print('No moves left. You are stuck.')
            return 1
        try:
            source, target = next(moves)
        except StopIteration:
            print('error: ran out of moves before the shelves were sorted.')
            return 1
        except Abort:
            print('\nGame aborted.')
            return 1
        try:
            moved = move_books(source, target, height, shelves)
        except MoveError as exc:
            print(f'Invalid move: {exc}')
            continue
        print(f'Moved {moved} book(s) from shelf {source + 1} to shelf {target + 1}.')
        print(render(height, shelves))
    print("Congratulations! You've completed the game!")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    defaults = GameConfig.default()
    parser = argparse.ArgumentParser(description='Bookshelf sorting puzzle')
    parser.add_argument('--colors', type=int, default=defaults.colors, help='Number of book colors')
    parser.add_argument('--height', type=int, default=defaults.height, help='Books per shelf')
    parser.add_argument('--quantity', type=int, default=defaults.quantity, help='Number of shelves')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for deal')
    parser.add_argument('--plain', action='store_true', help='Render without terminal colors')
    parser.add_argument('--moves', default=None, help='Scripted moves, e.g. "1:4,2:3" (1-based)')
    args = parser.parse_args(argv)

    try:
        config = GameConfig(colors=args.colors, height=args.height, quantity=args.quantity)
    except ValueError as exc:
        parser.error(str(exc))

    scripted: Optional[Iterator[Move]] = None
    if args.moves is not None:
        try:
            scripted = iter(parse_script(args.moves, config.quantity))
        except ValueError as exc:
            parser.error(str(exc))

    print('Starting the game...')
    shelves = deal_shelves(config, seed=args.seed)
    render: Renderer = pretty_shelves if args.plain else colored_shelves
    return play(config.height, shelves, moves=scripted, render=render)


if __name__ == '__main__':
    sys.exit(main())
