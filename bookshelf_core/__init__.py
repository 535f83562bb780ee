"""
Bookshelf core Python package.

This package contains the puzzle engine and its collaborators, kept as
small pure-logic modules so each piece can be tested on its own.
Modules:
- board.py: Color, Shelf, Shelves and shelf predicates
- config.py: GameConfig
- errors.py: MoveError, EmptySource, ColorMismatch, InsufficientSpace
- moves.py: move_books, is_shelves_valid, is_game_finished, legal_moves
- deal.py: deal_shelves, shelves_from_rows
- render.py: pretty_shelves, colored_shelves
- cli.py: interactive and scripted game loop
"""
