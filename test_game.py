import contextlib
import io
import unittest

from game import (
    ColorMismatch,
    EmptySource,
    GameConfig,
    InsufficientSpace,
    deal_shelves,
    is_game_finished,
    is_shelves_valid,
    move_books,
    pretty_shelves,
    shelves_from_rows,
    start_game,
)


class TestBookshelfBasics(unittest.TestCase):
    def test_moves_a_run_of_books(self):
        shelves = shelves_from_rows([[1, 1, 1], [2, 3, 2], [3, 3, 2], []], 3)
        move_books(0, 3, 3, shelves)
        self.assertEqual(shelves, [[], [2, 3, 2], [3, 3, 2], [1, 1, 1]])
        self.assertTrue(is_shelves_valid(3, shelves))
        self.assertFalse(is_game_finished(3, shelves))

    def test_shelves_are_valid(self):
        self.assertTrue(is_shelves_valid(3, [[1, 1, 1], [2, 3, 2], [3, 3, 2]]))

    def test_shelves_are_invalid(self):
        self.assertFalse(is_shelves_valid(3, [[1, 2, 3], []]))

    def test_sorted_shelves_finish_the_game(self):
        self.assertTrue(is_game_finished(3, [[1, 1, 1], [2, 2, 2], [3, 3, 3], []]))

    def test_rejected_moves_leave_board_alone(self):
        cases = [
            ([[], [1]], 2, EmptySource),
            ([[1, 2], [1]], 3, ColorMismatch),
            ([[2, 1, 1], [1, 1]], 3, InsufficientSpace),
        ]
        for rows, height, exc_type in cases:
            shelves = shelves_from_rows(rows, height)
            with self.assertRaises(exc_type):
                move_books(0, 1, height, shelves)
            self.assertEqual(shelves, rows)

    def test_dealt_board_is_valid(self):
        cfg = GameConfig.default()
        shelves = deal_shelves(cfg, seed=2024)
        self.assertTrue(is_shelves_valid(cfg.height, shelves))
        self.assertEqual(sum(len(s) for s in shelves), cfg.total_books)
        self.assertEqual(len(pretty_shelves(cfg.height, shelves).split('\n')), cfg.height + 2)

    def test_start_game_on_sorted_deal(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            status = start_game(GameConfig(colors=1, height=1, quantity=1), seed=0)
        self.assertEqual(status, 0)
        self.assertIn('Congratulations', out.getvalue())


if __name__ == '__main__':
    unittest.main(verbosity=2)
