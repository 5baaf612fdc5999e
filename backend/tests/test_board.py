from __future__ import annotations

import sys
import unittest
from pathlib import Path


BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


from checkers_core.board import Board, is_playable  # noqa: E402
from checkers_core.errors import InvariantViolation  # noqa: E402
from checkers_core.game import Game  # noqa: E402
from checkers_core.pieces import Color, Piece  # noqa: E402


class StartingLayoutTests(unittest.TestCase):
    def test_twelve_pieces_per_side_on_dark_squares(self) -> None:
        board = Board()
        white = list(board.pieces(Color.WHITE))
        black = list(board.pieces(Color.BLACK))

        self.assertEqual(len(white), 12)
        self.assertEqual(len(black), 12)
        self.assertTrue(all(piece.row in (5, 6, 7) for piece in white), str(board))
        self.assertTrue(all(piece.row in (0, 1, 2) for piece in black), str(board))
        self.assertTrue(all(is_playable(*piece.position) for piece in white + black))

    def test_new_game_starts_with_white(self) -> None:
        game = Game()
        self.assertEqual(game.current_player, Color.WHITE)
        self.assertEqual(game.piece_counts, {Color.WHITE: 12, Color.BLACK: 12})
        self.assertFalse(game.isGameOver())
        self.assertIsNone(game.getWinner())

    def test_initialize_returns_fresh_layout(self) -> None:
        game = Game()
        game.selectAt(5, 2)
        game.onTargetChosen((4, 1))

        size, pieces = game.initialize()
        self.assertEqual(size, 8)
        self.assertEqual(len(pieces), 24)
        self.assertEqual(game.current_player, Color.WHITE)
        self.assertIsNotNone(game.board.piece_at(5, 2))
        self.assertEqual(game.move_history, [])


class BoardAccessTests(unittest.TestCase):
    def test_off_board_lookup_returns_none(self) -> None:
        board = Board()
        self.assertIsNone(board.piece_at(-1, 0))
        self.assertIsNone(board.piece_at(8, 3))
        self.assertFalse(board.is_empty(0, 8))

    def test_is_empty_reflects_occupancy(self) -> None:
        board = Board()
        self.assertFalse(board.is_empty(5, 0))
        self.assertTrue(board.is_empty(4, 1))

    def test_place_onto_occupied_square_is_an_invariant_violation(self) -> None:
        board = Board()
        with self.assertRaises(InvariantViolation):
            board.place(Piece(Color.WHITE, 5, 0), 5, 0)

    def test_place_onto_light_square_is_an_invariant_violation(self) -> None:
        board = Board.empty()
        with self.assertRaises(InvariantViolation):
            board.place(Piece(Color.WHITE, 4, 4), 4, 4)

    def test_remove_piece_not_on_board_is_an_invariant_violation(self) -> None:
        board = Board.empty()
        with self.assertRaises(InvariantViolation):
            board.remove(Piece(Color.BLACK, 3, 2))

    def test_relocate_updates_grid_and_piece(self) -> None:
        board = Board.empty()
        piece = Piece(Color.WHITE, 5, 2)
        board.place(piece, 5, 2)

        board.relocate(piece, (4, 3))

        self.assertIsNone(board.piece_at(5, 2))
        self.assertIs(board.piece_at(4, 3), piece)
        self.assertEqual(piece.position, (4, 3))

    def test_state_snapshot_rebuilds_same_layout(self) -> None:
        board = Board()
        rebuilt = Board.from_state(board.to_state())
        self.assertEqual(rebuilt.to_state(), board.to_state())
        self.assertEqual(rebuilt.counts(), {Color.WHITE: 12, Color.BLACK: 12})


if __name__ == "__main__":
    unittest.main()
