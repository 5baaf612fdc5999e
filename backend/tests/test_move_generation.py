from __future__ import annotations

import sys
import unittest
from pathlib import Path


BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


from checkers_core.board import Board  # noqa: E402
from checkers_core.pieces import Color, Piece  # noqa: E402
from checkers_core.rules import (  # noqa: E402
    detect_winner,
    jump_moves,
    legal_destinations,
    simple_moves,
)


def _board_with(*specs: tuple[Color, int, int]) -> tuple[Board, list[Piece]]:
    board = Board.empty()
    pieces = []
    for color, row, col in specs:
        piece = Piece(color, row, col)
        board.place(piece, row, col)
        pieces.append(piece)
    return board, pieces


class SimpleMoveTests(unittest.TestCase):
    def test_white_steps_up_black_steps_down(self) -> None:
        board, (white, black) = _board_with((Color.WHITE, 5, 2), (Color.BLACK, 2, 5))
        self.assertEqual(simple_moves(board, white), {(4, 1), (4, 3)})
        self.assertEqual(simple_moves(board, black), {(3, 4), (3, 6)})

    def test_never_moves_backwards(self) -> None:
        board, (white,) = _board_with((Color.WHITE, 3, 2))
        self.assertTrue(all(row == 2 for row, _ in simple_moves(board, white)))

    def test_edge_and_occupied_squares_are_skipped(self) -> None:
        board, (white, _) = _board_with((Color.WHITE, 5, 0), (Color.WHITE, 4, 1))
        self.assertEqual(simple_moves(board, white), frozenset())

    def test_last_row_has_no_forward_moves(self) -> None:
        board, (white,) = _board_with((Color.WHITE, 0, 1))
        self.assertEqual(simple_moves(board, white), frozenset())


class JumpMoveTests(unittest.TestCase):
    def test_forward_jump_over_adjacent_enemy(self) -> None:
        board, (white, _) = _board_with((Color.WHITE, 5, 2), (Color.BLACK, 4, 3))
        self.assertEqual(jump_moves(board, white), {(3, 4)})

    def test_backward_jump_is_allowed(self) -> None:
        board, (white, _) = _board_with((Color.WHITE, 3, 2), (Color.BLACK, 4, 3))
        self.assertEqual(jump_moves(board, white), {(5, 4)})

    def test_all_four_directions(self) -> None:
        board, (black, *_) = _board_with(
            (Color.BLACK, 4, 3),
            (Color.WHITE, 3, 2),
            (Color.WHITE, 3, 4),
            (Color.WHITE, 5, 2),
            (Color.WHITE, 5, 4),
        )
        self.assertEqual(jump_moves(board, black), {(2, 1), (2, 5), (6, 1), (6, 5)})

    def test_friendly_piece_cannot_be_jumped(self) -> None:
        board, (white, _) = _board_with((Color.WHITE, 5, 2), (Color.WHITE, 4, 3))
        self.assertEqual(jump_moves(board, white), frozenset())

    def test_occupied_or_off_board_landing_blocks_jump(self) -> None:
        board, (white, _, _) = _board_with(
            (Color.WHITE, 5, 2), (Color.BLACK, 4, 3), (Color.BLACK, 3, 4)
        )
        self.assertEqual(jump_moves(board, white), frozenset())

        board, (white, _) = _board_with((Color.WHITE, 1, 2), (Color.BLACK, 0, 1))
        self.assertEqual(jump_moves(board, white), frozenset())

    def test_only_adjacent_enemies_count(self) -> None:
        board, (white, _) = _board_with((Color.WHITE, 6, 1), (Color.BLACK, 4, 3))
        self.assertEqual(jump_moves(board, white), frozenset())


class LegalDestinationTests(unittest.TestCase):
    def test_jumps_hide_simple_moves(self) -> None:
        board, (white, _) = _board_with((Color.WHITE, 5, 2), (Color.BLACK, 4, 3))
        self.assertEqual(legal_destinations(board, white), {(3, 4)})

    def test_simple_moves_when_no_jump(self) -> None:
        board, (white,) = _board_with((Color.WHITE, 5, 2))
        self.assertEqual(legal_destinations(board, white), {(4, 1), (4, 3)})


class WinnerDetectionTests(unittest.TestCase):
    def test_no_winner_while_both_sides_have_pieces(self) -> None:
        self.assertIsNone(detect_winner({Color.WHITE: 1, Color.BLACK: 3}))

    def test_side_without_pieces_loses(self) -> None:
        self.assertEqual(detect_winner({Color.WHITE: 4, Color.BLACK: 0}), Color.WHITE)
        self.assertEqual(detect_winner({Color.WHITE: 0, Color.BLACK: 2}), Color.BLACK)


if __name__ == "__main__":
    unittest.main()
