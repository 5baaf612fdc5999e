from __future__ import annotations

from typing import Mapping, Optional

from .board import Board
from .pieces import Color, Coordinate, Piece


JUMP_DIRECTIONS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def simple_moves(board: Board, piece: Piece) -> frozenset[Coordinate]:
    """Forward diagonal steps onto empty squares. Men never step backwards."""
    d_row = piece.color.forward
    moves: set[Coordinate] = set()
    for d_col in (-1, 1):
        new_r, new_c = piece.row + d_row, piece.col + d_col
        if board.is_empty(new_r, new_c):
            moves.add((new_r, new_c))
    return frozenset(moves)


def jump_moves(board: Board, piece: Piece) -> frozenset[Coordinate]:
    """Landing squares of single jumps over an adjacent enemy, in any diagonal.

    Chains are not looked ahead: the caller re-asks from the landing square
    after each jump.
    """
    jumps: set[Coordinate] = set()
    for d_row, d_col in JUMP_DIRECTIONS:
        mid_r, mid_c = piece.row + d_row, piece.col + d_col
        end_r, end_c = piece.row + 2 * d_row, piece.col + 2 * d_col
        enemy = board.piece_at(mid_r, mid_c)
        if enemy is None or enemy.color == piece.color:
            continue
        if board.is_empty(end_r, end_c):
            jumps.add((end_r, end_c))
    return frozenset(jumps)


def legal_destinations(board: Board, piece: Piece) -> frozenset[Coordinate]:
    jumps = jump_moves(board, piece)
    if jumps:
        return jumps
    return simple_moves(board, piece)


def jumped_square(start: Coordinate, end: Coordinate) -> Coordinate:
    return ((start[0] + end[0]) // 2, (start[1] + end[1]) // 2)


def detect_winner(counts: Mapping[Color, int]) -> Optional[Color]:
    # a single jump removes one piece, so both sides cannot hit zero together
    for color in (Color.WHITE, Color.BLACK):
        if counts.get(color, 0) == 0:
            return color.opponent
    return None
