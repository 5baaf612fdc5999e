from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .board import Board
from .errors import InvariantViolation
from .outcome import Rejected, RejectReason
from .pieces import Coordinate, Piece
from .rules import jump_moves, jumped_square, simple_moves


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    piece: Piece
    start: Coordinate
    end: Coordinate
    captured: Optional[Piece] = None
    captured_at: Optional[Coordinate] = None
    chain_continues: bool = False

    @property
    def is_capture(self) -> bool:
        return self.captured is not None


def attempt_move(board: Board, piece: Piece, target: Coordinate) -> Union[ExecutionResult, Rejected]:
    """Apply ``piece`` -> ``target`` to ``board`` if legal right now.

    Legality is derived from the current board, not from whatever was
    highlighted when the piece was selected. A piece with a jump available
    may only jump.
    """
    if board.piece_at(piece.row, piece.col) is not piece:
        raise InvariantViolation(f"{piece!r} is not on the board.")

    target = (int(target[0]), int(target[1]))
    jumps = jump_moves(board, piece)
    moves = simple_moves(board, piece)

    if jumps and target not in jumps:
        reason = RejectReason.CAPTURE_REQUIRED if target in moves else RejectReason.ILLEGAL_TARGET
        return Rejected(reason)
    if target not in jumps and target not in moves:
        return Rejected(RejectReason.ILLEGAL_TARGET)

    start = piece.position
    if target in jumps:
        mid = jumped_square(start, target)
        enemy = board.piece_at(*mid)
        if enemy is None or enemy.color == piece.color:
            raise InvariantViolation(f"Jump {start} -> {target} has no enemy at {mid}.")
        board.remove(enemy)
        board.relocate(piece, target)
        return ExecutionResult(
            piece=piece,
            start=start,
            end=target,
            captured=enemy,
            captured_at=mid,
            chain_continues=bool(jump_moves(board, piece)),
        )

    board.relocate(piece, target)
    return ExecutionResult(piece=piece, start=start, end=target)
