from __future__ import annotations

import logging
from typing import Optional

from .board import Board, BoardState
from .executor import ExecutionResult, attempt_move
from .outcome import (
    GameWon,
    HighlightSet,
    JumpApplied,
    MoveOutcome,
    Rejected,
    RejectReason,
    SelectionResult,
    SimpleMoveApplied,
)
from .pieces import Color, Coordinate, Piece
from .rules import detect_winner, jump_moves, legal_destinations, simple_moves

log = logging.getLogger(__name__)


class Game:
    """One game session: the board plus turn, selection and chain state.

    Every event runs to completion before returning, so the state seen by the
    caller always satisfies the board and turn invariants. A forced piece
    exists only mid-chain and is then also the selected piece.
    """

    def __init__(self, board: Optional[Board] = None, current_player: Color = Color.WHITE):
        self.board = board if board is not None else Board()
        self.current_player = current_player
        self.selected_piece: Optional[Piece] = None
        self.forced_piece: Optional[Piece] = None
        self.piece_counts: dict[Color, int] = self.board.counts()
        self.winner: Optional[Color] = None
        self.move_history: list[MoveOutcome] = []

    def reset(self) -> None:
        self.board = Board()
        self.current_player = Color.WHITE
        self.selected_piece = None
        self.forced_piece = None
        self.piece_counts = self.board.counts()
        self.winner = None
        self.move_history.clear()

    def initialize(self) -> BoardState:
        self.reset()
        return self.board.to_state()

    def switchTurn(self) -> None:
        self.current_player = self.current_player.opponent

    def isGameOver(self) -> bool:
        return self.winner is not None

    def getWinner(self) -> Optional[Color]:
        return self.winner

    def legalDestinations(self, piece: Piece) -> frozenset[Coordinate]:
        return legal_destinations(self.board, piece)

    def movablePieces(self) -> list[Piece]:
        if self.isGameOver():
            return []
        if self.forced_piece is not None:
            return [self.forced_piece]
        return [
            piece
            for piece in self.board.pieces(self.current_player)
            if self.legalDestinations(piece)
        ]

    def onPieceSelected(self, piece: Piece) -> SelectionResult:
        if self.isGameOver():
            return self._reject(RejectReason.GAME_OVER)
        if self.forced_piece is not None and piece is not self.forced_piece:
            return self._reject(RejectReason.FORCED_PIECE)
        if self.board.piece_at(piece.row, piece.col) is not piece:
            return self._reject(RejectReason.NO_PIECE)
        if piece.color != self.current_player:
            return self._reject(RejectReason.NOT_YOUR_TURN)

        self.selected_piece = piece
        jumps = jump_moves(self.board, piece)
        destinations = jumps if jumps else simple_moves(self.board, piece)
        return HighlightSet(piece=piece, destinations=destinations, capture_required=bool(jumps))

    def selectAt(self, row: int, col: int) -> SelectionResult:
        piece = self.board.piece_at(row, col)
        if piece is None:
            return self._reject(RejectReason.NO_PIECE)
        return self.onPieceSelected(piece)

    def onTargetChosen(self, square: Coordinate) -> MoveOutcome:
        if self.isGameOver():
            return self._reject(RejectReason.GAME_OVER)
        piece = self.selected_piece
        if piece is None:
            return self._reject(RejectReason.NO_SELECTION)

        result = attempt_move(self.board, piece, square)
        if isinstance(result, Rejected):
            log.debug("Rejected %s -> %s: %s", piece, square, result.reason.value)
            return result

        outcome = self._resolve(result)
        self.move_history.append(outcome)
        return outcome

    def _resolve(self, result: ExecutionResult) -> MoveOutcome:
        mover = result.piece.color
        if not result.is_capture:
            self._finish_turn()
            log.info("%s moved %s -> %s", mover.value, result.start, result.end)
            return SimpleMoveApplied(
                piece=result.piece,
                start=result.start,
                end=result.end,
                next_player=self.current_player,
            )

        captured = result.captured
        self.piece_counts[captured.color] -= 1
        if result.chain_continues:
            self.forced_piece = result.piece
            self.selected_piece = result.piece
        else:
            self._finish_turn()
        log.info(
            "%s jumped %s -> %s capturing %s",
            mover.value,
            result.start,
            result.end,
            result.captured_at,
        )
        winner = detect_winner(self.piece_counts)
        if winner is not None:
            self.winner = winner
            self.selected_piece = None
            self.forced_piece = None
        jump = JumpApplied(
            piece=result.piece,
            start=result.start,
            end=result.end,
            captured=captured,
            captured_at=result.captured_at,
            chain_continues=result.chain_continues,
            next_player=None if winner else self.current_player,
        )
        if winner is None:
            return jump
        log.info("Game over, %s wins", winner.value)
        return GameWon(color=winner, last_jump=jump)

    def _finish_turn(self) -> None:
        self.forced_piece = None
        self.selected_piece = None
        self.switchTurn()

    def _reject(self, reason: RejectReason) -> Rejected:
        log.debug("Rejected event: %s", reason.value)
        return Rejected(reason)
