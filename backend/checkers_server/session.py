from __future__ import annotations

import logging
from threading import Lock
from typing import Any

from checkers_core.board import is_on_board
from checkers_core.game import Game
from checkers_core.outcome import Rejected, RejectReason

from .schemas import SelectRequest, TargetRequest
from .serializers import serialize_game, serialize_outcome, serialize_selection

log = logging.getLogger(__name__)


class GameSession:
    """Thread-safe orchestrator around a single Game instance.

    With ``hold_input_until_settled`` the session turns ``busy`` after every
    applied move and refuses input until the front end reports that its
    animation has settled. The rules themselves never wait on this.
    """

    def __init__(self, hold_input_until_settled: bool = True) -> None:
        self.lock = Lock()
        self.hold_input_until_settled = hold_input_until_settled
        self.game = Game()
        self.busy = False

    # public API ---------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        with self.lock:
            return self._serialize_locked()

    def reset(self) -> dict[str, Any]:
        with self.lock:
            self.game.initialize()
            self.busy = False
            log.info("Game reset")
            return self._serialize_locked()

    def settle(self) -> dict[str, Any]:
        with self.lock:
            self.busy = False
            return self._serialize_locked()

    def get_destinations(self, row: int, col: int) -> dict[str, Any]:
        with self.lock:
            piece = self.game.board.piece_at(*self._require_square(row, col))
            if piece is None:
                raise ValueError(f"No piece at row {row}, col {col}.")
            return {
                "piece": {"row": row, "col": col},
                "destinations": [
                    {"row": r, "col": c} for r, c in sorted(self.game.legalDestinations(piece))
                ],
            }

    def select(self, payload: SelectRequest) -> dict[str, Any]:
        with self.lock:
            if self.busy:
                result = Rejected(RejectReason.BUSY)
            else:
                result = self.game.selectAt(*self._require_square(payload.row, payload.col))
            return {"selection": serialize_selection(result), "game": self._serialize_locked()}

    def choose_target(self, payload: TargetRequest) -> dict[str, Any]:
        with self.lock:
            if self.busy:
                outcome = Rejected(RejectReason.BUSY)
            else:
                outcome = self.game.onTargetChosen(self._require_square(payload.row, payload.col))
                if outcome.accepted and self.hold_input_until_settled:
                    self.busy = True
            return {"outcome": serialize_outcome(outcome), "game": self._serialize_locked()}

    # helpers ------------------------------------------------------------

    def _serialize_locked(self) -> dict[str, Any]:
        return serialize_game(self.game, busy=self.busy)

    @staticmethod
    def _require_square(row: int, col: int) -> tuple[int, int]:
        if not is_on_board(row, col):
            raise ValueError(f"Square row {row}, col {col} is off the board.")
        return (row, col)
