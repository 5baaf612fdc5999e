from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .pieces import Color, Coordinate, Piece


class RejectReason(str, Enum):
    GAME_OVER = "game_over"
    NOT_YOUR_TURN = "not_your_turn"
    FORCED_PIECE = "forced_piece"
    NO_PIECE = "no_piece"
    NO_SELECTION = "no_selection"
    CAPTURE_REQUIRED = "capture_required"
    ILLEGAL_TARGET = "illegal_target"
    BUSY = "busy"


@dataclass(frozen=True, slots=True)
class Rejected:
    reason: RejectReason

    @property
    def accepted(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class HighlightSet:
    piece: Piece
    destinations: frozenset[Coordinate]
    capture_required: bool

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class SimpleMoveApplied:
    piece: Piece
    start: Coordinate
    end: Coordinate
    next_player: Color

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class JumpApplied:
    piece: Piece
    start: Coordinate
    end: Coordinate
    captured: Piece
    captured_at: Coordinate
    chain_continues: bool
    next_player: Optional[Color]

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class GameWon:
    color: Color
    last_jump: JumpApplied

    @property
    def accepted(self) -> bool:
        return True


SelectionResult = Union[HighlightSet, Rejected]
MoveOutcome = Union[Rejected, SimpleMoveApplied, JumpApplied, GameWon]
