"""Checkers rules engine package."""

from .board import Board
from .errors import InvariantViolation
from .game import Game
from .outcome import (
	GameWon,
	HighlightSet,
	JumpApplied,
	MoveOutcome,
	Rejected,
	RejectReason,
	SimpleMoveApplied,
)
from .pieces import Color, Coordinate, Piece
from .rules import jump_moves, legal_destinations, simple_moves

__all__ = [
	"Board",
	"Game",
	"Coordinate",
	"Color",
	"Piece",
	"InvariantViolation",
	"HighlightSet",
	"Rejected",
	"RejectReason",
	"SimpleMoveApplied",
	"JumpApplied",
	"GameWon",
	"MoveOutcome",
	"simple_moves",
	"jump_moves",
	"legal_destinations",
]
