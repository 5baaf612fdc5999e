from __future__ import annotations

from typing import Any, Iterable

from checkers_core.game import Game
from checkers_core.outcome import (
    GameWon,
    HighlightSet,
    JumpApplied,
    MoveOutcome,
    Rejected,
    SelectionResult,
    SimpleMoveApplied,
)
from checkers_core.pieces import Color, Coordinate, Piece


def _coord_tuple_to_dict(coord: Coordinate) -> dict[str, int]:
    row, col = coord
    return {"row": row, "col": col}


def _sorted_coords(coords: Iterable[Coordinate]) -> list[dict[str, int]]:
    return [_coord_tuple_to_dict(coord) for coord in sorted(coords)]


def serialize_piece(piece: Piece) -> dict[str, Any]:
    return {
        "id": piece.id,
        "row": piece.row,
        "col": piece.col,
        "color": piece.color.value,
    }


def serialize_selection(result: SelectionResult) -> dict[str, Any]:
    if isinstance(result, Rejected):
        return {"accepted": False, "reason": result.reason.value}
    if not isinstance(result, HighlightSet):
        raise TypeError(f"Unknown selection result {result!r}")
    return {
        "accepted": True,
        "piece": serialize_piece(result.piece),
        "destinations": _sorted_coords(result.destinations),
        "captureRequired": result.capture_required,
    }


def _serialize_jump(jump: JumpApplied) -> dict[str, Any]:
    return {
        "kind": "jump",
        "piece": serialize_piece(jump.piece),
        "from": _coord_tuple_to_dict(jump.start),
        "to": _coord_tuple_to_dict(jump.end),
        "captured": {**serialize_piece(jump.captured), **_coord_tuple_to_dict(jump.captured_at)},
        "chainContinues": jump.chain_continues,
        "nextPlayer": jump.next_player.value if jump.next_player else None,
    }


def serialize_outcome(outcome: MoveOutcome) -> dict[str, Any]:
    if isinstance(outcome, Rejected):
        return {"accepted": False, "reason": outcome.reason.value}
    if isinstance(outcome, SimpleMoveApplied):
        payload = {
            "kind": "move",
            "piece": serialize_piece(outcome.piece),
            "from": _coord_tuple_to_dict(outcome.start),
            "to": _coord_tuple_to_dict(outcome.end),
            "nextPlayer": outcome.next_player.value,
        }
    elif isinstance(outcome, JumpApplied):
        payload = _serialize_jump(outcome)
    elif isinstance(outcome, GameWon):
        payload = {
            "kind": "won",
            "winner": outcome.color.value,
            "lastJump": _serialize_jump(outcome.last_jump),
        }
    else:
        raise TypeError(f"Unknown move outcome {outcome!r}")
    return {"accepted": True, **payload}


def serialize_game(game: Game, busy: bool = False) -> dict[str, Any]:
    selected = game.selected_piece
    forced = game.forced_piece
    return {
        "boardSize": game.board.boardSize,
        "turn": game.current_player.value,
        "winner": game.winner.value if game.winner else None,
        "gameOver": game.isGameOver(),
        "pieces": [serialize_piece(piece) for piece in game.board.getAllPieces()],
        "pieceCounts": {
            "white": game.piece_counts[Color.WHITE],
            "black": game.piece_counts[Color.BLACK],
        },
        "selected": serialize_piece(selected) if selected else None,
        "forced": serialize_piece(forced) if forced else None,
        "destinations": _sorted_coords(game.legalDestinations(selected)) if selected else [],
        "movable": [_coord_tuple_to_dict(piece.position) for piece in game.movablePieces()],
        "moveCount": len(game.move_history),
        "busy": busy,
    }
