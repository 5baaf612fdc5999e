from __future__ import annotations

from typing import Iterator, Optional

from .errors import InvariantViolation
from .pieces import Color, Coordinate, Piece


BOARD_SIZE = 8
START_ROWS = 3

BoardStatePiece = tuple[int, int, str, int]
BoardState = tuple[int, tuple[BoardStatePiece, ...]]


def is_on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_playable(row: int, col: int) -> bool:
    """Only the dark squares, where ``row + col`` is odd, ever hold pieces."""
    return is_on_board(row, col) and (row + col) % 2 == 1


class Board:
    """8x8 grid indexed as ``board[row][col]``; the only record of occupancy."""

    def __init__(self) -> None:
        self.board: list[list[Optional[Piece]]] = [
            [None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]
        self.boardSize = BOARD_SIZE
        self._set_start_pieces()

    @classmethod
    def empty(cls) -> "Board":
        board = cls.__new__(cls)
        board.boardSize = BOARD_SIZE
        board.board = [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        return board

    def to_state(self) -> BoardState:
        pieces: list[BoardStatePiece] = []
        for piece in self.getAllPieces():
            pieces.append((piece.row, piece.col, piece.color.value, piece.id))
        return (self.boardSize, tuple(pieces))

    @classmethod
    def from_state(cls, state: BoardState) -> "Board":
        board_size, pieces = state
        if board_size != BOARD_SIZE:
            raise ValueError(f"Only {BOARD_SIZE}x{BOARD_SIZE} boards are supported.")
        board = cls.empty()
        for row, col, color_value, identifier in pieces:
            board.place(Piece(Color(color_value), row, col, identifier=identifier), row, col)
        return board

    def piece_at(self, row: int, col: int) -> Optional[Piece]:
        if is_on_board(row, col):
            return self.board[row][col]
        return None

    def is_empty(self, row: int, col: int) -> bool:
        # off-board squares are never free to land on
        return is_on_board(row, col) and self.board[row][col] is None

    def getAllPieces(self) -> list[Piece]:
        pieces: list[Piece] = []
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                if (row + col) % 2 == 1:
                    piece = self.board[row][col]
                    if piece:
                        pieces.append(piece)
        return pieces

    def pieces(self, color: Color) -> Iterator[Piece]:
        return (piece for piece in self.getAllPieces() if piece.color == color)

    def count(self, color: Color) -> int:
        return sum(1 for _ in self.pieces(color))

    def counts(self) -> dict[Color, int]:
        return {color: self.count(color) for color in (Color.WHITE, Color.BLACK)}

    def place(self, piece: Piece, row: int, col: int) -> None:
        if not is_playable(row, col):
            raise InvariantViolation(f"Square ({row}, {col}) cannot hold a piece.")
        if self.board[row][col] is not None:
            raise InvariantViolation(f"Square ({row}, {col}) is already occupied.")
        self.board[row][col] = piece
        piece.move(row, col)

    def remove(self, piece: Piece) -> None:
        if self.piece_at(piece.row, piece.col) is not piece:
            raise InvariantViolation(f"{piece!r} is not on its recorded square.")
        self.board[piece.row][piece.col] = None

    def relocate(self, piece: Piece, target: Coordinate) -> None:
        row, col = target
        if not self.is_empty(row, col):
            raise InvariantViolation(f"Cannot move {piece!r} onto ({row}, {col}).")
        self.remove(piece)
        self.place(piece, row, col)

    def _set_start_pieces(self) -> None:
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                if (row + col) % 2 == 1:
                    if row < START_ROWS:
                        self.board[row][col] = Piece(Color.BLACK, row, col)
                    elif row >= self.boardSize - START_ROWS:
                        self.board[row][col] = Piece(Color.WHITE, row, col)

    def __str__(self) -> str:
        rows = []
        for row in range(self.boardSize):
            cells = []
            for col in range(self.boardSize):
                piece = self.board[row][col]
                if piece is None:
                    cells.append("." if (row + col) % 2 == 1 else " ")
                else:
                    cells.append("w" if piece.color == Color.WHITE else "b")
            rows.append("".join(cells))
        return "\n".join(rows)
