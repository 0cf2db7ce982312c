"""Static evaluation: material, centre occupancy and pawn advancement."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from oneply.core.board import Board
from oneply.core.enums import Color, PieceType
from oneply.core.types import col_of, row_of

PIECE_VALUES: Final = MappingProxyType(
    {
        PieceType.PAWN: 100,
        PieceType.KNIGHT: 320,
        PieceType.BISHOP: 330,
        PieceType.ROOK: 500,
        PieceType.QUEEN: 900,
        PieceType.KING: 20_000,
    }
)

# Indexed by [row][col]; row 0 is rank 8.
CENTRE_BONUS: Final[tuple[tuple[int, ...], ...]] = (
    (0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 1, 2, 2, 1, 0, 0),
    (0, 0, 2, 3, 3, 2, 0, 0),
    (0, 0, 2, 3, 3, 2, 0, 0),
    (0, 0, 1, 2, 2, 1, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0),
)

_CENTRE_WEIGHT: Final = 5
_PAWN_STEP_BONUS: Final = 5
_MINOR_PIECES = (PieceType.KNIGHT, PieceType.BISHOP)


def evaluate(board: Board) -> int:
    """Score *board* in centipawns from white's point of view.

    Positive favours white, negative favours black. Knights and bishops
    earn a bonus for central squares and pawns earn one per row advanced.
    """
    score = 0
    for sq, piece in enumerate(board):
        if piece is None:
            continue

        row = row_of(sq)
        value = PIECE_VALUES[piece.piece_type]
        if piece.piece_type in _MINOR_PIECES:
            value += CENTRE_BONUS[row][col_of(sq)] * _CENTRE_WEIGHT
        elif piece.piece_type == PieceType.PAWN:
            advanced = 7 - row if piece.color == Color.WHITE else row
            value += advanced * _PAWN_STEP_BONUS

        score += value if piece.color == Color.WHITE else -value
    return score
