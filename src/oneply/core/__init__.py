"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from oneply.core import apply_move, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    board = apply_move(pos.board, "Nf3", pos.side_to_move)
    print(board)
"""

from oneply.core.board import Board
from oneply.core.enums import Color, MoveFailure, PieceType
from oneply.core.locator import can_reach, locate_piece
from oneply.core.notation import (
    STARTING_FEN,
    MoveApplicationError,
    MoveToken,
    apply_move,
    parse_move_token,
    position_from_fen,
    position_to_fen,
)
from oneply.core.piece import Piece
from oneply.core.position import Position
from oneply.core.types import (
    Square,
    col_of,
    is_on_board,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "MoveFailure",
    "PieceType",
    # Types / helpers
    "Square",
    "col_of",
    "is_on_board",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "Piece",
    "Position",
    # Geometry
    "can_reach",
    "locate_piece",
    # Notation
    "STARTING_FEN",
    "MoveApplicationError",
    "MoveToken",
    "apply_move",
    "parse_move_token",
    "position_from_fen",
    "position_to_fen",
]
