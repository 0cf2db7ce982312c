"""Notation package: FEN decoding and SAN move application."""

from oneply.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from oneply.core.notation.san import (
    MAX_TOKEN_LENGTH,
    CastleSide,
    MoveApplicationError,
    MoveToken,
    apply_move,
    parse_move_token,
)

__all__ = [
    "MAX_TOKEN_LENGTH",
    "STARTING_FEN",
    "CastleSide",
    "MoveApplicationError",
    "MoveToken",
    "apply_move",
    "parse_move_token",
    "position_from_fen",
    "position_to_fen",
]
