"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveFailure(StrEnum):
    """Reason a move token could not be applied to a board."""

    TOKEN_TOO_SHORT = "token too short"
    DESTINATION_OUT_OF_RANGE = "destination out of range"
    SOURCE_NOT_FOUND = "source not found"
    INVALID_PROMOTION = "invalid promotion piece"
