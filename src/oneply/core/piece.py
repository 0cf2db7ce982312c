"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from oneply.core.enums import Color, PieceType

_WHITE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

# FEN letter → (Color, PieceType); case carries the color.
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    **{letter: (Color.WHITE, pt) for pt, letter in _WHITE_LETTERS.items()},
    **{letter.lower(): (Color.BLACK, pt) for pt, letter in _WHITE_LETTERS.items()},
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored piece; board cells hold one of these or ``None``."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN letter (uppercase = white, lowercase = black)."""
        letter = _WHITE_LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN letter, e.g. 'n' → black knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @staticmethod
    def is_piece_char(char: str) -> bool:
        return char in _CHAR_MAP

    def recolored(self) -> Piece:
        """Same piece type for the other side."""
        return Piece(self.color.opposite, self.piece_type)
