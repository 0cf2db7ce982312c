"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from oneply.core.enums import Color, PieceType
from oneply.core.piece import Piece
from oneply.core.types import Square, col_of, make_square, row_of


class Board:
    """Mutable 64-square board; every cell holds a :class:`Piece` or ``None``."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._squares)

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def at(self, row: int, col: int) -> Piece | None:
        """Piece at (row, col); row 0 is rank 8."""
        return self._squares[make_square(row, col)]

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*, in row-major order."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in enumerate(self._squares) if piece == target]

    def occupied(self) -> list[Square]:
        """All non-empty squares, in row-major order."""
        return [sq for sq, piece in enumerate(self._squares) if piece is not None]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    def mirrored(self) -> Board:
        """Vertically flipped copy with every piece's color swapped."""
        b = Board()
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                b[make_square(7 - row_of(sq), col_of(sq))] = piece.recolored()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(8):
            b[make_square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)

        back_rank = [
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.QUEEN,
            PieceType.KING,
            PieceType.BISHOP,
            PieceType.KNIGHT,
            PieceType.ROOK,
        ]
        for col, pt in enumerate(back_rank):
            b[make_square(7, col)] = Piece(Color.WHITE, pt)
            b[make_square(0, col)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for col in range(8):
                p = self.at(row, col)
                cells.append(str(p) if p else ".")
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
