"""SAN (Standard Algebraic Notation) token parsing and application.

Tokens are applied by board geometry alone: the caller is trusted to pass
legal moves, so castling rights, checks and pins are never verified.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from oneply.core.board import Board
from oneply.core.enums import Color, MoveFailure, PieceType
from oneply.core.locator import locate_piece
from oneply.core.piece import Piece
from oneply.core.types import Square, col_of, is_on_board, make_square, row_of

# Longest token we parse; extra characters are dropped.
MAX_TOKEN_LENGTH = 15

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_SAN_PIECE_REV: dict[str, PieceType] = {v: k for k, v in _SAN_PIECE.items()}


class CastleSide(StrEnum):
    KINGSIDE = "O-O"
    QUEENSIDE = "O-O-O"


_CASTLE_TOKENS: dict[str, CastleSide] = {
    f"{side.value}{suffix}": side
    for side in CastleSide
    for suffix in ("", "+", "#")
}

# (king from, rook from, king to, rook to) columns.
_CASTLE_COLUMNS: dict[CastleSide, tuple[int, int, int, int]] = {
    CastleSide.KINGSIDE: (4, 7, 6, 5),
    CastleSide.QUEENSIDE: (4, 0, 2, 3),
}


class MoveApplicationError(ValueError):
    """A move token could not be parsed or matched against the board."""

    def __init__(self, token: str, reason: MoveFailure) -> None:
        super().__init__(f"Cannot apply move {token!r}: {reason}")
        self.token = token
        self.reason = reason


@dataclass(frozen=True, slots=True)
class MoveToken:
    """Decomposed SAN token.

    A castling token only sets ``castle``; every other token has a
    ``destination``.
    """

    castle: CastleSide | None = None
    piece_type: PieceType = PieceType.PAWN
    destination: Square | None = None
    row_hint: int | None = None
    col_hint: int | None = None
    capture: bool = False
    promotion: PieceType | None = None


def parse_move_token(token: str, max_length: int = MAX_TOKEN_LENGTH) -> MoveToken:
    """Split *token* into its SAN parts.

    Raises :class:`MoveApplicationError` when no destination square can be
    read or the promotion letter is not a piece.
    """
    castle = _CASTLE_TOKENS.get(token)
    if castle is not None:
        return MoveToken(castle=castle)

    text = token[:max_length].rstrip("+#")

    promotion: PieceType | None = None
    if len(text) >= 4 and text[-2] == "=":
        letter = text[-1].upper()
        if not Piece.is_piece_char(letter):
            raise MoveApplicationError(token, MoveFailure.INVALID_PROMOTION)
        promotion = Piece.from_char(letter).piece_type
        text = text[:-2]

    if text and text[0] in _SAN_PIECE_REV:
        piece_type = _SAN_PIECE_REV[text[0]]
        text = text[1:]
    else:
        piece_type = PieceType.PAWN

    if len(text) < 2:
        raise MoveApplicationError(token, MoveFailure.TOKEN_TOO_SHORT)

    dest_col = ord(text[-2]) - ord("a")
    dest_row = ord("8") - ord(text[-1])
    if not is_on_board(dest_row, dest_col):
        raise MoveApplicationError(token, MoveFailure.DESTINATION_OUT_OF_RANGE)

    row_hint: int | None = None
    col_hint: int | None = None
    capture = False
    for ch in text[:-2]:
        if ch == "x":
            capture = True
        elif "a" <= ch <= "h":
            col_hint = ord(ch) - ord("a")
        elif "1" <= ch <= "8":
            row_hint = ord("8") - ord(ch)

    return MoveToken(
        piece_type=piece_type,
        destination=make_square(dest_row, dest_col),
        row_hint=row_hint,
        col_hint=col_hint,
        capture=capture,
        promotion=promotion,
    )


def _castle(board: Board, side: Color, castle: CastleSide) -> None:
    row = 7 if side == Color.WHITE else 0
    king_from, rook_from, king_to, rook_to = _CASTLE_COLUMNS[castle]
    board[make_square(row, king_from)] = None
    board[make_square(row, rook_from)] = None
    board[make_square(row, king_to)] = Piece(side, PieceType.KING)
    board[make_square(row, rook_to)] = Piece(side, PieceType.ROOK)


def apply_move(
    board: Board,
    token: str,
    side: Color,
    max_length: int = MAX_TOKEN_LENGTH,
) -> Board:
    """Return a copy of *board* with the SAN *token* played by *side*.

    *board* itself is left untouched. Raises :class:`MoveApplicationError`
    if the token cannot be parsed or no piece of *side* can make it.
    """
    move = parse_move_token(token, max_length)
    result = board.copy()

    if move.castle is not None:
        _castle(result, side, move.castle)
        return result

    dest = move.destination
    assert dest is not None
    src = locate_piece(
        board,
        move.piece_type,
        side,
        dest,
        row_hint=move.row_hint,
        col_hint=move.col_hint,
    )
    if src is None:
        raise MoveApplicationError(token, MoveFailure.SOURCE_NOT_FOUND)

    # En passant: a pawn stepping diagonally onto an empty square takes the
    # pawn beside it.
    if (
        move.piece_type == PieceType.PAWN
        and col_of(src) != col_of(dest)
        and result.is_empty(dest)
    ):
        result[make_square(row_of(src), col_of(dest))] = None

    result[src] = None
    placed = move.promotion if move.promotion is not None else move.piece_type
    result[dest] = Piece(side, placed)
    return result
