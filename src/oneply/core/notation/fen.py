"""FEN decoding and serialization.

Only the piece-placement and side-to-move fields are read. Decoding is
total: malformed input yields a best-effort board instead of an error.
"""

from __future__ import annotations

from oneply.core.board import Board
from oneply.core.enums import Color
from oneply.core.piece import Piece
from oneply.core.position import Position
from oneply.core.types import is_on_board, make_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


def position_from_fen(fen: str) -> Position:
    """Decode the placement and side-to-move fields of *fen*.

    Digits 1-8 skip empty squares, ``/`` starts the next row, and any other
    character occupies one square. Characters landing outside the 8x8 grid
    are consumed and dropped. Characters that are not piece letters also
    take up a square but leave it empty.

    The side to move is the single character after the first space:
    ``'w'`` is white, anything else (including a missing field) is black.
    """
    placement, sep, rest = fen.partition(" ")

    board = Board()
    row = 0
    col = 0
    for ch in placement:
        if ch == "/":
            row += 1
            col = 0
        elif "1" <= ch <= "8":
            col += int(ch)
        else:
            if is_on_board(row, col) and Piece.is_piece_char(ch):
                board[make_square(row, col)] = Piece.from_char(ch)
            col += 1

    side_char = rest[:1] if sep else ""
    side = Color.WHITE if side_char == "w" else Color.BLACK
    return Position(board, side)


def position_to_fen(pos: Position) -> str:
    """Serialise placement and side to move (the fields this package reads)."""
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = pos.board.at(row, col)
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)

    side_str = "w" if pos.side_to_move == Color.WHITE else "b"
    return f"{'/'.join(rows)} {side_str}"
