"""Source-square lookup for algebraic moves.

Given the piece named by a move and its destination, find the square the
piece starts from. Squares are scanned in row-major order (a8, b8, ...,
h1) and the first match wins, so when two pieces could reach the same
square and no hint separates them, the one nearer rank 8 / file a is used.
Legality (pins, checks) is not considered.
"""

from __future__ import annotations

from collections.abc import Callable

from oneply.core.board import Board
from oneply.core.enums import Color, PieceType
from oneply.core.piece import Piece
from oneply.core.types import Square, col_of, is_on_board, make_square, row_of

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Row step towards promotion and the row a double push starts from.
_PAWN_FORWARD: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}

Reach = Callable[[Board, Square, Square, Color], bool]


def _pawn_reaches(board: Board, src: Square, dest: Square, color: Color) -> bool:
    forward = _PAWN_FORWARD[color]
    src_row, src_col = row_of(src), col_of(src)
    dest_row, dest_col = row_of(dest), col_of(dest)

    if src_col == dest_col and board.is_empty(dest):
        if src_row + forward == dest_row:
            return True
        if (
            src_row == _PAWN_START_ROW[color]
            and dest_row == src_row + 2 * forward
            and board.is_empty(make_square(src_row + forward, src_col))
        ):
            return True

    # Diagonal steps are accepted whatever sits on the destination; the
    # applier handles the en-passant case where it is empty.
    return src_row + forward == dest_row and abs(src_col - dest_col) == 1


def _knight_reaches(board: Board, src: Square, dest: Square, color: Color) -> bool:
    dr = row_of(dest) - row_of(src)
    dc = col_of(dest) - col_of(src)
    return (dr, dc) in KNIGHT_OFFSETS


def _king_reaches(board: Board, src: Square, dest: Square, color: Color) -> bool:
    return (
        abs(row_of(src) - row_of(dest)) <= 1
        and abs(col_of(src) - col_of(dest)) <= 1
    )


def _ray_reaches(
    board: Board,
    src: Square,
    dest: Square,
    directions: tuple[tuple[int, int], ...],
) -> bool:
    for dr, dc in directions:
        row = row_of(src) + dr
        col = col_of(src) + dc
        while is_on_board(row, col):
            sq = make_square(row, col)
            if sq == dest:
                return True
            if not board.is_empty(sq):
                break
            row += dr
            col += dc
    return False


def _bishop_reaches(board: Board, src: Square, dest: Square, color: Color) -> bool:
    return _ray_reaches(board, src, dest, BISHOP_DIRS)


def _rook_reaches(board: Board, src: Square, dest: Square, color: Color) -> bool:
    return _ray_reaches(board, src, dest, ROOK_DIRS)


def _queen_reaches(board: Board, src: Square, dest: Square, color: Color) -> bool:
    return _ray_reaches(board, src, dest, QUEEN_DIRS)


_REACHERS: dict[PieceType, Reach] = {
    PieceType.PAWN: _pawn_reaches,
    PieceType.KNIGHT: _knight_reaches,
    PieceType.BISHOP: _bishop_reaches,
    PieceType.ROOK: _rook_reaches,
    PieceType.QUEEN: _queen_reaches,
    PieceType.KING: _king_reaches,
}


def can_reach(board: Board, src: Square, dest: Square) -> bool:
    """Whether the piece on *src* can move to *dest* by its movement pattern."""
    piece = board[src]
    if piece is None:
        return False
    return _REACHERS[piece.piece_type](board, src, dest, piece.color)


def locate_piece(
    board: Board,
    piece_type: PieceType,
    color: Color,
    destination: Square,
    row_hint: int | None = None,
    col_hint: int | None = None,
) -> Square | None:
    """Return the first square holding *color*'s *piece_type* that reaches *destination*.

    *row_hint* / *col_hint* restrict the candidates to one row or column.
    Returns ``None`` when no square qualifies.
    """
    wanted = Piece(color, piece_type)
    reaches = _REACHERS[piece_type]
    return next(
        (
            sq
            for sq in range(64)
            if board[sq] == wanted
            and (row_hint is None or row_of(sq) == row_hint)
            and (col_hint is None or col_of(sq) == col_hint)
            and reaches(board, sq, destination, color)
        ),
        None,
    )
