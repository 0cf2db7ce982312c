"""Position — board plus side to move."""

from __future__ import annotations

from dataclasses import dataclass, field

from oneply.core.board import Board
from oneply.core.enums import Color


@dataclass(frozen=True, slots=True)
class Position:
    """Board and side to move.

    Castling rights, en-passant target and move clocks are not tracked.
    Moves are played on ``board.copy()``; the position itself never changes.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
