"""Shared engine selection models and protocol."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from oneply.core.notation.san import MAX_TOKEN_LENGTH

if TYPE_CHECKING:
    from oneply.core.position import Position


@dataclass(slots=True, frozen=True)
class SelectionLimits:
    """Input bounds for a single move selection.

    ``time_limit_s`` is accepted for interface compatibility; a one-ply
    selection always scores every candidate.
    """

    max_moves: int = 256
    max_token_length: int = MAX_TOKEN_LENGTH
    max_moves_text: int = 4095
    time_limit_s: int | None = None


@dataclass(slots=True, frozen=True)
class SelectionResult:
    """Outcome of scoring a candidate list."""

    index: int
    score: int | None
    evaluated: int
    skipped: int


class IEngine(Protocol):
    """Protocol for engines that pick one move out of a candidate list."""

    def select(
        self,
        position: Position,
        moves: Sequence[str],
        limits: SelectionLimits,
    ) -> SelectionResult: ...
