"""One-ply move selection over a caller-supplied SAN move list."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from oneply.core.enums import Color
from oneply.core.notation.fen import position_from_fen
from oneply.core.notation.san import MoveApplicationError, apply_move
from oneply.core.position import Position
from oneply.engine.evaluation import evaluate
from oneply.engine.search import IEngine, SelectionLimits, SelectionResult

_LOGGER = logging.getLogger(__name__)

_WORST_SCORE = 9_999_999


def split_moves(text: str, limits: SelectionLimits | None = None) -> list[str]:
    """Split a space-separated move list into at most ``limits.max_moves`` tokens."""
    limits = limits or SelectionLimits()
    tokens = [t for t in text[: limits.max_moves_text].split(" ") if t]
    return [t[: limits.max_token_length] for t in tokens[: limits.max_moves]]


class OnePlyEngine(IEngine):
    """Plays each candidate on a fresh copy of the board and keeps the best score.

    White maximises and black minimises. Ties keep the earlier move, and
    candidates that cannot be applied are skipped. If none applies the
    result still points at index 0.
    """

    def select(
        self,
        position: Position,
        moves: Sequence[str],
        limits: SelectionLimits | None = None,
    ) -> SelectionResult:
        limits = limits or SelectionLimits()
        candidates = list(moves[: limits.max_moves])
        if not candidates:
            return SelectionResult(0, None, 0, 0)

        side = position.side_to_move
        maximise = side == Color.WHITE
        best_index = 0
        best_score = -_WORST_SCORE if maximise else _WORST_SCORE
        best_found: int | None = None
        evaluated = 0
        skipped = 0

        for index, token in enumerate(candidates):
            try:
                trial = apply_move(
                    position.board,
                    token,
                    side,
                    max_length=limits.max_token_length,
                )
            except MoveApplicationError as exc:
                _LOGGER.debug("Skipping candidate %d: %s", index, exc)
                skipped += 1
                continue

            score = evaluate(trial)
            evaluated += 1
            if (score > best_score) if maximise else (score < best_score):
                best_score = score
                best_index = index
                best_found = score

        if best_found is None:
            _LOGGER.debug("No candidate could be applied; falling back to index 0")
        else:
            _LOGGER.debug(
                "Selected %r (index %d, score %d)",
                candidates[best_index],
                best_index,
                best_found,
            )
        return SelectionResult(best_index, best_found, evaluated, skipped)


def choose_move(
    fen: str,
    moves: str,
    timeout: int = 0,
    limits: SelectionLimits | None = None,
) -> int:
    """Return the 0-based index of the best move in the space-separated *moves*.

    *timeout* is accepted but not used.
    """
    limits = limits or SelectionLimits(time_limit_s=timeout)
    tokens = split_moves(moves, limits)
    if not tokens:
        return 0
    position = position_from_fen(fen)
    return OnePlyEngine().select(position, tokens, limits).index
