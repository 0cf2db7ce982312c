"""Command-line entry point: ``oneply <fen> <moves> <timeout>``."""

from __future__ import annotations

import logging
import re

import typer

from oneply.engine.selector import choose_move

_LOGGER = logging.getLogger(__name__)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

app = typer.Typer(
    name="oneply",
    help="Print the index of the best move from a list using a one-ply search.",
    add_completion=False,
)


def parse_timeout(text: str) -> int:
    """Read a leading integer from *text* the way C ``atoi`` does; 0 if none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command(context_settings={"ignore_unknown_options": True})
def select(
    fen: str = typer.Argument(..., help="Current position in FEN"),
    moves: str = typer.Argument(..., help="Space-separated legal moves in SAN"),
    timeout: str = typer.Argument(..., help="Seconds available (unused)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log to stderr"),
) -> None:
    """Choose a move and print its 0-based index."""
    _configure_logging(verbose)
    seconds = parse_timeout(timeout)
    _LOGGER.debug("Choosing among %r from %r (timeout %ds)", moves, fen, seconds)
    typer.echo(choose_move(fen, moves, seconds))


def main() -> None:
    """Run the command-line interface."""
    app()


if __name__ == "__main__":
    main()
