"""oneply: pick the best move from a list with a one-ply static search."""

__version__ = "0.1.0"
