"""Conway's Game of Life on a wrapping board, computed by worker threads, with PGM input and output and an optional pygame window."""

__version__ = "0.1.0"