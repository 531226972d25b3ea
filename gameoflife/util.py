"""Cells, coloured log labels, board visualisation and turn-rate averaging."""

from __future__ import annotations

import logging
import math
import threading
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_BUFFER_SIZE = 3
_ALIVE = 0xFF
_DEAD = 0x00


@dataclass(frozen=True)
class Cell:
    """A cell position on the board."""

    x: int
    y: int


def green(text: str) -> str:
    """Wrap text in the ANSI green colour."""
    return f"\033[32m{text}\033[0m"


def yellow(text: str) -> str:
    """Wrap text in the ANSI yellow colour."""
    return f"\033[33m{text}\033[0m"


def red(text: str) -> str:
    """Wrap text in the ANSI red colour."""
    return f"\033[31m{text}\033[0m"


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class AvgTurns:
    """Rolling average of turns per second over the last few samples."""

    def __init__(self) -> None:
        self._count = 0
        self._last_completed_turns = 0
        self._last_called = time.monotonic()
        self._turns = [0] * _BUFFER_SIZE
        self._durations = [0.0] * _BUFFER_SIZE
        self._lock = threading.Lock()

    def turns_per_sec(self, completed_turns: int) -> int:
        """Record a sample and return the averaged turns per second."""
        with self._lock:
            now = time.monotonic()
            slot = self._count % _BUFFER_SIZE
            self._turns[slot] = completed_turns - self._last_completed_turns
            self._durations[slot] = now - self._last_called
            self._last_called = now
            self._last_completed_turns = completed_turns
            self._count += 1
            total_turns = sum(self._turns)
            total_seconds = sum(self._durations)
        if total_seconds <= 0:
            return 0
        return _round_half_away(total_turns / total_seconds)


def _horizontal_border(start: str, middle: str, end: str, width: int) -> str:
    return start + middle * (width * 2) + end


def _row_squares(row: Sequence[int]) -> str:
    parts = []
    for value in row:
        if value == _ALIVE:
            parts.append("██")
        elif value == _DEAD:
            parts.append("  ")
    return "".join(parts)


def _squares_to_string(
    given: Sequence[Sequence[int]],
    expected: Sequence[Sequence[int]] | None,
    width: int,
    height: int,
) -> str:
    output = [_horizontal_border("  ┌", "─", "┐ ", width)]
    if expected is not None:
        output.append(_horizontal_border("    ┌", "─", "┐", width))
    output.append("\n")

    for i in range(height):
        output.append(f"{i:2d}│")
        output.append(_row_squares(given[i][:width]))
        if expected is not None:
            output.append(f"│   {i:2d}│")
            output.append(_row_squares(expected[i][:width]))
        output.append("│\n")

    output.append(_horizontal_border("  └", "─", "┘ ", width))
    if expected is not None:
        output.append(_horizontal_border("    └", "─", "┘", width))
    output.append("\n")
    return "".join(output)


def matrices_to_string(
    given: Sequence[Sequence[int]],
    expected: Sequence[Sequence[int]] | None,
    width: int,
    height: int,
) -> str:
    """Render one world matrix, or two side by side when expected is given."""
    header = "  Your world matrix:                     "
    header += "Expected world matrix:\n" if expected is not None else "\n"
    return header + _squares_to_string(given, expected, width, height)


def _cells_to_matrix(cells: Iterable[Cell], width: int, height: int) -> list[bytearray]:
    alive = set(cells)
    return [
        bytearray(_ALIVE if Cell(x, y) in alive else _DEAD for x in range(width))
        for y in range(height)
    ]


def alive_cells_to_string(
    given: Iterable[Cell], expected: Iterable[Cell], width: int, height: int
) -> str:
    """Render two sets of alive cells side by side."""
    given_matrix = _cells_to_matrix(given, width, height)
    expected_matrix = _cells_to_matrix(expected, width, height)
    header = "  Your alive cells:                      Expected alive cells:\n"
    return header + _squares_to_string(given_matrix, expected_matrix, width, height)


def visualise_matrix(given: Sequence[Sequence[int]], width: int, height: int) -> None:
    """Log a rendering of the given world matrix."""
    logger.info("%s", matrices_to_string(given, None, width, height))