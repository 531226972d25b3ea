"""Events reported by a running Game of Life."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .util import Cell


class State(enum.IntEnum):
    """Execution state of the simulation."""

    PAUSED = 0
    EXECUTING = 1
    QUITTING = 2

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass
class Event:
    """Base of every event; carries the number of fully completed turns."""

    completed_turns: int

    def __str__(self) -> str:
        return ""


@dataclass
class AliveCellsCount(Event):
    """Number of currently alive cells, sent periodically."""

    cells_count: int

    def __str__(self) -> str:
        return f"Alive Cells {self.cells_count}"


@dataclass
class ImageOutputComplete(Event):
    """An image has been saved."""

    filename: str

    def __str__(self) -> str:
        return f"File {self.filename}.pgm output done"


@dataclass
class StateChange(Event):
    """Execution was paused, resumed or quit."""

    new_state: State

    def __str__(self) -> str:
        return str(self.new_state)


@dataclass
class CellFlipped(Event):
    """A single cell changed state."""

    cell: Cell


@dataclass
class CellsFlipped(Event):
    """Many cells changed state."""

    cells: list[Cell] = field(default_factory=list)


@dataclass
class TurnComplete(Event):
    """A turn has completed; the display should render a frame."""


@dataclass
class FinalTurnComplete(Event):
    """Execution finished; carries the final alive cells."""

    alive: list[Cell] = field(default_factory=list)

    def __str__(self) -> str:
        return "Final Turn Complete"