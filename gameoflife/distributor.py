"""The Game of Life engine: splits turns between workers and reacts to keys."""

from __future__ import annotations

import queue
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from .events import (
    AliveCellsCount,
    CellFlipped,
    CellsFlipped,
    FinalTurnComplete,
    ImageOutputComplete,
    StateChange,
    State,
    TurnComplete,
)
from .pgmio import ImageIO
from .util import Cell

_ALIVE = 255
_DEAD = 0
_TICK_SECONDS = 2.0
_PAUSE_SLEEP = 0.01

World = Sequence[Sequence[int]]


@dataclass
class Params:
    """How to run the simulation and which image to load."""

    turns: int = 10_000_000_000
    threads: int = 8
    image_width: int = 512
    image_height: int = 512


def next_strip(state: World, start_y: int, end_y: int) -> tuple[list[bytearray], list[Cell]]:
    """Compute the next rows start_y..end_y-1 on a wrapping board.

    Returns the new rows and the cells whose state flipped.
    """
    height = len(state)
    rows: list[bytearray] = []
    flipped: list[Cell] = []
    for y in range(start_y, end_y):
        above, row, below = state[(y - 1) % height], state[y], state[(y + 1) % height]
        width = len(row)
        new_row = bytearray(width)
        for x, value in enumerate(row):
            columns = ((x - 1) % width, x, (x + 1) % width)
            neighbours = sum(
                r[c] == _ALIVE for r in (above, row, below) for c in columns
            ) - (value == _ALIVE)
            if value == _ALIVE:
                if neighbours in (2, 3):
                    new_row[x] = _ALIVE
                else:
                    flipped.append(Cell(x, y))
            elif neighbours == 3:
                new_row[x] = _ALIVE
                flipped.append(Cell(x, y))
        rows.append(new_row)
    return rows, flipped


def alive_cells(state: World) -> list[Cell]:
    """All alive cells, in row-major order."""
    return [
        Cell(x, y)
        for y, row in enumerate(state)
        for x, value in enumerate(row)
        if value == _ALIVE
    ]


def _strips(height: int, threads: int) -> list[tuple[int, int]]:
    rows_per_thread = height // threads
    bounds = [(t * rows_per_thread, (t + 1) * rows_per_thread) for t in range(threads)]
    bounds[-1] = (bounds[-1][0], height)
    return bounds


def step(state: World, threads: int) -> tuple[list[bytearray], list[Cell]]:
    """Advance the board one turn using the given number of workers."""
    if threads < 1:
        raise ValueError("threads must be at least 1")
    strips = _strips(len(state), threads)
    if threads == 1:
        results = [next_strip(state, *strips[0])]
    else:
        with ThreadPoolExecutor(max_workers=threads) as pool:
            results = list(pool.map(lambda b: next_strip(state, *b), strips))
    new_state: list[bytearray] = []
    flipped: list[Cell] = []
    for rows, cells in results:
        new_state.extend(rows)
        flipped.extend(cells)
    return new_state, flipped


def _poll_key(key_presses: queue.Queue | None) -> str | None:
    if key_presses is None:
        return None
    try:
        return key_presses.get_nowait()
    except queue.Empty:
        return None


def run(
    params: Params,
    events: queue.Queue,
    key_presses: queue.Queue | None = None,
    image_io: ImageIO | None = None,
) -> None:
    """Run the simulation, putting events on the queue.

    Keys 'p' (pause/resume), 's' (save) and 'q' (save and quit) are read from
    key_presses. When finished, None is put on the event queue to mark its end.
    """
    width, height = params.image_width, params.image_height
    if image_io is None:
        image_io = ImageIO(width, height)

    state: list[bytearray] = image_io.read(f"{width}x{height}")
    for cell in alive_cells(state):
        events.put(CellFlipped(0, cell))

    turn = 0
    events.put(StateChange(turn, State.EXECUTING))

    def save() -> None:
        name = f"{width}x{height}x{turn}"
        image_io.write(name, state)
        events.put(ImageOutputComplete(turn, name))

    paused = False
    quitting = False
    save_on_exit = True
    next_tick = time.monotonic() + _TICK_SECONDS

    while turn < params.turns and not quitting:
        key = _poll_key(key_presses)
        if key is not None:
            if key == "p":
                paused = not paused
                events.put(StateChange(turn, State.PAUSED if paused else State.EXECUTING))
            elif key == "s":
                save()
            elif key == "q":
                save()
                quitting = True
                save_on_exit = False
            continue

        now = time.monotonic()
        if now >= next_tick:
            while next_tick <= now:
                next_tick += _TICK_SECONDS
            events.put(AliveCellsCount(turn, len(alive_cells(state))))
        elif not paused:
            state, flipped = step(state, params.threads)
            events.put(CellsFlipped(turn, flipped))
            turn += 1
            events.put(TurnComplete(turn))
        else:
            time.sleep(_PAUSE_SLEEP)

    events.put(FinalTurnComplete(turn, alive_cells(state)))

    if save_on_exit:
        image_io.write(f"{width}x{height}x{turn}", state)

    events.put(StateChange(turn, State.QUITTING))
    events.put(None)