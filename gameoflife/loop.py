"""Event loops that display or log what a running simulation reports."""

from __future__ import annotations

import logging
import queue
import time

import pygame

from .distributor import Params
from .events import (
    AliveCellsCount,
    CellFlipped,
    CellsFlipped,
    Event,
    FinalTurnComplete,
    ImageOutputComplete,
    State,
    StateChange,
    TurnComplete,
)
from .util import AvgTurns
from .window import Window

logger = logging.getLogger(__name__)

FPS = 60

_KEYS = {
    pygame.K_ESCAPE: "q",
    pygame.K_p: "p",
    pygame.K_s: "s",
    pygame.K_q: "q",
    pygame.K_k: "k",
}


def _log_event(event: Event, avg_turns: AvgTurns) -> None:
    if isinstance(event, AliveCellsCount):
        logger.info(
            "[Event] Completed Turns %-8s %-20s Avg%+5d turns/sec",
            event.completed_turns,
            str(event),
            avg_turns.turns_per_sec(event.completed_turns),
        )
    elif isinstance(event, (FinalTurnComplete, ImageOutputComplete, StateChange)):
        logger.info("[Event] Completed Turns %-8s %s", event.completed_turns, str(event))


def _forward_input(event: pygame.event.Event | None, key_presses: queue.Queue | None) -> None:
    if event is None or key_presses is None:
        return
    if event.type == pygame.QUIT:
        key_presses.put("q")
    elif event.type == pygame.KEYDOWN:
        key = _KEYS.get(event.key)
        if key is not None:
            key_presses.put(key)


def run(params: Params, events: queue.Queue, key_presses: queue.Queue | None) -> None:
    """Show the simulation in a window until it quits or the event stream ends."""
    window = Window(params.image_width, params.image_height)
    avg_turns = AvgTurns()
    dirty = False
    interval = 1.0 / FPS
    next_refresh = time.monotonic() + interval
    try:
        while True:
            now = time.monotonic()
            if now >= next_refresh:
                next_refresh = max(next_refresh + interval, now)
                _forward_input(window.poll_event(), key_presses)
                if dirty:
                    window.render_frame()
                    dirty = False
                continue
            try:
                event = events.get(timeout=next_refresh - now)
            except queue.Empty:
                continue
            if event is None:
                break
            if isinstance(event, CellFlipped):
                window.flip_pixel(event.cell.x, event.cell.y)
            elif isinstance(event, CellsFlipped):
                for cell in event.cells:
                    window.flip_pixel(cell.x, cell.y)
            elif isinstance(event, TurnComplete):
                dirty = True
            else:
                _log_event(event, avg_turns)
                if isinstance(event, StateChange) and event.new_state == State.QUITTING:
                    break
    finally:
        window.destroy()


def run_headless(events: queue.Queue) -> None:
    """Log the simulation's events until the event stream ends."""
    avg_turns = AvgTurns()
    for event in iter(events.get, None):
        _log_event(event, avg_turns)