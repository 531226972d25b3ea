"""Command-line entry point for running the Game of Life."""

from __future__ import annotations

import argparse
import contextlib
import logging
import os
import queue
import signal
import threading
import time
from collections.abc import Iterator, Sequence

from . import distributor, loop
from .distributor import Params
from .util import yellow

logger = logging.getLogger(__name__)

_FORCE_QUIT_WINDOW = 4.0


def parse_args(argv: Sequence[str] | None = None) -> tuple[Params, bool]:
    """Parse command-line options into run parameters and the headless flag."""
    parser = argparse.ArgumentParser(
        prog="gameoflife",
        description="Run Conway's Game of Life.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("--help", action="help", help="Show this help and exit.")
    parser.add_argument(
        "-t", dest="threads", type=int, default=8,
        help="Specify the number of worker threads to use. Defaults to 8.",
    )
    parser.add_argument(
        "-w", dest="width", type=int, default=512,
        help="Specify the width of the image. Defaults to 512.",
    )
    parser.add_argument(
        "-h", dest="height", type=int, default=512,
        help="Specify the height of the image. Defaults to 512.",
    )
    parser.add_argument(
        "-turns", "--turns", dest="turns", type=int, default=10_000_000_000,
        help="Specify the number of turns to process. Defaults to 10000000000.",
    )
    parser.add_argument(
        "-headless", "--headless", dest="headless", action="store_true",
        help="Disable the window for running in a headless environment.",
    )
    options = parser.parse_args(argv)
    params = Params(
        turns=options.turns,
        threads=options.threads,
        image_width=options.width,
        image_height=options.height,
    )
    return params, options.headless


class _InterruptHandler:
    """Warn on the first interrupt; exit on a second one soon after."""

    def __init__(self) -> None:
        self._armed_until = 0.0

    def __call__(self, signum, frame) -> None:
        now = time.monotonic()
        if now < self._armed_until:
            logger.warning("[Main] %s Force quit by the user", yellow("WARN"))
            os._exit(0)
        logger.warning("[Main] %s Press Ctrl+C again to force quit", yellow("WARN"))
        self._armed_until = now + _FORCE_QUIT_WINDOW


@contextlib.contextmanager
def _interrupt_handling() -> Iterator[None]:
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    handler = _InterruptHandler()
    signals = (signal.SIGINT, signal.SIGTERM)
    previous = {sig: signal.signal(sig, handler) for sig in signals}
    try:
        yield
    finally:
        for sig, old in previous.items():
            signal.signal(sig, old)


def main(argv: Sequence[str] | None = None) -> None:
    """Run the simulation with a window, or headless when asked."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    params, headless = parse_args(argv)

    logger.info("[Main] %-10s %s", "Threads", params.threads)
    logger.info("[Main] %-10s %s", "Width", params.image_width)
    logger.info("[Main] %-10s %s", "Height", params.image_height)
    logger.info("[Main] %-10s %s", "Turns", params.turns)

    key_presses: queue.Queue = queue.Queue(maxsize=10)
    events: queue.Queue = queue.Queue(maxsize=1000)
    failures: list[BaseException] = []

    def simulate() -> None:
        try:
            distributor.run(params, events, key_presses)
        except BaseException as exc:
            failures.append(exc)
            events.put(None)

    with _interrupt_handling():
        worker = threading.Thread(target=simulate, name="distributor", daemon=True)
        worker.start()
        if headless:
            loop.run_headless(events)
        else:
            loop.run(params, events, key_presses)
        worker.join(timeout=2.0)

    if failures:
        raise failures[0]