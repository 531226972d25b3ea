import logging
from unittest.mock import patch

import pytest

from gameoflife.util import (
    AvgTurns,
    Cell,
    alive_cells_to_string,
    green,
    matrices_to_string,
    red,
    visualise_matrix,
    yellow,
)


def test_cell_equality_and_hash():
    assert Cell(1, 2) == Cell(1, 2)
    assert Cell(1, 2) != Cell(2, 1)
    assert len({Cell(1, 2), Cell(1, 2), Cell(2, 1)}) == 2


def test_colours():
    assert red("ERROR") == "\033[31mERROR\033[0m"
    assert yellow("WARN") == "\033[33mWARN\033[0m"
    assert green("OK") == "\033[32mOK\033[0m"


def test_avg_turns_rolling_window():
    times = [0.0, 2.0, 4.0, 6.0, 8.0]
    with patch("time.monotonic", side_effect=times):
        avg = AvgTurns()
        assert avg.turns_per_sec(100) == 50
        assert avg.turns_per_sec(300) == 75
        assert avg.turns_per_sec(600) == 100
        # oldest sample is replaced: turns 400+200+300 over 6 seconds
        assert avg.turns_per_sec(1000) == 150


def test_avg_turns_zero_duration_returns_zero():
    with patch("time.monotonic", return_value=5.0):
        avg = AvgTurns()
        assert avg.turns_per_sec(1000) == 0


def test_avg_turns_rounds_half_away_from_zero():
    with patch("time.monotonic", side_effect=[0.0, 2.0]):
        avg = AvgTurns()
        assert avg.turns_per_sec(5) == 3


def test_matrices_to_string_single():
    world = [[0xFF, 0x00], [0x00, 0xFF]]
    text = matrices_to_string(world, None, 2, 2)
    lines = text.split("\n")
    assert lines[0] == "  Your world matrix:                     "
    assert lines[1] == "  ┌────┐ "
    assert lines[2] == " 0│██  │"
    assert lines[3] == " 1│  ██│"
    assert lines[4] == "  └────┘ "
    assert lines[5] == ""


def test_matrices_to_string_with_expected():
    given = [[0xFF]]
    expected = [[0x00]]
    text = matrices_to_string(given, expected, 1, 1)
    lines = text.split("\n")
    assert lines[0] == "  Your world matrix:                     Expected world matrix:"
    assert lines[1] == "  ┌──┐     ┌──┐"
    assert lines[2] == " 0│██│    0│  │"
    assert lines[3] == "  └──┘     └──┘"


@pytest.mark.parametrize("size", [16])
def test_alive_cells_to_string_16x16(size):
    given = [Cell(0, 0), Cell(15, 15)]
    expected = [Cell(1, 0)]
    text = alive_cells_to_string(given, expected, size, size)
    lines = text.rstrip("\n").split("\n")
    assert lines[0] == "  Your alive cells:                      Expected alive cells:"
    assert len(lines) == size + 3
    row0 = lines[2]
    assert row0.startswith(" 0│██" + "  " * 15 + "│    0│  ██")
    assert lines[2 + 15].startswith("15│" + "  " * 15 + "██│")


def test_alive_cells_to_string_same_sets_render_identically():
    cells = [Cell(2, 1), Cell(0, 3)]
    text = alive_cells_to_string(cells, list(reversed(cells)), 4, 4)
    for line in text.split("\n")[2:6]:
        left, right = line.split("│   ")
        assert left[2:] == right[2:-1]


def test_visualise_matrix_logs(caplog):
    with caplog.at_level(logging.INFO, logger="gameoflife.util"):
        visualise_matrix([[0xFF]], 1, 1)
    assert " 0│██│" in caplog.text