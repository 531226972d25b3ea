# gameoflife

Conway's Game of Life on a board that wraps around at its edges. Each turn is
computed over horizontal strips of the board, one strip per worker thread.
The starting board is read from a PGM image. The board is saved as a PGM
image on request and when the run ends. The run can be shown live in a
pygame window, or logged to the console with no window.

## Installing

```
pip install .
```

## Running

The starting board is read from `images/<width>x<height>.pgm` in the current
directory. Saved boards are written to `out/<width>x<height>x<turn>.pgm`. The
`out/` directory is created if needed. Both files are binary (`P5`) PGM
images with a maximum value of 255. A cell is alive when its pixel is 255.

```
gameoflife -w 512 -h 512 -t 8 -turns 100
gameoflife -w 64 -h 64 -turns 1000 -headless
```

Options:

| Option                   | Default     | Meaning                                   |
|--------------------------|-------------|-------------------------------------------|
| `-t`                     | 8           | number of worker threads                  |
| `-w`                     | 512         | board width                               |
| `-h`                     | 512         | board height                              |
| `-turns`, `--turns`      | 10000000000 | number of turns to compute                |
| `-headless`, `--headless`| off         | log events to the console, open no window |
| `--help`                 |             | show the options and exit                 |

`-h` sets the height, so help is only available as `--help`.

While the window is open:

- `p` pauses the run, or resumes it if it is paused.
- `s` saves the current board to `out/`.
- `q` or Escape saves the current board and quits.
- Closing the window also saves and quits.

Every two seconds the number of live cells is logged, together with the
average number of turns computed per second. Pauses, resumes, saves and the
end of the run are logged too. When the run reaches the requested number of
turns, the final board is saved and the program exits.

Ctrl+C does not stop the run at once. The first press logs a warning. A
second press within four seconds ends the program immediately.

## Using it from Python

`gameoflife.distributor` holds the simulation:

- `Params(turns, threads, image_width, image_height)` describes a run.
- `step(state, threads)` computes one turn. It returns the new board and the
  list of cells that flipped. A board is a sequence of rows of pixel values.
- `next_strip(state, start_y, end_y)` computes one strip of rows.
- `alive_cells(state)` lists the live cells as `Cell(x, y)`, row by row.
- `run(params, events, key_presses, image_io)` drives a whole run. It puts
  events on the `events` queue and reads the keys `"p"`, `"s"` and `"q"` from
  the `key_presses` queue, which may be `None`. When it has finished it puts
  `None` on the event queue. If `image_io` is not given, boards are read from
  `images/` and written to `out/`.

`gameoflife.events` defines the events: `StateChange` (with a `State` of
`PAUSED`, `EXECUTING` or `QUITTING`), `CellFlipped`, `CellsFlipped`,
`TurnComplete`, `AliveCellsCount`, `ImageOutputComplete` and
`FinalTurnComplete`. Each event carries `completed_turns`.

`gameoflife.pgmio` reads and writes the boards. `read_pgm` and `write_pgm`
work on a single file. `ImageIO` reads and writes named boards in its input
and output directories. A malformed image, or one of the wrong size, raises
`PgmError`.

`gameoflife.loop` has `run`, which shows events in a `gameoflife.window.Window`,
and `run_headless`, which only logs them. `gameoflife.util` holds `Cell`,
`AvgTurns` and helpers that draw boards as text.

## What it does not do

The package ships no starting boards and cannot create them. An image of the
requested size must already be in `images/`.

## Tests

```
pip install ".[test]"
pytest
```