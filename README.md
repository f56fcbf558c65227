# seirgrid

A small SEIR (Susceptible, Exposed, Infectious, Recovered) epidemic model
run as a cellular automaton on a 32 × 32 grid. At each step a random cell is
swapped with the cell at another random position, and the cell left at the
chosen spot is updated from its Moore neighbourhood: susceptible cells become
exposed, exposed cells count down a latency period and then become infectious,
and infectious cells recover. The spread of infection is measured with a
box-counting estimate of its similarity (fractal) dimension, and statistics
are written to CSV files.

## Installing

```
pip install .
```

The window is drawn with `pygame`, which is installed as a dependency.
For the tests: `pip install .[test]`.

## Running the simulation

```
seirgrid --headless
```

Options:

- `--iterations N` – number of the last iteration to run (default 10000);
  steps 0 to N are simulated.
- `--seed S` – seed for the random generator, for repeatable runs.
- `--csv-dir DIR` – directory for the CSV files (default `csv`, created if
  missing).
- `--headless` – run without opening a window.

Without `--headless` a window opens showing the grid (blue susceptible,
yellow exposed, red infectious, green recovered) with the iteration number
and running totals on its right. The panel font is loaded from
`graphics/fonts/arial.ttf`, relative to the current directory; if the window
or the font cannot be opened, the command reports it and exits with status 1.

Every fifth iteration a row is appended to `iterations_statistics.csv`; at the
end `statistics.csv` is written with a single final row, whose iteration value
is N + 1. Ctrl+C stops the run, prints `Cleaning up resources...` and exits
with status 0. The run prints progress for every step to standard output.

Each CSV file starts with this header:

```
iteration,susceptible,exposed,infectious,recovered,total_moves,total_exposures,total_infectious,avg_susceptible_count,avg_exposed_count,avg_infection_count,avg_move_count,dim
```

Rows hold, in order: the iteration; the number of cells in each of the four
states; the running totals of moves, infections and exposures (in that order);
four averages, with two decimals; and the dimension estimate, with two
decimals (`nan` when it cannot be estimated). The running totals add up every
cell's counters once per step. The susceptible average is always `0.00`.

## Using it as a library

```python
import random

from seirgrid.cell import CellState
from seirgrid.grid import Grid
from seirgrid.seir import create_seir_model, calculate_infection_probability
from seirgrid.dim import estimate_similarity_dimension

rng = random.Random(1)
grid = Grid(32, 32)
create_seir_model(grid, rng)

for _ in range(1000):
    x, y = rng.randrange(grid.width), rng.randrange(grid.height)
    grid.move_cell_random(grid.cell(x, y), rng)
    calculate_infection_probability(grid, x, y, rng)

print(grid.count_cells(CellState.INFECTIOUS))
print(estimate_similarity_dimension(grid, CellState.INFECTIOUS))
```

Modules:

- `seirgrid.cell` – `CellState` and the `Cell` dataclass with its counters.
- `seirgrid.grid` – `Grid`: cell lookup, iteration, moving cells by swapping,
  counting by state, and `render_text()` for a plain-text view.
- `seirgrid.seir` – `create_seir_model` seeds 20 % infectious and 10 % exposed
  draws (with replacement); `calculate_infection_probability` performs one
  update and returns the probability it worked out; the transition helpers
  `can_be_exposed`, `can_be_infected`, `can_be_recovered`, `expose_cell`,
  `infect_cell` and `recover_cell`.
- `seirgrid.dim` – `estimate_similarity_dimension` and
  `calculate_similarity_dim` (box sizes 1 to 32).
- `seirgrid.simulation` – `run(iterations, rng, renderer, csv_dir)` drives a
  whole run and returns the final `Snapshot`; `Statistics`, `take_snapshot`,
  `create_csv`, `save_to_csv` and the averaging helpers.
- `seirgrid.render` – `Renderer`, a context manager around the pygame window,
  `color_for_state`, and `run_demo(rng)`, which shows a grid of random states
  until the window is closed.
- `seirgrid.terminal` – `join_strings`, `clear_term` and `cleanup`.

## Model parameters

| Parameter | Value | Meaning |
|-----------|-------|---------|
| β (`BETA`) | 0.1 | transmission rate per infectious neighbour |
| γ (`GAMMA`) | 1 | recovery steps taken per update |
| σ (`LATENCY_PERIOD`) | 5 | latency period of an exposed cell |
| D (`BASE_D`) | 10 + 0–4 | duration of infection, with a per-cell random modifier |

The exposure roll is a whole number, so a susceptible cell with at least one
infectious neighbour is exposed practically every time it is updated.

## What it does not do

The package does not plot or analyse the CSV files, and the window has no
controls: it cannot pause, step or change parameters during a run. Grid size
and model parameters are fixed in the code rather than set from the command
line.