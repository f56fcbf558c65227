"""Running the SEIR simulation and logging its statistics to CSV files."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from contextlib import nullcontext
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .cell import CellState
from .dim import estimate_similarity_dimension
from .grid import Grid
from .render import CELL_SIZE, GRID_HEIGHT, GRID_WIDTH, STATISTICS_WIDTH, Renderer
from .seir import calculate_infection_probability, create_seir_model
from .terminal import cleanup, join_strings

MAX_ITERATIONS = 10000
SNAPSHOT_EVERY = 5
CSV_DIR = "csv"
CSV_NAME = "statistics.csv"
IT_CSV_NAME = "iterations_statistics.csv"
WINDOW_TITLE = "SEIR Model Simulation"

COLUMNS = (
    "iteration",
    "susceptible",
    "exposed",
    "infectious",
    "recovered",
    "total_moves",
    "total_exposures",
    "total_infectious",
    "avg_susceptible_count",
    "avg_exposed_count",
    "avg_infection_count",
    "avg_move_count",
    "dim",
)


class _Display(Protocol):
    def draw_grid(self, grid: Grid) -> object: ...

    def draw_statistics(
        self,
        total_moved: int,
        total_infections: int,
        total_exposures: int,
        iteration: int,
    ) -> object: ...


@dataclass
class Statistics:
    """Running totals, summed over every cell at every accumulation."""

    moves: int = 0
    infections: int = 0
    exposures: int = 0

    def accumulate(self, grid: Grid) -> None:
        """Add the move, infection and exposure counts of every cell."""
        for cell in grid.cells():
            self.moves += cell.move_count
            self.infections += cell.infection_count
            self.exposures += cell.exposure_count


@dataclass(frozen=True)
class Snapshot:
    """One row of statistics about the grid at a time step."""

    timestep: int
    susceptible: int
    exposed: int
    infectious: int
    recovered: int
    total_moves: int
    total_infections: int
    total_exposures: int
    avg_susceptible_count: float
    avg_exposed_count: float
    avg_infection_count: float
    avg_move_count: float
    dim: float


def take_snapshot(
    grid: Grid, timestep: int, statistics: Statistics, dim: float
) -> Snapshot:
    """Collect the counts and averages of ``grid`` into a snapshot."""
    return Snapshot(
        timestep=timestep,
        susceptible=grid.count_cells(CellState.SUSCEPTIBLE),
        exposed=grid.count_cells(CellState.EXPOSED),
        infectious=grid.count_cells(CellState.INFECTIOUS),
        recovered=grid.count_cells(CellState.RECOVERED),
        total_moves=statistics.moves,
        total_infections=statistics.infections,
        total_exposures=statistics.exposures,
        avg_susceptible_count=calculate_avg_state_count(grid, CellState.SUSCEPTIBLE),
        avg_exposed_count=calculate_avg_state_count(grid, CellState.EXPOSED),
        avg_infection_count=calculate_avg_state_count(grid, CellState.INFECTIOUS),
        avg_move_count=calculate_avg_move_count(grid),
        dim=dim,
    )


def calculate_avg(total: int, count: int) -> float:
    """``total / count``, or 0.0 when there is nothing to average over."""
    return total / count if count > 0 else 0.0


def calculate_avg_move_count(grid: Grid) -> float:
    """Average number of moves made per cell."""
    moves = [cell.move_count for cell in grid.cells()]
    return calculate_avg(sum(moves), len(moves))


def calculate_avg_state_count(grid: Grid, state: CellState) -> float:
    """Average per-cell count for cells in ``state``.

    Exposed cells contribute their exposure count and infectious cells their
    infection count; recovered cells contribute nothing. For the susceptible
    state no cells are counted, so the average is always 0.0.
    """
    total = 0
    cells = 0
    if state == CellState.SUSCEPTIBLE:
        total = grid.susceptible_count
    else:
        for cell in grid.cells():
            if cell.state != state:
                continue
            if cell.state == CellState.EXPOSED:
                total += cell.exposure_count
            elif cell.state == CellState.INFECTIOUS:
                total += cell.infection_count
            cells += 1
    if state == CellState.EXPOSED:
        print(f"exposure count: {total}")
    if state == CellState.INFECTIOUS:
        print(f"infectious count: {total}")
    return calculate_avg(total, cells)


def create_csv(path: str | Path, columns: Sequence[str]) -> None:
    """Create (or truncate) a CSV file holding only the header line."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(join_strings(columns) + "\n")


def _format_row(snapshot: Snapshot) -> str:
    whole = (
        snapshot.timestep,
        snapshot.susceptible,
        snapshot.exposed,
        snapshot.infectious,
        snapshot.recovered,
        snapshot.total_moves,
        snapshot.total_infections,
        snapshot.total_exposures,
    )
    fractional = (
        snapshot.avg_susceptible_count,
        snapshot.avg_exposed_count,
        snapshot.avg_infection_count,
        snapshot.avg_move_count,
        snapshot.dim,
    )
    fields = [str(value) for value in whole]
    fields.extend(f"{value:.2f}" for value in fractional)
    return ",".join(fields) + "\n"


def save_to_csv(path: str | Path, snapshot: Snapshot) -> None:
    """Append the snapshot as one row to the CSV file at ``path``."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(_format_row(snapshot))


def run(
    iterations: int = MAX_ITERATIONS,
    rng: random.Random | None = None,
    renderer: _Display | None = None,
    csv_dir: str | Path = CSV_DIR,
) -> Snapshot:
    """Simulate the model for ``iterations`` + 1 steps and log to CSV.

    A row is appended to the iterations file every fifth step; the final
    statistics go to a separate file. Returns the final snapshot.
    """
    if iterations < 0:
        raise ValueError("iterations must not be negative")
    rng = rng if rng is not None else random.Random()
    out_dir = Path(csv_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    it_path = out_dir / IT_CSV_NAME
    final_path = out_dir / CSV_NAME

    grid = Grid(GRID_WIDTH, GRID_HEIGHT)
    create_seir_model(grid, rng)
    if renderer is not None:
        renderer.draw_grid(grid)

    create_csv(it_path, COLUMNS)
    statistics = Statistics()

    print("Starting the simulation...")
    for time_step in range(iterations + 1):
        print(f"Iteration: {time_step}")
        x = rng.randrange(grid.width)
        y = rng.randrange(grid.height)
        cell = grid.cell(x, y)

        if renderer is not None:
            renderer.draw_grid(grid)

        grid.move_cell_random(cell, rng)
        calculate_infection_probability(grid, x, y, rng)

        if time_step % SNAPSHOT_EVERY == 0:
            dim = estimate_similarity_dimension(grid, CellState.INFECTIOUS)
            save_to_csv(it_path, take_snapshot(grid, time_step, statistics, dim))
            print("Saved current iteration to csv...")

        statistics.accumulate(grid)
        if renderer is not None:
            renderer.draw_statistics(
                statistics.moves,
                statistics.infections,
                statistics.exposures,
                time_step,
            )

    dim = estimate_similarity_dimension(grid, CellState.INFECTIOUS)
    final = take_snapshot(grid, iterations + 1, statistics, dim)
    create_csv(final_path, COLUMNS)
    save_to_csv(final_path, final)
    return final


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the SEIR grid simulation.")
    parser.add_argument(
        "--iterations",
        type=int,
        default=MAX_ITERATIONS,
        help="number of the last iteration to run",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--csv-dir", default=CSV_DIR, help="directory for the CSV statistics"
    )
    parser.add_argument(
        "--headless", action="store_true", help="run without opening a window"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the exit status."""
    args = _parse_args(argv)
    if args.iterations < 0:
        print("iterations must not be negative", file=sys.stderr)
        return 2
    rng = random.Random(args.seed)
    try:
        if args.headless:
            display = nullcontext(None)
        else:
            try:
                display = Renderer(
                    WINDOW_TITLE,
                    GRID_WIDTH * CELL_SIZE + STATISTICS_WIDTH,
                    GRID_HEIGHT * CELL_SIZE,
                )
            except RuntimeError as exc:
                print(f"Failed to initialize renderer: {exc}", file=sys.stderr)
                return 1
        with display as renderer:
            run(args.iterations, rng, renderer, args.csv_dir)
    except KeyboardInterrupt:
        cleanup()
        return 0
    except OSError as exc:
        print(f"Failed to write statistics: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())