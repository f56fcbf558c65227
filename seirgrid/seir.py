"""SEIR state transitions for cells on a grid."""

from __future__ import annotations

import random
from collections.abc import Sequence

from .cell import Cell, CellState
from .grid import Grid

BETA = 0.1
"""Transmission rate."""
GAMMA = 1
"""Recovery rate, in whole steps per update."""
LATENCY_PERIOD = 5
"""Steps an exposed cell waits before it can become infectious."""
BASE_D = 10
"""Base duration of an infection, before the individual modifier."""

RAND_MAX = 2**31 - 1

_MOORE_OFFSETS = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)


def _reset_counters(cell: Cell) -> None:
    cell.move_count = 0
    cell.infection_count = 0
    cell.exposure_count = 0
    cell.new_exposure_count = 0
    cell.new_infection_count = 0


def create_seir_model(grid: Grid, rng: random.Random) -> tuple[int, int]:
    """Seed the grid with infectious (20%) and exposed (10%) cells.

    Positions are drawn with replacement, so fewer distinct cells may end up
    in each state. Returns the number of infectious and exposed draws.
    """
    total = grid.width * grid.height
    infectious_cells = total // 5
    exposed_cells = total // 10

    for _ in range(infectious_cells):
        x = rng.randrange(grid.width)
        y = rng.randrange(grid.height)
        cell = grid.cell(x, y)
        cell.state = CellState.INFECTIOUS
        cell.start_state = CellState.INFECTIOUS
        _reset_counters(cell)

    for _ in range(exposed_cells):
        x = rng.randrange(grid.width)
        y = rng.randrange(grid.height)
        cell = grid.cell(x, y)
        cell.state = CellState.EXPOSED
        _reset_counters(cell)

    print("SEIR model initialized on the grid.")
    print(f"Infectious cells: {infectious_cells}, Exposed cells: {exposed_cells}")
    print(f"Grid dimensions: {grid.width} x {grid.height}")
    return infectious_cells, exposed_cells


def calculate_infection_probability(
    grid: Grid, x: int, y: int, rng: random.Random
) -> float:
    """Advance the cell at (x, y) through the SEIR transitions.

    Infectious and exposed cells in the Moore neighbourhood are collected;
    with no infectious neighbour nothing happens. Returns the probability
    that was worked out for this update.
    """
    cell = grid.cell(x, y)

    neighbours: list[Cell] = []
    infectious_neighbors = 0
    for dx, dy in _MOORE_OFFSETS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < grid.width and 0 <= ny < grid.height:
            neighbour = grid.cell(nx, ny)
            if neighbour.is_infectious():
                neighbours.append(neighbour)
                infectious_neighbors += 1
            if neighbour.is_exposed():
                neighbours.append(neighbour)

    print(
        f"Number of infectious neighbors for cell at ({x}, {y}): "
        f"{infectious_neighbors}"
    )

    if infectious_neighbors == 0:
        return 0.0

    probability = 0.0
    if cell.is_susceptible():
        probability = can_be_exposed(cell, neighbours, infectious_neighbors, rng)
    if cell.is_exposed():
        if cell.in_latency_period():
            probability = 0.0
            cell.decrease_latency_period()
        else:
            for neighbour in neighbours:
                neighbour.infection_count += 1
            infect_cell(cell, rng)
    if cell.is_infectious():
        if can_be_recovered(cell):
            probability = 0.0
    if cell.is_recovered():
        probability = 0.0

    grid.susceptible_count += grid.count_cells(CellState.SUSCEPTIBLE)

    print(f"Infection probability for cell at ({x}, {y}): {probability:.2f}")
    return probability


def calculate_latency_period(grid: Grid, x: int, y: int) -> int | None:
    """Return the remaining latency of the cell at (x, y) if it is exposed."""
    cell = grid.cell(x, y)
    if cell.is_exposed():
        return cell.latency_period
    return None


def can_be_exposed(
    cell: Cell,
    neighbours: Sequence[Cell],
    infectious_neighbors: int,
    rng: random.Random,
) -> float:
    """Maybe expose a susceptible cell; returns 1 - (1 - BETA) ** n.

    On exposure every neighbour in ``neighbours`` is credited with it.
    """
    # Whole-number roll: only the very top draw reaches 1.
    roll = float(rng.randrange(RAND_MAX + 1) // RAND_MAX)
    probability = 1.0 - (1.0 - BETA) ** infectious_neighbors
    if roll < probability:
        for neighbour in neighbours:
            neighbour.exposure_count += 1
            neighbour.new_exposure_count += 1
        for neighbour in neighbours:
            if neighbour.new_exposure_count > neighbour.cur_exposure_count:
                neighbour.cur_exposure_count = neighbour.new_exposure_count
        expose_cell(cell)
    return probability


def can_be_infected(cell: Cell, neighbours: Sequence[Cell]) -> bool:
    """Infect an exposed cell whose latency is over; True if it was infected.

    While the latency period runs, it is counted down by one instead. The
    recovery time modifier is drawn from the shared random generator.
    """
    if cell.in_latency_period():
        cell.decrease_latency_period()
        return False
    for neighbour in neighbours:
        neighbour.infection_count += 1
    infect_cell(cell, None)
    return True


def can_be_recovered(cell: Cell) -> bool:
    """Recover an infectious cell with recovery time left; True if it recovered."""
    recovered = cell.in_recovery_time()
    if recovered:
        recover_cell(cell)
    cell.decrease_recovery_time(GAMMA)
    return recovered


def expose_cell(cell: Cell) -> None:
    cell.state = CellState.EXPOSED
    cell.latency_period = LATENCY_PERIOD


def infect_cell(cell: Cell, rng: random.Random | None = None) -> None:
    """Make the cell infectious with an individually varied recovery time."""
    draw = (rng if rng is not None else random).randrange(5)
    cell.state = CellState.INFECTIOUS
    cell.recovery_time = BASE_D + draw


def recover_cell(cell: Cell) -> None:
    cell.state = CellState.RECOVERED