"""Cells of the SEIR grid and their state bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class CellState(IntEnum):
    """Epidemiological state of a cell."""

    SUSCEPTIBLE = 0
    INFECTIOUS = 1
    EXPOSED = 2
    RECOVERED = 3


@dataclass(eq=False)
class Cell:
    """One individual living on the grid, with its counters."""

    x: int
    y: int
    state: CellState = CellState.SUSCEPTIBLE
    start_state: CellState = CellState.SUSCEPTIBLE
    latency_period: int = 0
    recovery_time: int = 0
    move_count: int = 0
    infection_count: int = 0
    exposure_count: int = 0
    new_exposure_count: int = 0
    new_infection_count: int = 0
    cur_exposure_count: int = 0
    cur_infection_count: int = 0

    def increase_latency_period(self) -> None:
        self.latency_period += 1

    def increase_move_count(self) -> None:
        self.move_count += 1

    def increase_infection_count(self) -> None:
        self.infection_count += 1

    def increase_exposure_count(self) -> None:
        self.exposure_count += 1

    def decrease_latency_period(self) -> None:
        """Count one step off the latency period; it must not already be zero."""
        if self.latency_period <= 0:
            raise ValueError("latency period is already zero")
        self.latency_period -= 1

    def decrease_recovery_time(self, recovery_rate: int) -> None:
        """Reduce the remaining recovery time by ``recovery_rate``, not below zero."""
        if self.recovery_time > 0:
            self.recovery_time = max(self.recovery_time - recovery_rate, 0)

    def in_latency_period(self) -> bool:
        """True while an exposed cell should not yet become infectious."""
        return self.latency_period > 0

    def in_recovery_time(self) -> bool:
        return self.recovery_time > 0

    def has_state(self, state: CellState) -> bool:
        return self.state == state

    def is_susceptible(self) -> bool:
        return self.has_state(CellState.SUSCEPTIBLE)

    def is_infectious(self) -> bool:
        return self.has_state(CellState.INFECTIOUS)

    def is_exposed(self) -> bool:
        return self.has_state(CellState.EXPOSED)

    def is_recovered(self) -> bool:
        return self.has_state(CellState.RECOVERED)