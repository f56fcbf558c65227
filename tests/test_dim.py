import math

import pytest

from seirgrid.cell import CellState
from seirgrid.dim import BOX_SIZES, calculate_similarity_dim, estimate_similarity_dimension
from seirgrid.grid import Grid


def _filled_grid(size, state):
    grid = Grid(size, size)
    for cell in grid.cells():
        cell.state = state
    return grid


def test_filled_plane_has_dimension_two():
    grid = _filled_grid(32, CellState.INFECTIOUS)
    assert estimate_similarity_dimension(grid, CellState.INFECTIOUS) == pytest.approx(2.0)


def test_full_row_has_dimension_one():
    grid = Grid(32, 32)
    for x in range(32):
        grid.update_cell(x, 0, CellState.INFECTIOUS)
    assert estimate_similarity_dimension(grid, CellState.INFECTIOUS) == pytest.approx(1.0)


def test_single_cell_has_dimension_zero():
    grid = Grid(32, 32)
    grid.update_cell(5, 9, CellState.INFECTIOUS)
    assert estimate_similarity_dimension(grid, CellState.INFECTIOUS) == pytest.approx(0.0)


def test_absent_state_gives_nan():
    grid = Grid(32, 32)
    result = estimate_similarity_dimension(grid, CellState.RECOVERED)
    assert isinstance(result, float)
    assert repr(result) == "nan"
    assert math.isnan(result) is True


def test_single_valid_point_gives_nan():
    counts = [0] * len(BOX_SIZES)
    counts[0] = 10
    result = calculate_similarity_dim(BOX_SIZES, counts)
    assert isinstance(result, float)
    assert repr(result) == "nan"
    assert math.isnan(result) is True


def test_zero_counts_are_skipped():
    full = [1024, 256, 64, 16, 4, 1]
    with_gap = [1024, 0, 64, 16, 0, 1]
    assert calculate_similarity_dim(BOX_SIZES, with_gap) == pytest.approx(
        calculate_similarity_dim(BOX_SIZES, full)
    )


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        calculate_similarity_dim([1, 2, 4], [3, 2])


def test_scaling_counts_does_not_change_slope():
    counts = [300, 90, 30, 9, 3, 1]
    scaled = [c * 5 for c in counts]
    assert calculate_similarity_dim(BOX_SIZES, scaled) == pytest.approx(
        calculate_similarity_dim(BOX_SIZES, counts)
    )


def test_small_grid_matches_filled_plane_estimate_direction():
    grid = _filled_grid(8, CellState.EXPOSED)
    dim = estimate_similarity_dimension(grid, CellState.EXPOSED)
    assert 0.0 < dim < 2.0 + 1e-9