"""Box-counting estimate of the similarity dimension of a state on a grid."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .cell import CellState
from .grid import Grid

BOX_SIZES = (1, 2, 4, 8, 16, 32)


def _count_boxes(grid: Grid, target_state: CellState, box_size: int) -> int:
    count = 0
    for top in range(0, grid.height, box_size):
        for left in range(0, grid.width, box_size):
            if any(
                grid.cell(x, y).state == target_state
                for y in range(top, min(top + box_size, grid.height))
                for x in range(left, min(left + box_size, grid.width))
            ):
                count += 1
    return count


def estimate_similarity_dimension(grid: Grid, target_state: CellState) -> float:
    """Estimate the dimension of the cells in ``target_state``; NaN if impossible."""
    counts = [_count_boxes(grid, target_state, size) for size in BOX_SIZES]
    return calculate_similarity_dim(BOX_SIZES, counts)


def calculate_similarity_dim(sizes: Sequence[int], counts: Sequence[int]) -> float:
    """Slope of log(count) against log(1/size), skipping empty counts.

    Returns NaN when the regression is degenerate.
    """
    if len(sizes) != len(counts):
        raise ValueError("sizes and counts must have the same length")
    points = [
        (math.log(1.0 / size), math.log(count))
        for size, count in zip(sizes, counts)
        if count != 0
    ]
    n = len(points)
    sum_r = sum(r for r, _ in points)
    sum_n = sum(v for _, v in points)
    sum_rn = sum(r * v for r, v in points)
    sum_r2 = sum(r * r for r, _ in points)
    numerator = n * sum_rn - sum_r * sum_n
    denominator = n * sum_r2 - sum_r * sum_r
    if denominator == 0:
        return math.nan
    return numerator / denominator