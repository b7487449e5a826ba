"""
Plain backtracking solver for square Sudoku grids (4x4 and 9x9).
"""

import math

import numpy as np

from .validator import find_conflicts, is_valid


def find_empty(grid: np.ndarray):
    """Return (row, col) of the first empty cell in row-major order, or None."""
    positions = np.argwhere(grid == 0)
    if positions.size == 0:
        return None
    r, c = positions[0]
    return int(r), int(c)


def solve(grid: np.ndarray) -> bool:
    """
    In-place backtracking solver. Returns True if the grid was completed.

    On failure the cell this call tried to fill is left at 0, so the caller
    can move on to its next candidate.
    """
    empty = find_empty(grid)
    if empty is None:
        return True

    r, c = empty
    for val in range(1, grid.shape[0] + 1):
        grid[r, c] = val
        if is_valid(grid, r, c) and solve(grid):
            return True
        grid[r, c] = 0

    return False


def _check_grid(grid: np.ndarray) -> None:
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        raise ValueError(f"Grid must be square, got shape {grid.shape}")
    size = grid.shape[0]
    if size == 0 or math.isqrt(size) ** 2 != size:
        raise ValueError(f"Grid side must be a perfect square, got {size}")
    if grid.min() < 0 or grid.max() > size:
        raise ValueError(f"Grid values must be between 0 and {size}")


def solve_puzzle(grid: np.ndarray) -> tuple[np.ndarray | None, str]:
    """
    Return a solved copy of the grid, or (None, reason) if it has
    conflicting givens or no completion exists.
    """
    grid = np.asarray(grid)
    _check_grid(grid)

    ok, reason = find_conflicts(grid)
    if not ok:
        return None, reason

    working = grid.astype(int)
    if solve(working):
        return working, "Solved"
    return None, "No solution found"
