"""
Constraint checks for square Sudoku grids.

Every unit check allocates a fresh presence array and scans the whole unit,
so a check never depends on what was scanned before it.
"""

import math

import numpy as np


def block_size(grid: np.ndarray) -> int:
    """Side length of a sub-block; only meaningful for perfect-square grids."""
    return math.isqrt(grid.shape[0])


def _new_presence(grid: np.ndarray) -> np.ndarray:
    return np.zeros(grid.shape[0], dtype=bool)


def is_field_valid(grid: np.ndarray, presence: np.ndarray, row: int, col: int) -> bool:
    """
    Mark the value at (row, col) as seen in ``presence``.

    Returns False if the value was already marked, in which case the scan
    that owns ``presence`` should stop. Empty cells (0) are always valid and
    leave ``presence`` untouched. Values outside 0..N raise IndexError.
    """
    val = int(grid[row, col])
    if val == 0:
        return True
    if val < 0:
        raise IndexError(f"Cell ({row}, {col}) holds negative value {val}")
    if presence[val - 1]:
        return False
    presence[val - 1] = True
    return True


def is_row_valid(grid: np.ndarray, row: int) -> bool:
    presence = _new_presence(grid)
    for c in range(grid.shape[1]):
        if not is_field_valid(grid, presence, row, c):
            return False
    return True


def is_col_valid(grid: np.ndarray, col: int) -> bool:
    presence = _new_presence(grid)
    for r in range(grid.shape[0]):
        if not is_field_valid(grid, presence, r, col):
            return False
    return True


def is_section_valid(grid: np.ndarray, row: int, col: int) -> bool:
    """Check the sub-block containing (row, col). Square blocks only (no 6x6)."""
    b = block_size(grid)
    r0 = (row // b) * b
    c0 = (col // b) * b
    presence = _new_presence(grid)
    for r in range(r0, r0 + b):
        for c in range(c0, c0 + b):
            if not is_field_valid(grid, presence, r, c):
                return False
    return True


def is_valid(grid: np.ndarray, row: int, col: int) -> bool:
    """True if the row, column and block through (row, col) hold no duplicates."""
    return (
        is_row_valid(grid, row)
        and is_col_valid(grid, col)
        and is_section_valid(grid, row, col)
    )


def find_conflicts(grid: np.ndarray) -> tuple[bool, str]:
    """Check every unit of the grid; report the first one with a duplicate."""
    size = grid.shape[0]
    for i in range(size):
        if not is_row_valid(grid, i):
            return False, f"Row {i+1} has a duplicate value"
        if not is_col_valid(grid, i):
            return False, f"Column {i+1} has a duplicate value"

    b = block_size(grid)
    for br in range(b):
        for bc in range(b):
            if not is_section_valid(grid, br * b, bc * b):
                return False, f"{b}x{b} block ({br+1},{bc+1}) has a duplicate value"

    return True, ""


def is_complete(grid: np.ndarray) -> bool:
    """A grid is complete when it has no empty cells and no conflicts."""
    if np.count_nonzero(grid == 0):
        return False
    ok, _ = find_conflicts(grid)
    return ok
