"""
Text and image output for generated grids.
"""

import os
from typing import Optional

import cv2
import numpy as np

from .validator import block_size

GIVEN_COLOR = (0, 0, 0)
SOLVED_COLOR = (0, 140, 0)
LINE_COLOR = (60, 60, 60)


def format_board(grid: np.ndarray) -> str:
    """Render the grid as a human-friendly string."""
    b = block_size(grid)
    size = grid.shape[0]
    lines = []
    for r, row in enumerate(grid):
        parts = []
        for c, val in enumerate(row):
            parts.append(str(val) if val != 0 else ".")
            if c % b == b - 1 and c != size - 1:
                parts.append("|")
        line = " ".join(parts)
        lines.append(line)
        if r % b == b - 1 and r != size - 1:
            lines.append("-" * len(line))
    return "\n".join(lines)


def render_grid(grid: np.ndarray, cell_size: int = 50,
                seeded: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Draw the grid on a white BGR canvas.

    If ``seeded`` is given, its non-zero cells are drawn in black and every
    other digit in green, so seeded blocks stand out from solver output.
    """
    size = grid.shape[0]
    b = block_size(grid)
    side = size * cell_size
    canvas = np.full((side + 1, side + 1, 3), 255, dtype=np.uint8)
    font = cv2.FONT_HERSHEY_SIMPLEX
    font_scale = cell_size / 55

    for i in range(size + 1):
        thickness = 3 if i % b == 0 else 1
        pos = i * cell_size
        cv2.line(canvas, (0, pos), (side, pos), LINE_COLOR, thickness)
        cv2.line(canvas, (pos, 0), (pos, side), LINE_COLOR, thickness)

    for r in range(size):
        for c in range(size):
            val = int(grid[r, c])
            if val == 0:
                continue
            if seeded is None or seeded[r, c] != 0:
                color = GIVEN_COLOR
            else:
                color = SOLVED_COLOR
            text = str(val)
            text_size, _ = cv2.getTextSize(text, font, font_scale, 2)
            x = c * cell_size + (cell_size - text_size[0]) // 2
            y = r * cell_size + (cell_size + text_size[1]) // 2
            cv2.putText(canvas, text, (x, y), font, font_scale, color, 2, cv2.LINE_AA)

    return canvas


def save_grid_image(grid: np.ndarray, path: str, cell_size: int = 50,
                    seeded: Optional[np.ndarray] = None) -> str:
    """Render the grid and write it to ``path``; returns the path written."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    image = render_grid(grid, cell_size=cell_size, seeded=seeded)
    try:
        written = cv2.imwrite(path, image)
    except cv2.error as e:
        raise ValueError(f"Could not write image to {path}") from e
    if not written:
        raise ValueError(f"Could not write image to {path}")
    return path
