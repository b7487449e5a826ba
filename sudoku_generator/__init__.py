"""
Sudoku Grid Generator

This package contains modules for:
- Row, column and block constraint checks
- Backtracking search over partially filled grids
- Diagonal-seeded generation of 4x4 and 9x9 grids
- Text and image rendering of generated grids
"""

from .generator import SizeClass, generate

__version__ = "1.0.0"

__all__ = ["SizeClass", "generate"]
