"""
Entry point for running the sudoku_generator module as a package.

Usage:
    python -m sudoku_generator --size small --count 3
"""

from .cli import main

if __name__ == '__main__':
    main()
