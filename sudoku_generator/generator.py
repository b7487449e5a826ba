"""
Grid generation: seed diagonal blocks with random permutations, then let
the backtracking solver fill in the rest.
"""

from enum import Enum
from typing import Callable, List, Optional, Sequence

import numpy as np

from .solver import solve

PermutationProvider = Callable[[List[int]], Sequence[int]]


class SizeClass(Enum):
    """Supported grid sizes as (side, block side, seeded diagonal blocks)."""

    SMALL = (4, 2, 1)
    STANDARD = (9, 3, 2)

    @property
    def size(self) -> int:
        return self.value[0]

    @property
    def block_size(self) -> int:
        return self.value[1]

    @property
    def seeded_blocks(self) -> int:
        # One diagonal block is always left for the solver.
        return self.value[2]

    @classmethod
    def from_name(cls, name: str) -> "SizeClass":
        aliases = {
            "small": cls.SMALL,
            "4": cls.SMALL,
            "4x4": cls.SMALL,
            "standard": cls.STANDARD,
            "9": cls.STANDARD,
            "9x9": cls.STANDARD,
        }
        key = str(name).strip().lower()
        if key not in aliases:
            raise ValueError(
                f"Unknown size class '{name}' (expected one of: {', '.join(aliases)})"
            )
        return aliases[key]


def random_permutation_provider(seed: Optional[int] = None) -> PermutationProvider:
    """
    Build a permutation provider backed by ``numpy.random.default_rng(seed)``.

    Two providers created with the same seed yield the same sequence of
    permutations.
    """
    rng = np.random.default_rng(seed)

    def permute(values: List[int]) -> List[int]:
        return [int(v) for v in rng.permutation(values)]

    return permute


def new_grid(size_class: SizeClass) -> np.ndarray:
    return np.zeros((size_class.size, size_class.size), dtype=int)


def seed_diagonal_blocks(
    grid: np.ndarray,
    size_class: SizeClass,
    permutation_provider: PermutationProvider,
) -> np.ndarray:
    """
    Fill the first ``size_class.seeded_blocks`` blocks on the main diagonal.

    Each block gets its own permutation of 1..N, written row-major. Diagonal
    blocks share no row, column or block, so no validation is needed here.
    """
    n = size_class.size
    b = size_class.block_size
    values = list(range(1, n + 1))

    for i in range(size_class.seeded_blocks):
        perm = list(permutation_provider(list(values)))
        if sorted(perm) != values:
            raise ValueError(f"Permutation provider returned {perm}, not a permutation of 1..{n}")
        origin = i * b
        grid[origin:origin + b, origin:origin + b] = np.array(perm).reshape(b, b)

    return grid


def seeded_mask(size_class: SizeClass) -> np.ndarray:
    """Boolean mask of the cells that ``seed_diagonal_blocks`` fills."""
    n = size_class.size
    b = size_class.block_size
    mask = np.zeros((n, n), dtype=bool)
    for i in range(size_class.seeded_blocks):
        origin = i * b
        mask[origin:origin + b, origin:origin + b] = True
    return mask


def generate(
    size_class: SizeClass,
    permutation_provider: Optional[PermutationProvider] = None,
) -> np.ndarray:
    """
    Generate a completed grid for ``size_class``.

    The grid is returned whatever the solver reports; with the diagonal
    seeding a completion always exists.
    """
    if permutation_provider is None:
        permutation_provider = random_permutation_provider()

    grid = new_grid(size_class)
    seed_diagonal_blocks(grid, size_class, permutation_provider)
    solve(grid)
    return grid
