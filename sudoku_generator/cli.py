"""
Sudoku Grid Generator - Command Line Module
"""

import argparse
import os
import sys

import numpy as np

from .generator import SizeClass, generate, random_permutation_provider, seeded_mask
from .rendering import format_board, save_grid_image
from .validator import find_conflicts, is_complete


class GridGenerator:
    """
    Runs one generation request end to end: generate, check, print, and
    optionally save the grid as an image.
    """

    def __init__(self, cell_size=50, save_images=True, seed=None):
        """
        Args:
            cell_size (int): Cell size in pixels for saved images (default: 50)
            save_images (bool): Whether to write a PNG per generated grid
            seed (int | None): Seed for the permutation provider
        """
        self.cell_size = cell_size
        self.save_images = save_images
        self.permutation_provider = random_permutation_provider(seed)

    def generate_grid(self, size_class, output_dir='output', name='grid'):
        """
        Generate and report a single grid.

        Returns:
            dict: the grid, whether it is complete, the conflict message and
                  the image path (None when images are not saved)
        """
        n = size_class.size
        print(f"\n{'='*40}")
        print(f"Generating {n}x{n} grid: {name}")
        print(f"{'='*40}")

        print(f"\n[1/2] Seeding {size_class.seeded_blocks} diagonal block(s) and solving...")
        grid = generate(size_class, self.permutation_provider)
        print(format_board(grid))

        print("\n[2/2] Checking grid...")
        complete = is_complete(grid)
        ok, reason = find_conflicts(grid)
        if complete:
            print("      ✓ Grid is complete and valid")
        else:
            empty = int(np.count_nonzero(grid == 0))
            print(f"      ✗ Grid is incomplete ({empty} empty cells)")
            if not ok:
                print(f"      ✗ {reason}")

        image_path = None
        if self.save_images:
            image_path = os.path.join(output_dir, f"{name}_{n}x{n}.png")
            save_grid_image(grid, image_path, cell_size=self.cell_size,
                            seeded=seeded_mask(size_class))
            print(f"      Saved image to {image_path}")

        return {
            'grid': grid,
            'complete': complete,
            'reason': reason,
            'image_path': image_path,
        }


def main(argv=None):
    """
    Main entry point for the grid generator.

    Handles command-line arguments and generates the requested grids.
    """
    parser = argparse.ArgumentParser(
        description='Sudoku Grid Generator - seeded backtracking',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Generate one standard 9x9 grid:
    python -m sudoku_generator

  Generate three 4x4 grids with a fixed seed:
    python -m sudoku_generator --size small --count 3 --seed 7

  Print only, no images:
    python -m sudoku_generator --no-save
        """
    )

    parser.add_argument('--size', '-s', default='standard',
                        help='Grid size: small/4 or standard/9 (default: standard)')
    parser.add_argument('--count', '-n', type=int, default=1,
                        help='Number of grids to generate (default: 1)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible grids')
    parser.add_argument('--output', '-o', default='output',
                        help='Output directory for images (default: output)')
    parser.add_argument('--cell-size', type=int, default=50,
                        help='Cell size in pixels for saved images (default: 50)')
    parser.add_argument('--no-save', action='store_true',
                        help='Do not save grid images')

    args = parser.parse_args(argv)

    try:
        size_class = SizeClass.from_name(args.size)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.count < 1:
        print(f"Error: --count must be at least 1, got {args.count}")
        sys.exit(1)

    generator = GridGenerator(
        cell_size=args.cell_size,
        save_images=not args.no_save,
        seed=args.seed,
    )

    try:
        results = [
            generator.generate_grid(size_class, args.output, name=f"grid_{i:03d}")
            for i in range(1, args.count + 1)
        ]
    except Exception as e:
        print(f"\nError during generation: {str(e)}")
        import traceback
        traceback.print_exc()
        sys.exit(1)

    incomplete = [r for r in results if not r['complete']]
    if incomplete:
        print(f"\n{len(incomplete)}/{len(results)} grids could not be completed.")
        sys.exit(1)

    return results


if __name__ == '__main__':
    main()
