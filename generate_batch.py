#!/usr/bin/env python3
"""
Generate a batch of 4x4 and 9x9 grids and save them as images.

Usage:
    python generate_batch.py
    python generate_batch.py --count 20 --seed 3 --output batch/
"""

import argparse
import sys
import os

# Add package root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sudoku_generator.cli import GridGenerator
from sudoku_generator.generator import SizeClass


def main():
    """Generate --count grids of every size class."""
    parser = argparse.ArgumentParser(description="Generate a batch of Sudoku grids.")
    parser.add_argument("--count", "-n", type=int, default=10, help="Grids per size class.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument("--output", "-o", default="output", help="Output directory.")
    args = parser.parse_args()

    generator = GridGenerator(cell_size=50, save_images=True, seed=args.seed)
    total = args.count * len(SizeClass)

    print(f"Generating {total} grids")
    print("=" * 60)

    results = {
        'complete': [],
        'incomplete': [],
        'error': []
    }

    done = 0
    for size_class in SizeClass:
        for i in range(1, args.count + 1):
            done += 1
            name = f"{size_class.name.lower()}_{i:03d}"
            print(f"\n[{done}/{total}] {name}...")

            try:
                result = generator.generate_grid(size_class, args.output, name=name)
                if result['complete']:
                    results['complete'].append(name)
                else:
                    results['incomplete'].append(name)
            except Exception as e:
                print(f"Error generating {name}: {e}")
                results['error'].append(name)

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"✅ Complete:   {len(results['complete'])}/{total}")
    print(f"❌ Incomplete: {len(results['incomplete'])}/{total}")
    print(f"⚠️  Errors:     {len(results['error'])}/{total}")

    if results['incomplete']:
        print(f"\nIncomplete grids: {', '.join(results['incomplete'])}")

    print(f"\nGrid images saved to: {args.output}/")


if __name__ == '__main__':
    main()
