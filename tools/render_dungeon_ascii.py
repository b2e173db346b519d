#!/usr/bin/env python3
"""
Render a generated dungeon as ASCII art for debugging.

Usage:
    uv run tools/render_dungeon_ascii.py [--width N] [--height N] [--seed S]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path so the package imports without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

from bsp_dungeon.config import GenerationConfig
from bsp_dungeon.connection import ConnectionStrategy
from bsp_dungeon.generator import generate_dungeon
from bsp_dungeon.render import render_ascii


def main():
    parser = argparse.ArgumentParser(description="Render dungeon as ASCII art")
    parser.add_argument("--width", type=int, default=60, help="Grid width in cells")
    parser.add_argument("--height", type=int, default=30, help="Grid height in cells")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible generation")
    parser.add_argument("--min-leaf-size", type=int, default=6, help="Smallest partition extent")
    parser.add_argument(
        "--strategy",
        choices=[s.name.lower() for s in ConnectionStrategy],
        default="sequential",
        help="How rooms are linked by corridors",
    )
    parser.add_argument("--debug", action="store_true", help="Print every generation step")
    args = parser.parse_args()

    config = GenerationConfig(
        min_leaf_size=args.min_leaf_size,
        connection_strategy=ConnectionStrategy[args.strategy.upper()],
        debug=args.debug,
    )
    grid, result = generate_dungeon(args.width, args.height, seed=args.seed, config=config)

    print(render_ascii(grid))

    # Print some debug info
    print(f"\n--- Debug Info ---")
    print(f"Map size: {grid.width}x{grid.height} cells")
    print(f"Leaves: {result.leaf_count}")
    print(f"Rooms placed: {result.rooms_placed}")
    print(f"Corridors: {result.corridor_count}")


if __name__ == "__main__":
    main()
