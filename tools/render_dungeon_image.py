#!/usr/bin/env python3
"""
Render a dungeon to an image file for visual inspection.

Useful for:
- Tuning leaf, room and padding sizes
- Comparing connection strategies
- Debugging dungeon generation

Usage:
    uv run tools/render_dungeon_image.py                    # Default: 80x50, random seed
    uv run tools/render_dungeon_image.py --seed 42          # Reproducible dungeon
    uv run tools/render_dungeon_image.py --strategy siblings
    uv run tools/render_dungeon_image.py --output my.png    # Custom output path
"""

import argparse
import sys
from pathlib import Path

import cv2

# Add project root to path so the package imports without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bsp_dungeon.config import GenerationConfig
from bsp_dungeon.connection import ConnectionStrategy
from bsp_dungeon.generator import generate_dungeon
from bsp_dungeon.render import outline_rect, render_image

ROOM_OUTLINE_COLOR = (255, 255, 255)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Render a dungeon to an image file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--width", type=int, default=80, help="Grid width in cells (default: 80)")
    parser.add_argument("--height", type=int, default=50, help="Grid height in cells (default: 50)")
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducible dungeons",
    )
    parser.add_argument(
        "--min-leaf-size",
        type=int,
        default=6,
        help="Smallest partition extent (default: 6)",
    )
    parser.add_argument(
        "--strategy",
        choices=[s.name.lower() for s in ConnectionStrategy],
        default="sequential",
        help="How rooms are linked by corridors (default: sequential)",
    )
    parser.add_argument(
        "--tile-size",
        type=int,
        default=8,
        help="Pixel size of one cell (default: 8)",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default="dungeon_render.png",
        help="Output image path (default: dungeon_render.png)",
    )
    parser.add_argument(
        "--show-grid",
        action="store_true",
        help="Overlay a cell grid on the image",
    )
    parser.add_argument(
        "--show-rooms",
        action="store_true",
        help="Outline every placed room",
    )

    args = parser.parse_args()

    config = GenerationConfig(
        min_leaf_size=args.min_leaf_size,
        connection_strategy=ConnectionStrategy[args.strategy.upper()],
    )

    print(f"Generating {args.width}x{args.height} dungeon (seed {args.seed})...")
    grid, result = generate_dungeon(args.width, args.height, seed=args.seed, config=config)
    print(f"Leaves: {result.leaf_count}, rooms: {result.rooms_placed}, corridors: {result.corridor_count}")

    image = render_image(
        grid,
        tile_size=args.tile_size,
        show_grid=args.show_grid,
        centers=result.centers,
    )

    if args.show_rooms:
        for room in result.rooms:
            outline_rect(image, room, args.tile_size, ROOM_OUTLINE_COLOR)

    output_path = Path(args.output)
    cv2.imwrite(str(output_path), image)
    print(f"Saved to: {output_path.absolute()}")

    print(f"\nRooms ({len(result.rooms)}):")
    for index, room in enumerate(result.rooms):
        print(f"  Room {index}: {room}, center ({room.center.x}, {room.center.y})")


if __name__ == "__main__":
    main()
