#!/usr/bin/env python3
"""
Simple demo script showing low point and basin analysis.
"""

import numpy as np
from py_heightmap.core import HeightGrid, low_points, risk_score, basin_from, basin_sizes, basin_product_score


def main():
    """Demonstrate low point and basin analysis on a random heightmap."""
    print("Py-Heightmap Basin Demo")
    print("=" * 40)

    width, height = 40, 20
    rng = np.random.default_rng(1234)
    grid = HeightGrid(rng.integers(0, 10, size=(height, width), dtype=np.uint8))
    print(f"\nGenerated {grid.width}x{grid.height} heightmap ({grid.cell_count} cells)")

    points = low_points(grid)
    print(f"Low points: {len(points)}")
    print(f"Risk score: {risk_score(points)}")

    sizes = basin_sizes(grid, points)
    print(f"Largest basins: {sorted(sizes, reverse=True)[:3]}")
    print(f"Basin product: {basin_product_score(sizes)}")

    # Draw the largest basin
    seed = points[int(np.argmax(sizes))][0]
    basin = basin_from(grid, seed)
    print(f"\nLargest basin from {tuple(seed)}:")
    for y in range(grid.height):
        print("".join(
            "#" if (x, y) == tuple(seed) else "o" if (x, y) in basin else str(grid.height_at((x, y)))
            for x in range(grid.width)
        ))


if __name__ == "__main__":
    main()
