"""
Low point detection.

A low point is a cell strictly lower than every one of its existing
4-neighbors. Edge and corner cells are compared against fewer neighbors, and
the single cell of a 1x1 grid is trivially a low point.
"""

import numpy as np
from typing import List, Tuple
import structlog

from .grid import HeightGrid, Position

logger = structlog.get_logger()

# Padding value, higher than any stored height so it never blocks a low point
_SENTINEL = np.iinfo(np.int16).max


def is_low_point(grid: HeightGrid, pos: Position) -> bool:
    """Check a single cell against its in-grid neighbors."""
    current = grid.height_at(pos)
    if current is None:
        return False
    return all(height > current for _, height in grid.neighbors_with_height(pos))


def low_points(grid: HeightGrid) -> List[Tuple[Position, int]]:
    """
    Find every low point of the grid.

    Single vectorized pass: the grid is padded by one cell of sentinel on
    every side, then each cell is compared with its four shifted neighbors.
    Same result as calling is_low_point() on every cell.

    Args:
        grid: Height grid to scan

    Returns:
        List of (Position, height) pairs in row-major order
    """
    heights = grid.heights.astype(np.int16)
    padded = np.pad(heights, 1, mode="constant", constant_values=_SENTINEL)

    center = padded[1:-1, 1:-1]
    mask = (
        (center < padded[1:-1, :-2])    # left
        & (center < padded[1:-1, 2:])   # right
        & (center < padded[:-2, 1:-1])  # up
        & (center < padded[2:, 1:-1])   # down
    )

    # argwhere yields (row, col) pairs already sorted row-major
    points = [
        (Position(int(x), int(y)), int(heights[y, x]))
        for y, x in np.argwhere(mask)
    ]

    logger.debug("Low points detected",
                 width=grid.width, height=grid.height, low_points=len(points))
    return points
