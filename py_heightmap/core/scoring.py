"""Reduce low points and basin sizes into the two puzzle scores."""

import math
from typing import Iterable, Tuple
import structlog

from .grid import Position

logger = structlog.get_logger()

# Number of largest basins multiplied together
LARGEST_BASIN_COUNT = 3


class InsufficientBasinsError(Exception):
    """Raised when fewer basins exist than the product score needs."""

    def __init__(self, available: int, required: int = LARGEST_BASIN_COUNT):
        self.available = available
        self.required = required
        super().__init__(
            f"Basin product needs {required} basins, only {available} available"
        )


def risk_score(low_points: Iterable[Tuple[Position, int]]) -> int:
    """Sum of height + 1 over all low points, 0 for none."""
    return sum(height + 1 for _, height in low_points)


def basin_product_score(basin_sizes: Iterable[int]) -> int:
    """
    Multiply the sizes of the largest basins.

    Args:
        basin_sizes: One size per low point, duplicates included

    Returns:
        Product of the LARGEST_BASIN_COUNT biggest sizes

    Raises:
        InsufficientBasinsError: If fewer than LARGEST_BASIN_COUNT sizes given
    """
    sizes = sorted(basin_sizes, reverse=True)
    if len(sizes) < LARGEST_BASIN_COUNT:
        raise InsufficientBasinsError(len(sizes))

    largest = sizes[:LARGEST_BASIN_COUNT]
    product = math.prod(largest)

    logger.debug("Basin product computed", largest=largest, product=product)
    return product
