"""
Smoke basin puzzle (day 09).

Part 1 sums the risk level of every low point. Part 2 floods the basin of
every low point and multiplies the three largest sizes.
"""

from typing import Optional
import structlog

from ..core import basin_product_score, basin_sizes, low_points, risk_score
from ..io import parse_heightmap
from .base import PartResult

logger = structlog.get_logger()


def solve_part1(raw_input: str, expected: Optional[int] = None) -> PartResult:
    """Risk score of the heightmap's low points."""
    grid = parse_heightmap(raw_input)
    points = low_points(grid)
    score = risk_score(points)

    logger.info("Part 1 solved", low_points=len(points), risk_score=score)
    return PartResult(score, expected)


def solve_part2(raw_input: str, expected: Optional[int] = None) -> PartResult:
    """
    Product of the three largest basin sizes.

    Each low point seeds its own basin, so a region shared by two low points
    is counted twice. InsufficientBasinsError propagates when the grid has
    fewer than three low points.
    """
    grid = parse_heightmap(raw_input)
    sizes = basin_sizes(grid, low_points(grid))
    product = basin_product_score(sizes)

    logger.info("Part 2 solved", basins=len(sizes), product=product)
    return PartResult(product, expected)
