"""
Core heightmap analysis functionality.
"""

from .grid import BARRIER_HEIGHT, HeightGrid, Position
from .low_points import is_low_point, low_points
from .basins import basin_from, basin_sizes
from .scoring import LARGEST_BASIN_COUNT, InsufficientBasinsError, basin_product_score, risk_score

__all__ = ['BARRIER_HEIGHT', 'HeightGrid', 'Position',
           'is_low_point', 'low_points',
           'basin_from', 'basin_sizes',
           'LARGEST_BASIN_COUNT', 'InsufficientBasinsError', 'basin_product_score', 'risk_score']
