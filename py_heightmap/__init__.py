"""
Heightmap low point and basin analysis.

Finds local minima in a grid of 0-9 heights, floods the basins around them
and reduces both into the risk score and the basin product score.
"""

__version__ = "0.1.0"
