"""
Heightmap input parsing.
"""

from .parser import MalformedGridError, load_heightmap, parse_heightmap

__all__ = ['MalformedGridError', 'load_heightmap', 'parse_heightmap']
