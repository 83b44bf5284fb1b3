"""Shared fixtures for heightmap tests."""

import pytest

from py_heightmap.io import parse_heightmap

EXAMPLE_INPUT = """
2199943210
3987894921
9856789892
8767896789
9899965678
"""


@pytest.fixture
def example_input():
    """Reference 10x5 heightmap text."""
    return EXAMPLE_INPUT


@pytest.fixture
def example_grid():
    """Reference 10x5 heightmap."""
    return parse_heightmap(EXAMPLE_INPUT)
