"""
Basin exploration.

A basin is the maximal 4-connected region of cells below the barrier height
that contains a seed cell. Basins are recomputed per query.

Two low points sitting in the same connected region each flood the whole
region, so that region is reported once per low point. Sizes are not
deduplicated across seeds.
"""

from typing import Iterable, List, Optional, Set, Tuple, Union
import structlog

from .grid import BARRIER_HEIGHT, HeightGrid, Position
from .low_points import low_points

logger = structlog.get_logger()

Seed = Union[Position, Tuple[Position, int]]


def basin_from(grid: HeightGrid, seed: Position) -> Set[Position]:
    """
    Flood-fill the basin containing a seed position.

    Uses an explicit stack as the frontier (popping from the end like a DFS),
    so the basin size is only bounded by memory, not by the recursion limit.

    Args:
        grid: Height grid to explore
        seed: In-grid starting position

    Returns:
        Set of positions in the basin; empty if the seed sits on the barrier

    Raises:
        ValueError: If seed is outside the grid
    """
    seed = Position(*seed)
    seed_height = grid.height_at(seed)
    if seed_height is None:
        raise ValueError(f"Basin seed {seed} is outside the {grid.width}x{grid.height} grid")

    # A barrier cell belongs to no basin
    if seed_height >= BARRIER_HEIGHT:
        return set()

    visited = {seed}
    frontier = [seed]

    while frontier:
        pos = frontier.pop()
        for neighbor, height in grid.neighbors_with_height(pos):
            if height < BARRIER_HEIGHT and neighbor not in visited:
                visited.add(neighbor)
                frontier.append(neighbor)

    return visited


def _seed_position(seed: Seed) -> Position:
    # Accept both bare positions and (Position, height) low point pairs
    if isinstance(seed, tuple) and len(seed) == 2 and isinstance(seed[0], tuple):
        return Position(*seed[0])
    return Position(*seed)


def basin_sizes(grid: HeightGrid, seeds: Optional[Iterable[Seed]] = None) -> List[int]:
    """
    Get one basin size per seed, in seed order.

    Args:
        grid: Height grid to explore
        seeds: Positions or (Position, height) pairs; defaults to the grid's
            low points

    Returns:
        List of basin sizes
    """
    if seeds is None:
        seeds = low_points(grid)

    sizes = [len(basin_from(grid, _seed_position(seed))) for seed in seeds]

    logger.info("Basins explored", basins=len(sizes), largest=max(sizes, default=0))
    return sizes
