"""Immutable height grid with bounds-checked access."""

import numpy as np
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union
from dataclasses import dataclass

# Height that no basin may cross, also the highest stored height
BARRIER_HEIGHT = 9
MIN_HEIGHT = 0


class Position(NamedTuple):
    """Grid coordinate, x is the column and y the row."""
    x: int
    y: int


@dataclass(frozen=True, eq=False)
class HeightGrid:
    """Rectangular table of heights backed by a read-only numpy array.

    The array is indexed ``heights[y, x]`` and has shape ``(height, width)``.
    A private read-only copy is kept so callers can't mutate the grid
    through the array they passed in.
    """
    heights: np.ndarray

    def __post_init__(self):
        heights = np.asarray(self.heights)
        if heights.ndim != 2:
            raise ValueError(f"Height grid must be 2D, got {heights.ndim}D")
        if heights.shape[0] == 0 or heights.shape[1] == 0:
            raise ValueError(f"Height grid must not be empty, got shape {heights.shape}")
        if not np.issubdtype(heights.dtype, np.integer):
            raise ValueError(f"Heights must be integers, got dtype {heights.dtype}")
        if heights.min() < MIN_HEIGHT or heights.max() > BARRIER_HEIGHT:
            raise ValueError(
                f"Heights must be within [{MIN_HEIGHT}, {BARRIER_HEIGHT}], "
                f"got [{heights.min()}, {heights.max()}]"
            )

        # astype always copies, so the caller's array stays detached
        heights = heights.astype(np.uint8)
        heights.flags.writeable = False
        object.__setattr__(self, "heights", heights)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "HeightGrid":
        """Build a grid from equal-length rows of integer heights."""
        return cls(np.array(rows))

    @property
    def width(self) -> int:
        return int(self.heights.shape[1])

    @property
    def height(self) -> int:
        return int(self.heights.shape[0])

    @property
    def cell_count(self) -> int:
        return int(self.heights.size)

    def __contains__(self, pos: Union[Position, Tuple[int, int]]) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def height_at(self, pos: Union[Position, Tuple[int, int]]) -> Optional[int]:
        """
        Get the height stored at a position.

        Positions outside the grid are a normal outcome near the edges, so
        they give None instead of raising. Negative coordinates are checked
        explicitly since numpy would wrap them around.

        Args:
            pos: (x, y) position to look up

        Returns:
            Height as a plain int, or None if pos is outside the grid
        """
        if pos not in self:
            return None
        x, y = pos
        return int(self.heights[y, x])

    def all_positions(self) -> List[Tuple[Position, int]]:
        """Every cell with its height, once each, in row-major order."""
        return [
            (Position(x, y), int(value))
            for y, row in enumerate(self.heights.tolist())
            for x, value in enumerate(row)
        ]

    def neighbors_with_height(self, pos: Union[Position, Tuple[int, int]]) -> List[Tuple[Position, int]]:
        """
        Get the 4-connected neighbors of a position that lie inside the grid.

        Order is always left, right, up, down; edge cells simply have fewer
        entries.

        Args:
            pos: (x, y) position whose neighbors are wanted

        Returns:
            List of (Position, height) pairs, at most 4 long
        """
        x, y = pos
        candidates = [
            Position(x - 1, y),  # left
            Position(x + 1, y),  # right
            Position(x, y - 1),  # up
            Position(x, y + 1),  # down
        ]
        neighbors = []
        for candidate in candidates:
            height = self.height_at(candidate)
            if height is not None:
                neighbors.append((candidate, height))
        return neighbors
