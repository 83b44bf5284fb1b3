"""Tests for the height grid model."""

import pytest
import numpy as np
from py_heightmap.core.grid import HeightGrid, Position


class TestConstruction:
    """Test grid construction and immutability."""

    def test_dimensions(self, example_grid):
        """Width and height follow the row layout."""
        assert example_grid.width == 10
        assert example_grid.height == 5
        assert example_grid.cell_count == 50

    def test_from_rows(self):
        grid = HeightGrid.from_rows([[1, 2, 3], [4, 5, 6]])
        assert grid.width == 3
        assert grid.height == 2
        assert grid.height_at(Position(2, 1)) == 6

    def test_heights_are_read_only(self, example_grid):
        """The backing array can't be written through."""
        with pytest.raises(ValueError):
            example_grid.heights[0, 0] = 5

    def test_source_array_is_copied(self):
        """Mutating the caller's array leaves the grid unchanged."""
        source = np.array([[1, 2], [3, 4]], dtype=np.uint8)
        grid = HeightGrid(source)
        source[0, 0] = 9
        assert grid.height_at(Position(0, 0)) == 1

    def test_frozen(self, example_grid):
        with pytest.raises(AttributeError):
            example_grid.heights = np.zeros((2, 2))

    @pytest.mark.parametrize("heights", [
        np.zeros((0, 3), dtype=np.uint8),
        np.zeros((3, 0), dtype=np.uint8),
        np.zeros(4, dtype=np.uint8),
    ])
    def test_rejects_non_rectangular_shapes(self, heights):
        with pytest.raises(ValueError):
            HeightGrid(heights)

    @pytest.mark.parametrize("rows", [
        [[2, 10, 2]],
        [[200, 100, 200]],
        [[1, -1], [1, 1]],
        [[0, 70000], [1, 1]],
    ])
    def test_rejects_heights_outside_digit_range(self, rows):
        """Only 0-9 heights are stored, so nothing can wrap or pose as a low point."""
        with pytest.raises(ValueError, match=r"within \[0, 9\]"):
            HeightGrid.from_rows(rows)

    def test_rejects_non_integer_heights(self):
        with pytest.raises(ValueError, match="integers"):
            HeightGrid(np.array([[1.5, 2.0]]))

    def test_wide_integer_input_stored_as_uint8(self):
        grid = HeightGrid(np.array([[0, 9], [4, 5]], dtype=np.int64))
        assert grid.heights.dtype == np.uint8
        assert grid.height_at(Position(1, 0)) == 9


class TestHeightAt:
    """Test bounds-checked access."""

    def test_corners(self, example_grid):
        assert example_grid.height_at(Position(0, 0)) == 2
        assert example_grid.height_at(Position(9, 0)) == 0
        assert example_grid.height_at(Position(0, 4)) == 9
        assert example_grid.height_at(Position(9, 4)) == 8

    def test_returns_plain_int(self, example_grid):
        assert type(example_grid.height_at(Position(1, 1))) is int

    @pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (10, 0), (0, 5), (-1, -1), (100, 100)])
    def test_out_of_bounds_is_none(self, example_grid, pos):
        """Out-of-range lookups give None, negative ones don't wrap around."""
        assert example_grid.height_at(Position(*pos)) is None

    def test_plain_tuple_positions(self, example_grid):
        assert example_grid.height_at((1, 0)) == 1
        assert (1, 0) in example_grid
        assert (10, 0) not in example_grid


class TestAllPositions:
    """Test full-grid enumeration."""

    def test_every_cell_once(self, example_grid):
        cells = example_grid.all_positions()
        assert len(cells) == example_grid.cell_count
        assert len({pos for pos, _ in cells}) == example_grid.cell_count

    def test_row_major_order(self):
        grid = HeightGrid.from_rows([[1, 2], [3, 4]])
        assert grid.all_positions() == [
            (Position(0, 0), 1),
            (Position(1, 0), 2),
            (Position(0, 1), 3),
            (Position(1, 1), 4),
        ]

    def test_restartable(self, example_grid):
        assert example_grid.all_positions() == example_grid.all_positions()


class TestNeighbors:
    """Test 4-neighbor enumeration."""

    def test_interior_cell_order(self, example_grid):
        """Interior cells have all four neighbors in left, right, up, down order."""
        neighbors = example_grid.neighbors_with_height(Position(2, 2))
        assert neighbors == [
            (Position(1, 2), 8),
            (Position(3, 2), 6),
            (Position(2, 1), 8),
            (Position(2, 3), 6),
        ]

    def test_corner_cell(self, example_grid):
        neighbors = example_grid.neighbors_with_height(Position(0, 0))
        assert neighbors == [(Position(1, 0), 1), (Position(0, 1), 3)]

    def test_edge_cell(self, example_grid):
        neighbors = example_grid.neighbors_with_height(Position(5, 4))
        assert [pos for pos, _ in neighbors] == [Position(4, 4), Position(6, 4), Position(5, 3)]

    def test_single_cell_has_no_neighbors(self):
        grid = HeightGrid.from_rows([[5]])
        assert grid.neighbors_with_height(Position(0, 0)) == []
