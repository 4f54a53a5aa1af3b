"""
Tests for bricks, the brick grid, and derived brick geometry.
"""

from neonbreak.config import BrickLayout
from neonbreak.game.entities.brick import (
    Brick, BrickGrid, BrickStatus, brick_rect, contains_point, create_bricks,
)


class TestBrick:
    """Single brick lifecycle."""

    def test_starts_active(self):
        """Test that a new brick is active."""
        brick = Brick(2, 1)
        assert brick.status == BrickStatus.ACTIVE
        assert brick.is_active

    def test_destroy_once(self):
        """Test that destroying an active brick succeeds."""
        brick = Brick(0, 0)
        assert brick.destroy() is True
        assert brick.status == BrickStatus.DESTROYED

    def test_destroy_twice_has_no_effect(self):
        """Test that a brick can only be destroyed once."""
        brick = Brick(0, 0)
        brick.destroy()
        assert brick.destroy() is False
        assert brick.status == BrickStatus.DESTROYED


class TestBrickGeometry:
    """brick_rect is a pure function of (column, row, layout)."""

    def test_first_cell(self):
        """Test that cell (0, 0) sits at the layout offsets."""
        assert brick_rect(0, 0, BrickLayout()) == (25, 40, 70, 20)

    def test_cell_spacing(self):
        """Test that cells step by brick size plus padding."""
        assert brick_rect(6, 2, BrickLayout()) == (6 * 80 + 25, 2 * 30 + 40, 70, 20)

    def test_same_inputs_same_rect(self):
        """Test that brick_rect depends only on its inputs."""
        layout = BrickLayout()
        assert brick_rect(3, 4, layout) == brick_rect(3, 4, layout)

    def test_contains_point_is_open_interval(self):
        """Test that points on a brick edge are outside it."""
        rect = (25, 40, 70, 20)
        assert contains_point(rect, 60, 50)
        assert not contains_point(rect, 25, 50)
        assert not contains_point(rect, 95, 50)
        assert not contains_point(rect, 60, 40)
        assert not contains_point(rect, 60, 60)


class TestBrickGrid:
    """Grid allocation and clear detection."""

    def test_create_full_grid(self):
        """Test that create_bricks fills every cell with an active brick."""
        grid = create_bricks(7, 3)
        assert isinstance(grid, BrickGrid)
        assert (grid.columns, grid.rows) == (7, 3)
        assert len(grid) == 21
        assert grid.active_count == 21

    def test_indexed_by_column_then_row(self):
        """Test that grid[col][row] returns that cell."""
        grid = create_bricks(7, 3)
        brick = grid[4][2]
        assert (brick.column, brick.row) == (4, 2)

    def test_iterates_column_major(self):
        """Test that iteration walks each column top to bottom."""
        cells = [(b.column, b.row) for b in create_bricks(2, 2)]
        assert cells == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_all_destroyed(self):
        """Test that the grid is cleared once every brick is destroyed."""
        grid = create_bricks(2, 2)
        assert not grid.all_destroyed()
        for brick in grid:
            brick.destroy()
        assert grid.all_destroyed()
        assert grid.active_count == 0

    def test_one_left_is_not_cleared(self):
        """Test that one active brick keeps the grid uncleared."""
        grid = create_bricks(7, 3)
        for brick in list(grid)[:-1]:
            brick.destroy()
        assert not grid.all_destroyed()
