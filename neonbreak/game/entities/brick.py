"""Brick entity and the brick grid.

A brick only knows its grid cell and whether it is still standing.
Its pixel rectangle is derived from (column, row) and the BrickLayout
by brick_rect(), so collision and rendering always agree.
"""

from enum import Enum
from typing import TYPE_CHECKING, Iterator, List, Tuple

if TYPE_CHECKING:
    from ...config import BrickLayout


class BrickStatus(Enum):
    """Brick lifecycle states."""

    ACTIVE = "active"
    DESTROYED = "destroyed"


class Brick:
    """A single brick in the grid."""

    def __init__(self, column: int, row: int):
        self._column = column
        self._row = row
        self._status = BrickStatus.ACTIVE

    @property
    def column(self) -> int:
        return self._column

    @property
    def row(self) -> int:
        return self._row

    @property
    def status(self) -> BrickStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        """Check if brick is still standing."""
        return self._status == BrickStatus.ACTIVE

    def destroy(self) -> bool:
        """Mark brick destroyed.

        Returns:
            True if the brick was active; False if it was already destroyed
        """
        if not self.is_active:
            return False
        self._status = BrickStatus.DESTROYED
        return True

    def __repr__(self) -> str:
        return f"Brick(col={self._column}, row={self._row}, {self._status.value})"


def brick_rect(column: int, row: int, layout: 'BrickLayout') -> Tuple[float, float, float, float]:
    """Pixel rectangle (x, y, width, height) of a grid cell."""
    x = column * (layout.width + layout.padding) + layout.offset_left
    y = row * (layout.height + layout.padding) + layout.offset_top
    return (x, y, layout.width, layout.height)


def contains_point(rect: Tuple[float, float, float, float], px: float, py: float) -> bool:
    """True if the point lies strictly inside the rectangle (edges excluded)."""
    x, y, width, height = rect
    return x < px < x + width and y < py < y + height


class BrickGrid:
    """Grid of bricks indexed [column][row]."""

    def __init__(self, columns: int, rows: int):
        """Create a full grid of active bricks.

        Args:
            columns: Number of columns
            rows: Number of rows
        """
        self._columns = columns
        self._rows = rows
        self._cells: List[List[Brick]] = [
            [Brick(c, r) for r in range(rows)]
            for c in range(columns)
        ]

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        return self._rows

    def __getitem__(self, column: int) -> List[Brick]:
        return self._cells[column]

    def __iter__(self) -> Iterator[Brick]:
        """Iterate column by column, top row first."""
        for column in self._cells:
            yield from column

    def __len__(self) -> int:
        return self._columns * self._rows

    @property
    def active_count(self) -> int:
        """Number of bricks still standing."""
        return sum(1 for brick in self if brick.is_active)

    def all_destroyed(self) -> bool:
        """True iff no brick in the grid is active."""
        return all(not brick.is_active for brick in self)


def create_bricks(columns: int, rows: int) -> BrickGrid:
    """Allocate a fresh, fully active `columns x rows` grid."""
    return BrickGrid(columns, rows)
