"""Level progression for NeonBreak.

A level is cleared when every brick in the grid is destroyed. Each new
level adds a brick row (up to the layout's maximum), speeds up the ball,
and deals a fresh grid. Score and lives carry over.
"""

from typing import TYPE_CHECKING

from ..logging import get_logger
from .entities.brick import BrickGrid, create_bricks

if TYPE_CHECKING:
    from ..config import GameConfig
    from .state import BreakoutState

log = get_logger('level_manager')


class LevelManager:
    """Detects cleared grids and advances the level."""

    def __init__(self, config: 'GameConfig'):
        self._config = config

    @property
    def start_rows(self) -> int:
        return self._config.bricks.start_rows

    def new_grid(self, rows: int) -> BrickGrid:
        """Fresh, fully active grid with the configured column count."""
        return create_bricks(self._config.bricks.columns, rows)

    def next_row_count(self, rows: int) -> int:
        """Row count for the following level, capped at max_rows."""
        return min(rows + 1, self._config.bricks.max_rows)

    def check_level_cleared(self, grid: BrickGrid) -> bool:
        """True iff no brick in the grid is still active."""
        return grid.all_destroyed()

    def next_level(self, state: 'BreakoutState') -> None:
        """Advance `state` to the next level.

        Args:
            state: State to mutate in place
        """
        state.level += 1
        state.ball = state.ball.speed_up(self._config.level_speed_step)
        state.row_count = self.next_row_count(state.row_count)
        state.bricks = self.new_grid(state.row_count)
        log.info(
            "Level %d: %dx%d bricks, ball velocity (%.2f, %.2f)",
            state.level, state.bricks.columns, state.bricks.rows,
            state.ball.dx, state.ball.dy,
        )
