"""State store for one NeonBreak game.

BreakoutState is the single mutable bundle owned by the controller.
GameSnapshot is the immutable copy handed out after each step.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..game_state import GameState
from .entities.ball import Ball
from .entities.brick import BrickGrid, BrickStatus
from .entities.paddle import Paddle


@dataclass
class BreakoutState:
    """Everything that changes while playing."""
    ball: Ball
    paddle: Paddle
    bricks: BrickGrid
    score: int = 0
    level: int = 1
    lives: int = 3
    running: bool = True
    row_count: int = 3
    high_score: int = 0

    @property
    def state(self) -> GameState:
        """Map the running flag to the standard state."""
        return GameState.PLAYING if self.running else GameState.GAME_OVER

    def snapshot(self) -> 'GameSnapshot':
        """Immutable copy of the current state."""
        return GameSnapshot(
            score=self.score,
            level=self.level,
            lives=self.lives,
            running=self.running,
            high_score=self.high_score,
            ball_x=self.ball.x,
            ball_y=self.ball.y,
            ball_dx=self.ball.dx,
            ball_dy=self.ball.dy,
            paddle_x=self.paddle.x,
            columns=self.bricks.columns,
            rows=self.bricks.rows,
            brick_status=tuple(
                tuple(brick.status for brick in self.bricks[c])
                for c in range(self.bricks.columns)
            ),
        )


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable view of the game after a frame.

    brick_status is indexed [column][row], like the grid.
    """
    score: int
    level: int
    lives: int
    running: bool
    high_score: int
    ball_x: float
    ball_y: float
    ball_dx: float
    ball_dy: float
    paddle_x: float
    columns: int
    rows: int
    brick_status: Tuple[Tuple[BrickStatus, ...], ...] = field(default_factory=tuple)

    @property
    def state(self) -> GameState:
        return GameState.PLAYING if self.running else GameState.GAME_OVER

    @property
    def active_bricks(self) -> int:
        return sum(
            1 for column in self.brick_status for status in column
            if status == BrickStatus.ACTIVE
        )

    def status_at(self, column: int, row: int) -> Optional[BrickStatus]:
        """Brick status at a cell, or None outside the grid."""
        if 0 <= column < self.columns and 0 <= row < self.rows:
            return self.brick_status[column][row]
        return None
