"""NeonBreak - Breakout with level progression and a persistent best score.

The controller owns all game state. The frame source (the standalone
loop or a test) calls step() once per display refresh and draws the
render commands it returns.
"""

from typing import List, Optional, Tuple

import pygame

from .config import GameConfig
from .game.entities.ball import Ball
from .game.entities.paddle import Paddle
from .game.level_manager import LevelManager
from .game.physics.collision import (
    check_paddle_collision,
    check_wall_collision,
    fell_below,
    find_brick_hits,
    hits_ceiling,
    in_paddle_band,
)
from .game.render import RenderCommand, build_render_commands, restart_button_rect
from .game.skins import BreakoutSkin, FlatSkin, NeonSkin
from .game.state import BreakoutState, GameSnapshot
from .game_state import GameState
from .highscore import HighScoreStore
from .input.input_state import InputState, NO_INPUT
from .logging import emit_record, get_logger

log = get_logger('game_mode')


class BreakoutGame:
    """Breakout game controller.

    State machine:
        PLAYING -> PLAYING           normal frame
        PLAYING -> PLAYING(level+1)  grid cleared
        PLAYING -> PLAYING(lives-1)  ball missed, lives left
        PLAYING -> GAME_OVER         ball missed, no lives left
        GAME_OVER -> PLAYING         init() (restart)
    """

    # Game metadata
    NAME = "NeonBreak"
    DESCRIPTION = "Neon Breakout with levels and a persistent best score."
    VERSION = "1.0.0"

    # Skin registry
    SKINS = {
        'neon': NeonSkin,
        'flat': FlatSkin,
    }

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        high_scores: Optional[HighScoreStore] = None,
        skin: str = 'neon',
    ):
        """Initialize and start a fresh game.

        Args:
            config: Game configuration (defaults if None)
            high_scores: Persistent best score (default file location if None)
            skin: Visual skin used by render()
        """
        self._config = config or GameConfig()
        self._high_scores = high_scores if high_scores is not None else HighScoreStore()
        self._levels = LevelManager(self._config)

        skin_class = self.SKINS.get(skin, NeonSkin)
        self._skin: BreakoutSkin = skin_class()

        self._state: BreakoutState
        self._last_commands: List[RenderCommand] = []
        self.init()

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def levels(self) -> LevelManager:
        return self._levels

    @property
    def state(self) -> GameState:
        """Externally visible game state."""
        return self._state.state

    @property
    def running(self) -> bool:
        return self._state.running

    @property
    def ball(self) -> Ball:
        return self._state.ball

    @property
    def paddle(self) -> Paddle:
        return self._state.paddle

    @property
    def bricks(self):
        return self._state.bricks

    @property
    def restart_visible(self) -> bool:
        """Game over indicator and restart control are shown."""
        return not self._state.running

    def snapshot(self) -> GameSnapshot:
        """Immutable copy of the current state."""
        return self._state.snapshot()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def _fresh_state(self) -> BreakoutState:
        cfg = self._config
        paddle = Paddle(
            cfg.paddle_width,
            cfg.paddle_height,
            cfg.paddle_y,
            cfg.width,
            cfg.paddle_step,
        )
        rows = self._levels.start_rows
        return BreakoutState(
            ball=self._serve_ball(level=1),
            paddle=paddle,
            bricks=self._levels.new_grid(rows),
            lives=cfg.starting_lives,
            row_count=rows,
            high_score=self._high_scores.value,
        )

    def _serve_ball(self, level: int) -> Ball:
        """Ball at the serve position with the level's speed."""
        cfg = self._config
        return Ball.serve(
            cfg.ball_radius,
            cfg.width / 2,
            cfg.height - cfg.ball_start_offset_y,
            cfg.level_speed(level),
        )

    def init(self) -> None:
        """Start a new game from scratch.

        Safe to call at any time; always yields the same fresh state
        and hides the game over indicator.
        """
        self._state = self._fresh_state()
        self._last_commands = build_render_commands(self._state, self._config)
        log.info(
            "New game: %dx%d bricks, %d lives, best %d",
            self._state.bricks.columns, self._state.bricks.rows,
            self._state.lives, self._state.high_score,
        )

    # =========================================================================
    # Frame step
    # =========================================================================

    def step(self, inputs: InputState = NO_INPUT) -> Tuple[GameSnapshot, List[RenderCommand]]:
        """Advance one frame.

        Does nothing while the game is over; the last frame's render
        commands are returned again so the display stays drawn.

        Args:
            inputs: Control state read at the start of the frame

        Returns:
            (snapshot after the frame, render commands for it)
        """
        if not self._state.running:
            return self._state.snapshot(), self._last_commands

        self._handle_brick_collisions()
        self._handle_bounds()
        self._state.paddle.update(inputs.left, inputs.right)
        self._move_ball()

        self._last_commands = build_render_commands(self._state, self._config)
        return self._state.snapshot(), self._last_commands

    def _handle_brick_collisions(self) -> None:
        """Apply every brick the ball center is inside.

        All matches in one frame count, each flipping dy and scoring.
        """
        state = self._state
        for brick in find_brick_hits(state.ball, state.bricks, self._config.bricks):
            if not brick.destroy():
                continue
            state.ball = state.ball.bounce_vertical()
            state.score += self._config.bricks.points
            log.debug("Brick (%d, %d) destroyed, score %d", brick.column, brick.row, state.score)

            if self._levels.check_level_cleared(state.bricks):
                self._levels.next_level(state)
                break

    def _handle_bounds(self) -> None:
        """Walls, ceiling, paddle, and floor, judged one frame ahead."""
        state = self._state
        cfg = self._config

        state.ball = check_wall_collision(state.ball, cfg.width)

        if hits_ceiling(state.ball):
            state.ball = state.ball.bounce_vertical()
        elif in_paddle_band(state.ball, cfg.paddle_band_y):
            if check_paddle_collision(state.ball, state.paddle):
                state.ball = state.ball.bounce_off_paddle(
                    state.paddle.x,
                    state.paddle.width,
                    cfg.paddle_bounce_speed,
                    cfg.max_bounce_angle_deg,
                )
            elif fell_below(state.ball, cfg.height):
                self.lose_life()

    def _move_ball(self) -> None:
        radius = self._state.ball.radius
        self._state.ball = self._state.ball.move().clamp_x(radius, self._config.width - radius)

    # =========================================================================
    # Lives
    # =========================================================================

    def lose_life(self) -> None:
        """Handle a missed ball."""
        state = self._state
        state.lives -= 1

        if state.lives > 0:
            state.ball = self._serve_ball(state.level)
            log.info("Life lost, %d left", state.lives)
        else:
            self._game_over()

    def _game_over(self) -> None:
        state = self._state
        state.running = False
        if self._high_scores.update(state.score):
            state.high_score = self._high_scores.value

        log.info("Game over: score %d, level %d, best %d",
                 state.score, state.level, state.high_score)
        emit_record('session', {
            'type': 'game_over',
            'score': state.score,
            'level': state.level,
            'high_score': state.high_score,
        })

    # =========================================================================
    # Presentation
    # =========================================================================

    @property
    def restart_button_rect(self) -> Tuple[float, float, float, float]:
        return restart_button_rect(self._config)

    def handle_click(self, pos: Tuple[float, float]) -> bool:
        """Restart if the click lands on the visible restart button.

        Returns:
            True if the game was restarted
        """
        if not self.restart_visible:
            return False

        x, y, width, height = self.restart_button_rect
        if x <= pos[0] <= x + width and y <= pos[1] <= y + height:
            self.init()
            return True
        return False

    def render(self, screen: pygame.Surface) -> None:
        """Draw the latest frame.

        Args:
            screen: Pygame surface to draw on
        """
        self._skin.draw(self._last_commands, screen)
