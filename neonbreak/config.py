"""Configuration for NeonBreak.

Contains screen dimensions, physics constants, brick layout, colors,
and the validated GameConfig that can be loaded from a YAML file.

All speeds are in pixels per frame; the game is stepped once per
display refresh.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

# Screen dimensions (default, can be overridden)
SCREEN_WIDTH: int = 600
SCREEN_HEIGHT: int = 400
TARGET_FPS: int = 60

# Ball
BALL_RADIUS: float = 8.0
BALL_START_OFFSET_Y: float = 50.0   # Serve position: this far above the bottom
BALL_BASE_SPEED: float = 3.0
BALL_SPEED_PER_LEVEL: float = 0.5
PADDLE_BOUNCE_SPEED: float = 5.0
MAX_BOUNCE_ANGLE_DEG: float = 60.0  # From vertical
LEVEL_SPEED_STEP: float = 1.0

# Paddle
PADDLE_WIDTH: float = 90.0
PADDLE_HEIGHT: float = 10.0
PADDLE_BOTTOM_MARGIN: float = 15.0
PADDLE_STEP: float = 6.0

# Brick grid
BRICK_COLUMNS: int = 7
BRICK_START_ROWS: int = 3
BRICK_MAX_ROWS: int = 6
BRICK_WIDTH: float = 70.0
BRICK_HEIGHT: float = 20.0
BRICK_PADDING: float = 10.0
BRICK_OFFSET_TOP: float = 40.0
BRICK_OFFSET_LEFT: float = 25.0
BRICK_POINTS: int = 10

# Game rules
STARTING_LIVES: int = 3

# Persistence
HIGHSCORE_KEY: str = 'highScore'
HIGHSCORE_FILENAME: str = 'highscore.json'

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (5, 5, 20)

# Brick colors cycle by level (level % len)
LEVEL_COLORS: Tuple[Tuple[int, int, int], ...] = (
    (0, 255, 255),
    (0, 255, 153),
    (255, 0, 204),
    (255, 204, 0),
    (255, 0, 102),
    (51, 255, 51),
)

BALL_COLOR: Tuple[int, int, int] = (255, 255, 255)
BALL_GLOW_COLOR: Tuple[int, int, int] = (0, 255, 255)
PADDLE_COLOR: Tuple[int, int, int] = (0, 255, 255)
PADDLE_GRADIENT_COLOR: Tuple[int, int, int] = (0, 119, 255)
HUD_COLOR: Tuple[int, int, int] = (235, 235, 255)
GAME_OVER_COLOR: Tuple[int, int, int] = (255, 0, 51)
BUTTON_COLOR: Tuple[int, int, int] = (255, 0, 102)

# Restart button (centered, below the game over text)
RESTART_BUTTON_SIZE: Tuple[float, float] = (140.0, 36.0)


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


class BrickLayout(BaseModel):
    """Brick grid geometry.

    Brick pixel positions are derived from (column, row) and these values;
    they are never stored on the bricks themselves.
    """
    columns: int = Field(default=BRICK_COLUMNS, gt=0)
    start_rows: int = Field(default=BRICK_START_ROWS, gt=0)
    max_rows: int = Field(default=BRICK_MAX_ROWS, gt=0)
    width: float = Field(default=BRICK_WIDTH, gt=0)
    height: float = Field(default=BRICK_HEIGHT, gt=0)
    padding: float = Field(default=BRICK_PADDING, ge=0)
    offset_top: float = Field(default=BRICK_OFFSET_TOP, ge=0)
    offset_left: float = Field(default=BRICK_OFFSET_LEFT, ge=0)
    points: int = Field(default=BRICK_POINTS, ge=0)

    model_config = ConfigDict(frozen=True, extra='forbid')

    @model_validator(mode='after')
    def _check_rows(self) -> 'BrickLayout':
        if self.start_rows > self.max_rows:
            raise ValueError(
                f"start_rows ({self.start_rows}) must not exceed max_rows ({self.max_rows})"
            )
        return self


class GameConfig(BaseModel):
    """Complete, validated game configuration.

    Defaults reproduce the classic layout; any field can be overridden
    from a YAML file or the command line.
    """
    width: int = Field(default=SCREEN_WIDTH, gt=0)
    height: int = Field(default=SCREEN_HEIGHT, gt=0)
    fps: int = Field(default=TARGET_FPS, gt=0)

    ball_radius: float = Field(default=BALL_RADIUS, gt=0)
    ball_start_offset_y: float = Field(default=BALL_START_OFFSET_Y, ge=0)
    ball_base_speed: float = Field(default=BALL_BASE_SPEED, gt=0)
    ball_speed_per_level: float = Field(default=BALL_SPEED_PER_LEVEL, ge=0)
    paddle_bounce_speed: float = Field(default=PADDLE_BOUNCE_SPEED, gt=0)
    max_bounce_angle_deg: float = Field(default=MAX_BOUNCE_ANGLE_DEG, gt=0, lt=90)
    level_speed_step: float = Field(default=LEVEL_SPEED_STEP, ge=0)

    paddle_width: float = Field(default=PADDLE_WIDTH, gt=0)
    paddle_height: float = Field(default=PADDLE_HEIGHT, gt=0)
    paddle_bottom_margin: float = Field(default=PADDLE_BOTTOM_MARGIN, ge=0)
    paddle_step: float = Field(default=PADDLE_STEP, gt=0)

    starting_lives: int = Field(default=STARTING_LIVES, gt=0)

    bricks: BrickLayout = Field(default_factory=BrickLayout)

    model_config = ConfigDict(frozen=True, extra='forbid')

    @model_validator(mode='after')
    def _check_fits(self) -> 'GameConfig':
        if self.paddle_width > self.width:
            raise ValueError(
                f"paddle_width ({self.paddle_width}) is wider than the screen ({self.width})"
            )
        if self.ball_radius * 2 > self.width:
            raise ValueError(f"ball_radius ({self.ball_radius}) does not fit the screen")
        return self

    @property
    def paddle_y(self) -> float:
        """Top edge of the paddle."""
        return self.height - self.paddle_height - self.paddle_bottom_margin

    @property
    def paddle_band_y(self) -> float:
        """Ball y beyond which the paddle (or the floor) is checked."""
        return self.height - self.ball_radius - self.paddle_bottom_margin

    def level_speed(self, level: int) -> float:
        """Serve speed per axis for a level."""
        return self.ball_base_speed + level * self.ball_speed_per_level


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> GameConfig:
    """Load and validate game configuration.

    Args:
        path: Optional YAML file; missing keys keep their defaults
        overrides: Values that win over the file (e.g. from CLI flags).
            None values are ignored.

    Returns:
        Validated GameConfig

    Raises:
        ConfigError: If the file can't be read or parsed, or values are invalid
    """
    data: Dict[str, Any] = {}
    source = 'defaults'

    if path is not None:
        source = str(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        data.update(loaded)

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return GameConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration ({source}):\n{e}") from e
