"""Render commands for NeonBreak.

The controller never touches a display. Each frame it turns the state
into a flat list of RenderCommand primitives; a skin draws them.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

from ..config import (
    BALL_COLOR, BALL_GLOW_COLOR, BUTTON_COLOR, GAME_OVER_COLOR, HUD_COLOR,
    LEVEL_COLORS, PADDLE_COLOR, PADDLE_GRADIENT_COLOR, RESTART_BUTTON_SIZE,
)
from .entities.brick import brick_rect

if TYPE_CHECKING:
    from ..config import GameConfig
    from .state import BreakoutState

Color = Tuple[int, int, int]
Rect = Tuple[float, float, float, float]


@dataclass(frozen=True)
class RenderCommand:
    """A single render primitive."""
    shape: str  # rect, circle, text
    tag: str    # brick, ball, paddle, hud, game_over, restart_button
    color: Color
    rect: Optional[Rect] = None                    # rect
    center: Optional[Tuple[float, float]] = None   # circle; text anchor
    radius: float = 0.0                            # circle
    gradient_to: Optional[Color] = None            # fade target, None = solid
    glow: bool = False
    text: str = ""
    font_size: int = 20
    align: str = "center"  # left, center, right


def brick_color(level: int) -> Color:
    """Brick color for a level."""
    return LEVEL_COLORS[level % len(LEVEL_COLORS)]


def restart_button_rect(config: 'GameConfig') -> Rect:
    """Restart button rectangle, centered below the game over text."""
    width, height = RESTART_BUTTON_SIZE
    return (
        (config.width - width) / 2,
        config.height / 2 + 30,
        width,
        height,
    )


def build_render_commands(state: 'BreakoutState', config: 'GameConfig') -> List[RenderCommand]:
    """Describe one frame, back to front."""
    commands: List[RenderCommand] = []

    color = brick_color(state.level)
    for brick in state.bricks:
        if brick.is_active:
            commands.append(RenderCommand(
                shape='rect',
                tag='brick',
                color=color,
                rect=brick_rect(brick.column, brick.row, config.bricks),
                gradient_to=(0, 0, 0),
                glow=True,
            ))

    ball = state.ball
    commands.append(RenderCommand(
        shape='circle',
        tag='ball',
        color=BALL_COLOR,
        center=(ball.x, ball.y),
        radius=ball.radius,
        gradient_to=BALL_GLOW_COLOR,
    ))

    commands.append(RenderCommand(
        shape='rect',
        tag='paddle',
        color=PADDLE_COLOR,
        rect=state.paddle.rect,
        gradient_to=PADDLE_GRADIENT_COLOR,
    ))

    commands.extend(_hud_commands(state, config))

    if not state.running:
        commands.extend(_game_over_commands(config))

    return commands


def _hud_commands(state: 'BreakoutState', config: 'GameConfig') -> List[RenderCommand]:
    y = 12.0
    items = [
        (f"Score: {state.score}", 10.0, 'left'),
        (f"Level: {state.level}", config.width / 3, 'center'),
        (f"Lives: {state.lives}", config.width * 2 / 3, 'center'),
        (f"Best: {state.high_score}", config.width - 10.0, 'right'),
    ]
    return [
        RenderCommand(shape='text', tag='hud', color=HUD_COLOR,
                      center=(x, y), text=text, font_size=20, align=align)
        for text, x, align in items
    ]


def _game_over_commands(config: 'GameConfig') -> List[RenderCommand]:
    button = restart_button_rect(config)
    return [
        RenderCommand(
            shape='text',
            tag='game_over',
            color=GAME_OVER_COLOR,
            center=(config.width / 2, config.height / 2),
            text="GAME OVER",
            font_size=40,
            align='center',
        ),
        RenderCommand(
            shape='rect',
            tag='restart_button',
            color=BUTTON_COLOR,
            rect=button,
        ),
        RenderCommand(
            shape='text',
            tag='restart_button',
            color=HUD_COLOR,
            center=(button[0] + button[2] / 2, button[1] + button[3] / 2),
            text="Restart",
            font_size=24,
            align='center',
        ),
    ]
