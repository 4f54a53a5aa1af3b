"""NeonBreak game entities."""

from .paddle import Paddle
from .ball import Ball
from .brick import Brick, BrickGrid, BrickStatus, brick_rect, contains_point, create_bricks

__all__ = [
    'Paddle',
    'Ball',
    'Brick', 'BrickGrid', 'BrickStatus',
    'brick_rect', 'contains_point', 'create_bricks',
]
