"""NeonBreak physics and collision detection."""

from .collision import (
    check_wall_collision,
    check_paddle_collision,
    check_brick_collision,
    find_brick_hits,
    fell_below,
    hits_ceiling,
    in_paddle_band,
)

__all__ = [
    'check_wall_collision',
    'check_paddle_collision',
    'check_brick_collision',
    'find_brick_hits',
    'fell_below',
    'hits_ceiling',
    'in_paddle_band',
]
