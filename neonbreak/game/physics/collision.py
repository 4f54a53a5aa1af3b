"""Collision detection for NeonBreak.

Handles ball-wall, ball-paddle, and ball-brick collisions. Wall and
paddle checks look one frame ahead (position + velocity); brick checks
use the current ball center.
"""

from typing import TYPE_CHECKING, List

from ..entities.brick import brick_rect, contains_point

if TYPE_CHECKING:
    from ...config import BrickLayout
    from ..entities.ball import Ball
    from ..entities.brick import Brick, BrickGrid
    from ..entities.paddle import Paddle


def check_wall_collision(ball: 'Ball', screen_width: float) -> 'Ball':
    """Reverse X velocity if the next step would cross a side wall.

    Args:
        ball: Ball to check
        screen_width: Screen width in pixels

    Returns:
        Ball, bounced if needed
    """
    if ball.next_x > screen_width - ball.radius or ball.next_x < ball.radius:
        return ball.bounce_horizontal()
    return ball


def hits_ceiling(ball: 'Ball') -> bool:
    """True if the next step would take the ball above the top bound."""
    return ball.next_y < ball.radius


def in_paddle_band(ball: 'Ball', band_y: float) -> bool:
    """True if the next step would take the ball into the paddle's band."""
    return ball.next_y > band_y


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if the ball center is over the paddle.

    Only meaningful once the ball is in the paddle band.

    Args:
        ball: Ball to check
        paddle: Paddle to check against

    Returns:
        True if the paddle catches the ball
    """
    return paddle.covers(ball.x)


def fell_below(ball: 'Ball', screen_height: float) -> bool:
    """True if the next step would take the ball past the bottom edge."""
    return ball.next_y > screen_height


def check_brick_collision(ball: 'Ball', brick: 'Brick', layout: 'BrickLayout') -> bool:
    """Check if the ball center is strictly inside an active brick.

    Args:
        ball: Ball to check
        brick: Brick to check against
        layout: Grid geometry

    Returns:
        True if ball hits brick
    """
    if not brick.is_active:
        return False
    return contains_point(brick_rect(brick.column, brick.row, layout), ball.x, ball.y)


def find_brick_hits(ball: 'Ball', grid: 'BrickGrid', layout: 'BrickLayout') -> List['Brick']:
    """All active bricks containing the ball center, in column-major order.

    Every match is returned; the scan does not stop at the first hit.
    """
    return [brick for brick in grid if check_brick_collision(ball, brick, layout)]
