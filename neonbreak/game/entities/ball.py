"""Ball entity with per-frame velocity physics.

The ball bounces off walls, the paddle, and bricks. Its angle off the
paddle depends on where it hits.
"""

import math
from typing import Tuple


class Ball:
    """Immutable ball; every operation returns a new Ball.

    Velocity is in pixels per frame. Speed only changes through paddle
    bounces (fixed speed) and level-ups (speed_up).
    """

    def __init__(
        self,
        radius: float,
        x: float,
        y: float,
        dx: float = 0.0,
        dy: float = 0.0,
    ):
        """Initialize ball.

        Args:
            radius: Ball radius in pixels
            x: Center X position
            y: Center Y position
            dx: X velocity (pixels/frame)
            dy: Y velocity (pixels/frame, negative is up)
        """
        self._radius = radius
        self._x = x
        self._y = y
        self._dx = dx
        self._dy = dy

    @property
    def x(self) -> float:
        """Get ball center X."""
        return self._x

    @property
    def y(self) -> float:
        """Get ball center Y."""
        return self._y

    @property
    def dx(self) -> float:
        """Get X velocity."""
        return self._dx

    @property
    def dy(self) -> float:
        """Get Y velocity."""
        return self._dy

    @property
    def radius(self) -> float:
        """Get ball radius."""
        return self._radius

    @property
    def speed(self) -> float:
        """Get current ball speed."""
        return math.hypot(self._dx, self._dy)

    @property
    def next_x(self) -> float:
        """X position after one more frame at current velocity."""
        return self._x + self._dx

    @property
    def next_y(self) -> float:
        """Y position after one more frame at current velocity."""
        return self._y + self._dy

    @classmethod
    def serve(cls, radius: float, x: float, y: float, speed: float) -> 'Ball':
        """Create a ball heading up and to the right at `speed` per axis."""
        return cls(radius, x, y, speed, -speed)

    def move(self) -> 'Ball':
        """Advance one frame along the current velocity.

        Returns:
            New Ball with updated position
        """
        return Ball(self._radius, self._x + self._dx, self._y + self._dy, self._dx, self._dy)

    def clamp_x(self, min_x: float, max_x: float) -> 'Ball':
        """Keep the center X inside [min_x, max_x]."""
        x = max(min_x, min(max_x, self._x))
        if x == self._x:
            return self
        return Ball(self._radius, x, self._y, self._dx, self._dy)

    def bounce_horizontal(self) -> 'Ball':
        """Bounce off vertical surface (reverse X velocity).

        Returns:
            New Ball with reversed X velocity
        """
        return Ball(self._radius, self._x, self._y, -self._dx, self._dy)

    def bounce_vertical(self) -> 'Ball':
        """Bounce off horizontal surface (reverse Y velocity).

        Returns:
            New Ball with reversed Y velocity
        """
        return Ball(self._radius, self._x, self._y, self._dx, -self._dy)

    def bounce_off_paddle(
        self,
        paddle_left: float,
        paddle_width: float,
        speed: float,
        max_angle_deg: float = 60.0,
    ) -> 'Ball':
        """Bounce off paddle with angle based on hit position.

        Hitting the center sends the ball straight up; hitting an edge
        deflects it up to `max_angle_deg` from vertical. The outgoing
        speed is always `speed`, whatever the incoming speed was.

        Args:
            paddle_left: Paddle left edge X
            paddle_width: Paddle width
            speed: Outgoing speed
            max_angle_deg: Deflection at the paddle edge

        Returns:
            New Ball with velocity based on paddle hit position
        """
        half_width = paddle_width / 2
        hit_point = self._x - (paddle_left + half_width)
        normalized = max(-1.0, min(1.0, hit_point / half_width))
        angle = normalized * math.radians(max_angle_deg)

        dx = speed * math.sin(angle)
        dy = -speed * math.cos(angle)
        return Ball(self._radius, self._x, self._y, dx, dy)

    def speed_up(self, amount: float) -> 'Ball':
        """Level-up speed change: dx grows by `amount`, dy shrinks by it.

        Both components shift regardless of their sign, so a ball moving
        up gets faster upward while dx drifts to the right.

        Returns:
            New Ball with shifted velocity
        """
        return Ball(self._radius, self._x, self._y, self._dx + amount, self._dy - amount)

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get ball bounding box (left, top, right, bottom)."""
        return (
            self._x - self._radius,
            self._y - self._radius,
            self._x + self._radius,
            self._y + self._radius,
        )

    def __repr__(self) -> str:
        return (f"Ball(x={self._x:.2f}, y={self._y:.2f}, "
                f"dx={self._dx:.2f}, dy={self._dy:.2f})")
