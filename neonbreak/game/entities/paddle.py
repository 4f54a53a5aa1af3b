"""Paddle entity with fixed-step keyboard movement.

The paddle slides a fixed number of pixels per frame while a direction
is held and never leaves the screen.
"""

from typing import Tuple


class Paddle:
    """Horizontal paddle at a fixed height.

    `x` is the LEFT edge. Invariant: 0 <= x <= screen_width - width.
    """

    def __init__(
        self,
        width: float,
        height: float,
        y: float,
        screen_width: float,
        step: float = 6.0,
    ):
        """Initialize paddle centered horizontally.

        Args:
            width: Paddle width
            height: Paddle height
            y: Top edge Y (fixed)
            screen_width: Screen width in pixels
            step: Pixels moved per frame while a direction is held
        """
        self._width = width
        self._height = height
        self._y = y
        self._screen_width = screen_width
        self._step = step
        self._x = 0.0
        self.reset()

    @property
    def x(self) -> float:
        """Get paddle left edge X."""
        return self._x

    @property
    def y(self) -> float:
        """Get paddle top Y."""
        return self._y

    @property
    def width(self) -> float:
        """Get paddle width."""
        return self._width

    @property
    def height(self) -> float:
        """Get paddle height."""
        return self._height

    @property
    def center_x(self) -> float:
        """Get paddle center X."""
        return self._x + self._width / 2

    @property
    def max_x(self) -> float:
        """Largest allowed left edge."""
        return self._screen_width - self._width

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._width, self._height)

    def covers(self, x: float) -> bool:
        """True if `x` lies strictly between the paddle edges."""
        return self._x < x < self._x + self._width

    def update(self, left: bool, right: bool) -> None:
        """Move one step for the held direction.

        Right wins when both are held. The paddle only moves while it
        has room in that direction and is clamped to the screen.

        Args:
            left: Left control held
            right: Right control held
        """
        if right and self._x < self.max_x:
            self._x = min(self.max_x, self._x + self._step)
        elif left and self._x > 0:
            self._x = max(0.0, self._x - self._step)

    def reset(self) -> None:
        """Reset paddle to center position."""
        self._x = (self._screen_width - self._width) / 2
