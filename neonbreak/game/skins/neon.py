"""Neon skin - gradient fills with a soft glow."""

from typing import TYPE_CHECKING, Tuple

import pygame

from .base import BreakoutSkin

if TYPE_CHECKING:
    from ..render import RenderCommand

Color = Tuple[int, int, int]


def _lerp_color(start: Color, end: Color, t: float) -> Color:
    """Blend two colors; t=0 gives start, t=1 gives end."""
    return tuple(int(a + (b - a) * t) for a, b in zip(start, end))  # type: ignore


class NeonSkin(BreakoutSkin):
    """Gradient bricks and paddle, radial-gradient ball, glowing bricks."""

    NAME = "neon"
    DESCRIPTION = "Neon gradients and glow"

    GLOW_SIZE = 6
    GLOW_ALPHA = 60

    def draw_rect(self, command: 'RenderCommand', screen: pygame.Surface) -> None:
        """Rectangle with a left-to-right gradient and optional glow."""
        x, y, width, height = (int(v) for v in command.rect)

        if command.glow:
            self._draw_glow(screen, command.color, x, y, width, height)

        if command.gradient_to is None or width <= 1:
            pygame.draw.rect(screen, command.color, (x, y, width, height))
            return

        for i in range(width):
            color = _lerp_color(command.color, command.gradient_to, i / (width - 1))
            pygame.draw.line(screen, color, (x + i, y), (x + i, y + height - 1))

    def draw_circle(self, command: 'RenderCommand', screen: pygame.Surface) -> None:
        """Circle fading from the center color to gradient_to at the rim."""
        cx, cy = (int(v) for v in command.center)
        radius = int(command.radius)
        if command.gradient_to is None or radius <= 1:
            pygame.draw.circle(screen, command.color, (cx, cy), radius)
            return

        for r in range(radius, 0, -1):
            color = _lerp_color(command.color, command.gradient_to, r / radius)
            pygame.draw.circle(screen, color, (cx, cy), r)

    def _draw_glow(
        self,
        screen: pygame.Surface,
        color: Color,
        x: int,
        y: int,
        width: int,
        height: int,
    ) -> None:
        size = self.GLOW_SIZE
        glow = pygame.Surface((width + size * 2, height + size * 2), pygame.SRCALPHA)
        pygame.draw.rect(
            glow,
            (*color, self.GLOW_ALPHA),
            glow.get_rect(),
            border_radius=size,
        )
        screen.blit(glow, (x - size, y - size))
