"""Flat skin - solid shapes, no gradients or glow."""

from typing import TYPE_CHECKING

import pygame

from .base import BreakoutSkin

if TYPE_CHECKING:
    from ..render import RenderCommand


class FlatSkin(BreakoutSkin):
    """Renders every command as a solid shape in its base color."""

    NAME = "flat"
    DESCRIPTION = "Solid shapes for slow machines and screenshots"

    def draw_rect(self, command: 'RenderCommand', screen: pygame.Surface) -> None:
        pygame.draw.rect(screen, command.color, command.rect)

    def draw_circle(self, command: 'RenderCommand', screen: pygame.Surface) -> None:
        x, y = command.center
        pygame.draw.circle(screen, command.color, (int(x), int(y)), int(command.radius))
