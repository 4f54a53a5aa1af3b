"""Base class for NeonBreak skins.

Skins handle ALL drawing - the game only produces render commands.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, Iterable

import pygame

from ...config import BACKGROUND_COLOR

if TYPE_CHECKING:
    from ..render import RenderCommand


class BreakoutSkin(ABC):
    """Base class for game skins.

    draw() clears the screen and dispatches each command by shape to the
    draw_* methods subclasses implement.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    def __init__(self):
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        """Default font at `size`, created on first use."""
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def draw(self, commands: Iterable['RenderCommand'], screen: pygame.Surface) -> None:
        """Render one frame.

        Args:
            commands: Render commands, back to front
            screen: Pygame surface to draw on
        """
        screen.fill(BACKGROUND_COLOR)
        for command in commands:
            if command.shape == 'rect':
                self.draw_rect(command, screen)
            elif command.shape == 'circle':
                self.draw_circle(command, screen)
            elif command.shape == 'text':
                self.draw_text(command, screen)

    @abstractmethod
    def draw_rect(self, command: 'RenderCommand', screen: pygame.Surface) -> None:
        """Draw a filled rectangle command."""
        pass

    @abstractmethod
    def draw_circle(self, command: 'RenderCommand', screen: pygame.Surface) -> None:
        """Draw a filled circle command."""
        pass

    def draw_text(self, command: 'RenderCommand', screen: pygame.Surface) -> None:
        """Draw text anchored at command.center with command.align."""
        surface = self._font(command.font_size).render(command.text, True, command.color)
        rect = surface.get_rect()
        x, y = command.center
        if command.align == 'left':
            rect.midleft = (int(x), int(y))
        elif command.align == 'right':
            rect.midright = (int(x), int(y))
        else:
            rect.center = (int(x), int(y))
        screen.blit(surface, rect)
