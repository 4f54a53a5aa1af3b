"""
Keyboard Input Source - Arrow keys drive the paddle.
"""
from typing import Dict, Optional, Set

import pygame

from neonbreak.input.input_state import InputState
from neonbreak.input.sources.base import InputSource
from neonbreak.logging import get_logger

log = get_logger('input')

DEFAULT_KEYMAP: Dict[int, str] = {
    pygame.K_LEFT: 'left',
    pygame.K_RIGHT: 'right',
}


class KeyboardInputSource(InputSource):
    """Tracks which mapped keys are held down.

    Only the keys in the keymap are consumed; every other event is left
    for the main loop.
    """

    def __init__(self, keymap: Optional[Dict[int, str]] = None):
        """
        Args:
            keymap: pygame key code -> 'left' or 'right'
        """
        self._keymap = dict(keymap) if keymap is not None else dict(DEFAULT_KEYMAP)
        self._held: Set[str] = set()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Update held controls from KEYDOWN/KEYUP of mapped keys."""
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False

        control = self._keymap.get(event.key)
        if control is None:
            return False

        if event.type == pygame.KEYDOWN:
            self._held.add(control)
        else:
            self._held.discard(control)
        log.trace("%s %s", control, 'down' if event.type == pygame.KEYDOWN else 'up')
        return True

    def poll_state(self) -> InputState:
        return InputState(left='left' in self._held, right='right' in self._held)

    def clear(self) -> None:
        self._held.clear()
