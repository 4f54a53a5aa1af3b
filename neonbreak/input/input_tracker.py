"""
Input Tracker - Holds the active input source for the game loop.
"""
from typing import Optional

import pygame

from neonbreak.input.input_state import InputState, NO_INPUT
from neonbreak.input.sources.base import InputSource


class InputTracker:
    """Routes pygame events to an input source and reports control state.

    Event handlers and the frame step run on the same thread, so the
    state read at the start of a frame is never half-updated.
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize with an optional input source."""
        self._source = source

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Pass an event to the source; True if it was consumed."""
        if self._source is None:
            return False
        return self._source.handle_event(event)

    def state(self) -> InputState:
        """Current control state (nothing held without a source)."""
        if self._source is None:
            return NO_INPUT
        return self._source.poll_state()

    def clear(self) -> None:
        """Release all held controls, e.g. when the window loses focus."""
        if self._source is not None:
            self._source.clear()
