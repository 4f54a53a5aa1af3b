"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod

import pygame

from neonbreak.input.input_state import InputState


class InputSource(ABC):
    """Abstract base class for input sources.

    A source consumes raw pygame events and reports the current state of
    the left/right controls.
    """

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> bool:
        """Feed one pygame event to the source.

        Args:
            event: Event from pygame.event.get()

        Returns:
            True if the source consumed the event.
        """
        pass

    @abstractmethod
    def poll_state(self) -> InputState:
        """Current state of the controls."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Forget all held controls."""
        pass
