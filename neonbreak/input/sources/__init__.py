"""NeonBreak input sources."""

from neonbreak.input.sources.base import InputSource
from neonbreak.input.sources.keyboard import KeyboardInputSource, DEFAULT_KEYMAP

__all__ = ['InputSource', 'KeyboardInputSource', 'DEFAULT_KEYMAP']
