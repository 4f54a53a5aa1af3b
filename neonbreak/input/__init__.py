"""NeonBreak input handling."""

from neonbreak.input.input_state import InputState, NO_INPUT
from neonbreak.input.input_tracker import InputTracker
from neonbreak.input.sources import InputSource, KeyboardInputSource

__all__ = ['InputState', 'NO_INPUT', 'InputTracker', 'InputSource', 'KeyboardInputSource']
