"""GameState enum reported by the NeonBreak controller.

The controller keeps a boolean `running` flag internally; this enum is
the external view of it, used by the presentation layer and the
standalone loop.
"""
from enum import Enum


class GameState(Enum):
    """Externally visible game states.

    States:
        PLAYING: Frames are being stepped
        GAME_OVER: Out of lives; frozen until restart
    """
    PLAYING = "playing"
    GAME_OVER = "game_over"
