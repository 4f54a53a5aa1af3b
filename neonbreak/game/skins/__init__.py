"""NeonBreak skins for rendering."""

from .base import BreakoutSkin
from .flat import FlatSkin
from .neon import NeonSkin

__all__ = [
    'BreakoutSkin',
    'FlatSkin',
    'NeonSkin',
]
