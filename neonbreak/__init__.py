"""
NeonBreak - a neon Breakout game built on pygame.

Provides:
- game_mode: BreakoutGame controller with a testable step() function
- config: constants and the validated GameConfig (YAML loadable)
- highscore: the persistent best score
- input: keyboard tracking for the paddle controls
- logging: per-module logging and structured records
"""

__version__ = "1.0.0"
