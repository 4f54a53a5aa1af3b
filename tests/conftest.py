"""Pytest fixtures for NeonBreak tests."""
import os

# Headless pygame for skin and input tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from neonbreak.config import GameConfig
from neonbreak.game_mode import BreakoutGame
from neonbreak.highscore import HighScoreStore


@pytest.fixture
def config():
    """Default game configuration (600x400, 7x3 bricks)."""
    return GameConfig()


@pytest.fixture
def highscore_path(tmp_path):
    """High score file inside the test's temp dir."""
    return tmp_path / 'highscore.json'


@pytest.fixture
def high_scores(highscore_path):
    """Empty high score store backed by a temp file."""
    return HighScoreStore(highscore_path)


@pytest.fixture
def game(config, high_scores):
    """Fresh game using the flat skin."""
    return BreakoutGame(config=config, high_scores=high_scores, skin='flat')
