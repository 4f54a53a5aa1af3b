"""
High score persistence.

A single integer stored under the `highScore` key of a small JSON file.
It is read once when the store is created and written only when a game
ends with a better score.
"""

import json
import os
from pathlib import Path
from typing import Optional, Union

from .config import HIGHSCORE_FILENAME, HIGHSCORE_KEY
from .logging import get_data_dir, get_logger

log = get_logger('highscore')


def default_highscore_path() -> Path:
    """High score file location, respecting NEONBREAK_HIGHSCORE_FILE."""
    env_path = os.environ.get('NEONBREAK_HIGHSCORE_FILE')
    if env_path:
        return Path(env_path).expanduser()
    return get_data_dir() / HIGHSCORE_FILENAME


class HighScoreStore:
    """Process-wide best score, surviving across game sessions.

    A missing, unreadable, or malformed file counts as a best score of 0.
    The stored value never decreases.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Args:
            path: JSON file to use (default: default_highscore_path()).
                Pass None to use the default location.
        """
        self._path = Path(path) if path is not None else default_highscore_path()
        self._value = self._load()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def value(self) -> int:
        """Current best score."""
        return self._value

    def _load(self) -> int:
        """Read the stored value, defaulting to 0."""
        if not self._path.exists():
            return 0

        try:
            with open(self._path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("Ignoring unreadable high score file %s: %s", self._path, e)
            return 0

        raw = data.get(HIGHSCORE_KEY, 0) if isinstance(data, dict) else 0
        try:
            value = int(raw)
        except (TypeError, ValueError, OverflowError):
            log.warning("Ignoring invalid high score %r in %s", raw, self._path)
            return 0

        return max(0, value)

    def update(self, score: int) -> bool:
        """Record `score` if it beats the current best.

        Args:
            score: Final score of a finished game

        Returns:
            True if the best score changed
        """
        if score <= self._value:
            return False

        self._value = score
        self._save()
        log.info("New high score: %d", score)
        return True

    def _save(self) -> None:
        """Write the current value; failures are logged, not raised."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, 'w', encoding='utf-8') as f:
                json.dump({HIGHSCORE_KEY: self._value}, f, indent=2)
        except OSError as e:
            log.error("Could not save high score to %s: %s", self._path, e)
