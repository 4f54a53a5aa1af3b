"""
NeonBreak Logging

Print-based loggers with per-module levels, plus structured JSONL records
for finished game sessions.

Usage:
    from neonbreak.logging import get_logger, emit_record

    log = get_logger('game_mode')
    log.debug("Brick (%d, %d) destroyed", column, row)
    emit_record('session', {'type': 'game_over', 'score': 120, 'level': 2})

Environment variables:
    NEONBREAK_LOG_LEVEL=DEBUG                 default level
    NEONBREAK_LOG_GAME_MODE=TRACE             level for one module
    NEONBREAK_LOG_DIR=/tmp/neonbreak          where JSONL records go
    NEONBREAK_LOGGING_SESSION_ENABLED=true    write session records
    NEONBREAK_LOGGING_SESSION_DIR=/tmp/runs   per-module record directory
"""

import json
import os
import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

LEVEL_ENV = 'NEONBREAK_LOG_LEVEL'
DIR_ENV = 'NEONBREAK_LOG_DIR'
LEVEL_PREFIX = 'NEONBREAK_LOG_'
SETTINGS_PREFIX = 'NEONBREAK_LOGGING_'


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    OFF = 100


# Printed label per level
_LABELS = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
}


_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},     # module key -> LogLevel
    'log_dir': None,         # None = platform data dir
    'modules': {},           # module -> record settings ('enabled', 'dir')
}


# =============================================================================
# Record sinks
# =============================================================================

class LogSink(ABC):
    """Destination for structured records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Write one JSON-serializable record for `module`."""

    @abstractmethod
    def flush(self) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass


class FileSink(LogSink):
    """
    JSONL files, one per module, named `<session>_<module>.jsonl`.

    Each file opens with a header record and ends with a footer record
    written on close().

    Args:
        log_dir: Directory for the files (default: get_log_dir())
        session_name: File name prefix (default: start timestamp)
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, TextIO] = {}

    def path_for(self, module: str) -> Path:
        """File that records for `module` go to."""
        log_dir = self._log_dir or Path(get_log_dir())
        return log_dir / f"{self._session_name}_{module}.jsonl"

    def _open(self, module: str) -> TextIO:
        handle = self._files.get(module)
        if handle is None:
            path = self.path_for(module)
            path.parent.mkdir(parents=True, exist_ok=True)
            handle = open(path, 'a', encoding='utf-8')
            self._files[module] = handle
            self._write(handle, {
                'type': 'header',
                'module': module,
                'session_name': self._session_name,
                'start_time': time.time(),
            })
        return handle

    @staticmethod
    def _write(handle: TextIO, record: Dict[str, Any]) -> None:
        handle.write(json.dumps(record) + "\n")

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        if 'wall_time' not in record:
            record = {'wall_time': time.time(), **record}
        self._write(self._open(module), record)

    def flush(self) -> None:
        for handle in self._files.values():
            handle.flush()

    def close(self) -> None:
        for module, handle in self._files.items():
            self._write(handle, {'type': 'footer', 'module': module, 'end_time': time.time()})
            handle.close()
        self._files.clear()


class NullSink(LogSink):
    """Drops every record."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    """Route records for `module` to `sink`, replacing any earlier one."""
    _sinks[module] = sink


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Send a structured record to the sink registered for `module`.

    Returns:
        True if a sink took the record, False if none is registered
    """
    sink = _sinks.get(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and forget every registered sink."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


def create_sink_for_environment(module: str, session_name: Optional[str] = None) -> LogSink:
    """FileSink if records for `module` are enabled, else NullSink."""
    settings = get_module_config(module)
    if not settings.get('enabled', False):
        return NullSink()
    return FileSink(log_dir=settings.get('dir'), session_name=session_name)


# =============================================================================
# Directories and settings
# =============================================================================

def get_data_dir() -> Path:
    """Per-user data directory for records and the high score."""
    if sys.platform == 'darwin':
        return Path.home() / 'Library' / 'Application Support' / 'NeonBreak'
    if sys.platform == 'win32':
        return Path(os.environ.get('APPDATA', str(Path.home()))) / 'NeonBreak'
    xdg_data = os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))
    return Path(xdg_data) / 'neonbreak'


def get_log_dir() -> str:
    """NEONBREAK_LOG_DIR if set, else `logs/` under the data directory."""
    if _config['log_dir']:
        return str(Path(_config['log_dir']).expanduser())
    return str(get_data_dir() / 'logs')


def get_module_config(module: str) -> Dict[str, Any]:
    """Record settings for `module`, e.g. {'enabled': True, 'dir': '/tmp'}."""
    return _config['modules'].get(module.lower(), {})


def _parse_env_value(value: str) -> Any:
    lower = value.lower()
    if lower in ('true', '1', 'yes', 'on'):
        return True
    if lower in ('false', '0', 'no', 'off'):
        return False
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            pass
    return value


def _set_nested(d: Dict[str, Any], keys: List[str], value: Any) -> None:
    for key in keys[:-1]:
        d = d.setdefault(key, {})
    d[keys[-1]] = value


def _level_from_string(name: str) -> LogLevel:
    """Level by name; WARN is accepted and anything unknown means INFO."""
    name = name.upper()
    if name == 'WARN':
        return LogLevel.WARNING
    return LogLevel.__members__.get(name, LogLevel.INFO)


def configure_logging(level: str = 'INFO', modules: Optional[Dict[str, str]] = None) -> None:
    """
    Set the default level and, optionally, per-module levels.

    Args:
        level: Default level name (TRACE, DEBUG, INFO, WARNING, ERROR, OFF)
        modules: Module name -> level name
    """
    _config['default_level'] = _level_from_string(level)
    for module, module_level in (modules or {}).items():
        _config['module_levels'][module] = _level_from_string(module_level)


def _load_env_config() -> None:
    """Apply NEONBREAK_LOG_* levels and NEONBREAK_LOGGING_* record settings."""
    for key, value in os.environ.items():
        if key == LEVEL_ENV:
            _config['default_level'] = _level_from_string(value)
        elif key == DIR_ENV:
            _config['log_dir'] = value
        elif key.startswith(SETTINGS_PREFIX):
            parts = key[len(SETTINGS_PREFIX):].lower().split('_')
            if len(parts) >= 2:
                settings = _config['modules'].setdefault(parts[0], {})
                _set_nested(settings, parts[1:], _parse_env_value(value))
        elif key.startswith(LEVEL_PREFIX):
            module = key[len(LEVEL_PREFIX):].lower()
            _config['module_levels'][module] = _level_from_string(value)


_load_env_config()


# =============================================================================
# Loggers
# =============================================================================

class NeonLogger:
    """Logger for one module; prints `[module] LEVEL: message`."""

    def __init__(self, module: str):
        self.module = module
        self._key = module.lower().replace('.', '_')

    @property
    def level(self) -> LogLevel:
        """Module level if one is set, else the default."""
        return _config['module_levels'].get(self._key, _config['default_level'])

    def _log(self, level: LogLevel, msg: str, args: tuple) -> None:
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {_LABELS[level]}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, msg, args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, msg, args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, msg, args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> NeonLogger:
    """Cached logger for `module` (e.g. 'game_mode', 'highscore')."""
    return NeonLogger(module)
