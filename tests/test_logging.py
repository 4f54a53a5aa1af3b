"""
Tests for the logging system.
"""

import json

import pytest

from neonbreak import logging as nlog


@pytest.fixture(autouse=True)
def restore_logging_config(monkeypatch):
    """Isolate global logging config and sinks per test."""
    monkeypatch.setitem(nlog._config, 'default_level', nlog.LogLevel.INFO)
    monkeypatch.setitem(nlog._config, 'module_levels', {})
    monkeypatch.setitem(nlog._config, 'modules', {})
    monkeypatch.setitem(nlog._config, 'log_dir', None)
    yield
    nlog.close_all_sinks()


class TestLogger:
    """Per-module loggers and levels."""

    def test_cached(self):
        """Test that the same module name returns the same logger."""
        assert nlog.get_logger('demo') is nlog.get_logger('demo')

    def test_format(self, capsys):
        """Test that messages print as [module] LEVEL: text."""
        nlog.get_logger('demo').info("score %d", 10)
        assert capsys.readouterr().out.strip() == "[demo] INFO: score 10"

    def test_warning_label(self, capsys):
        """Test that warnings print with the short WARN label."""
        nlog.get_logger('demo').warning("careful")
        assert capsys.readouterr().out.strip() == "[demo] WARN: careful"

    def test_below_level_suppressed(self, capsys):
        """Test that messages under the default level are dropped."""
        nlog.get_logger('demo').debug("hidden")
        assert capsys.readouterr().out == ""

    def test_module_level_override(self, capsys):
        """Test that a module level wins over the default level."""
        nlog.configure_logging(level='WARNING', modules={'chatty': 'DEBUG'})
        nlog.get_logger('chatty').debug("shown")
        nlog.get_logger('quiet').info("hidden")
        out = capsys.readouterr().out
        assert "[chatty] DEBUG: shown" in out
        assert "quiet" not in out

    def test_off_silences_errors(self, capsys):
        """Test that level OFF suppresses even errors."""
        nlog.configure_logging(level='OFF')
        nlog.get_logger('demo').error("hidden")
        assert capsys.readouterr().out == ""

    def test_bad_format_args_still_logged(self, capsys):
        """Test that mismatched format args do not lose the message."""
        nlog.get_logger('demo').warning("no placeholders", 1)
        assert "no placeholders" in capsys.readouterr().out

    def test_level_names(self):
        """Test that WARN is accepted and unknown names fall back to INFO."""
        nlog.configure_logging(level='warn')
        assert nlog.get_logger('demo').level == nlog.LogLevel.WARNING
        nlog.configure_logging(level='LOUD')
        assert nlog.get_logger('demo').level == nlog.LogLevel.INFO


class TestEnvConfig:
    """Environment variable parsing."""

    def test_levels_and_module_settings(self, monkeypatch):
        """Test that level and record settings are read from the environment."""
        monkeypatch.setenv('NEONBREAK_LOG_LEVEL', 'ERROR')
        monkeypatch.setenv('NEONBREAK_LOG_GAME_MODE', 'DEBUG')
        monkeypatch.setenv('NEONBREAK_LOGGING_SESSION_ENABLED', 'true')
        nlog._load_env_config()
        assert nlog._config['default_level'] == nlog.LogLevel.ERROR
        assert nlog.get_logger('game_mode').level == nlog.LogLevel.DEBUG
        assert nlog.get_module_config('session') == {'enabled': True}

    def test_log_dir(self, monkeypatch, tmp_path):
        """Test that NEONBREAK_LOG_DIR sets the record directory."""
        monkeypatch.setenv('NEONBREAK_LOG_DIR', str(tmp_path))
        nlog._load_env_config()
        assert nlog.get_log_dir() == str(tmp_path)

    def test_default_log_dir_under_data_dir(self):
        """Test that records default to logs/ in the data directory."""
        assert nlog.get_log_dir() == str(nlog.get_data_dir() / 'logs')


class TestSinks:
    """Structured record sinks."""

    def test_emit_without_sink(self):
        """Test that emitting with no registered sink reports False."""
        assert nlog.emit_record('session', {'type': 'x'}) is False

    def test_file_sink_writes_jsonl(self, tmp_path):
        """Test that a file sink wraps records in a header and footer."""
        sink = nlog.FileSink(log_dir=str(tmp_path), session_name='t')
        nlog.register_sink('session', sink)
        assert nlog.emit_record('session', {'type': 'game_over', 'score': 30})
        nlog.close_all_sinks()

        path = tmp_path / 't_session.jsonl'
        assert sink.path_for('session') == path
        lines = [json.loads(line) for line in path.read_text().splitlines()]
        assert [r['type'] for r in lines] == ['header', 'game_over', 'footer']
        assert lines[1]['score'] == 30
        assert 'wall_time' in lines[1]

    def test_disabled_module_gets_null_sink(self):
        """Test that modules without enabled records get a NullSink."""
        assert isinstance(nlog.create_sink_for_environment('session'), nlog.NullSink)

    def test_enabled_module_gets_file_sink(self, tmp_path):
        """Test that an enabled module writes into its configured directory."""
        nlog._config['modules']['session'] = {'enabled': True, 'dir': str(tmp_path)}
        sink = nlog.create_sink_for_environment('session', session_name='s')
        assert isinstance(sink, nlog.FileSink)
        sink.emit('session', {'type': 'x'})
        sink.close()
        assert (tmp_path / 's_session.jsonl').exists()

    def test_game_over_emits_session_record(self, game, tmp_path):
        """Test that losing the last life writes a game_over record."""
        sink = nlog.FileSink(log_dir=str(tmp_path), session_name='g')
        nlog.register_sink('session', sink)
        game._state.lives = 1
        game.lose_life()
        sink.flush()
        records = [json.loads(l) for l in (tmp_path / 'g_session.jsonl').read_text().splitlines()]
        assert records[-1]['type'] == 'game_over'
        assert records[-1]['level'] == 1
