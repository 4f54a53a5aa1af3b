"""
Tests for configuration loading and validation.
"""

import pytest

from neonbreak.config import BrickLayout, ConfigError, GameConfig, load_config


class TestDefaults:
    """Defaults reproduce the classic layout."""

    def test_screen(self, config):
        """Test that the default surface is 600x400."""
        assert (config.width, config.height) == (600, 400)

    def test_bricks(self, config):
        """Test that the default brick layout is 7 columns of 70x20 bricks."""
        layout = config.bricks
        assert (layout.columns, layout.start_rows, layout.max_rows) == (7, 3, 6)
        assert (layout.width, layout.height, layout.padding) == (70, 20, 10)
        assert (layout.offset_top, layout.offset_left) == (40, 25)
        assert layout.points == 10

    def test_derived_values(self, config):
        """Test that paddle position, band and level speed derive from the fields."""
        assert config.paddle_y == 375
        assert config.paddle_band_y == 377
        assert config.level_speed(1) == 3.5
        assert config.level_speed(4) == 5.0

    def test_frozen(self, config):
        """Test that a loaded config cannot be modified."""
        with pytest.raises(Exception):
            config.width = 10


class TestValidation:
    """Invalid values are rejected."""

    def test_negative_width(self):
        """Test that a non-positive width is rejected."""
        with pytest.raises(ValueError):
            GameConfig(width=-1)

    def test_unknown_key(self):
        """Test that unknown settings are rejected."""
        with pytest.raises(ValueError):
            GameConfig(colour='red')

    def test_start_rows_above_max(self):
        """Test that starting rows may not exceed the row cap."""
        with pytest.raises(ValueError, match='start_rows'):
            BrickLayout(start_rows=7, max_rows=6)

    def test_paddle_wider_than_screen(self):
        """Test that the paddle must fit on the screen."""
        with pytest.raises(ValueError, match='paddle_width'):
            GameConfig(width=80)


class TestLoadConfig:
    """YAML loading and overrides."""

    def test_no_file_gives_defaults(self):
        """Test that no file means the default config."""
        assert load_config() == GameConfig()

    def test_yaml_values(self, tmp_path):
        """Test that YAML values replace defaults, including nested brick settings."""
        path = tmp_path / 'game.yaml'
        path.write_text(
            "width: 800\n"
            "starting_lives: 5\n"
            "bricks:\n"
            "  columns: 9\n"
            "  max_rows: 8\n"
        )
        config = load_config(path)
        assert config.width == 800
        assert config.starting_lives == 5
        assert config.bricks.columns == 9
        assert config.bricks.max_rows == 8
        assert config.bricks.width == 70

    def test_empty_yaml(self, tmp_path):
        """Test that an empty file means the default config."""
        path = tmp_path / 'empty.yaml'
        path.write_text("")
        assert load_config(path) == GameConfig()

    def test_overrides_win(self, tmp_path):
        """Test that overrides beat the file and None overrides are skipped."""
        path = tmp_path / 'game.yaml'
        path.write_text("width: 800\n")
        config = load_config(path, overrides={'width': 700, 'height': None})
        assert config.width == 700
        assert config.height == 400

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises ConfigError."""
        with pytest.raises(ConfigError, match='Cannot read'):
            load_config(tmp_path / 'missing.yaml')

    def test_bad_yaml(self, tmp_path):
        """Test that malformed YAML raises ConfigError."""
        path = tmp_path / 'bad.yaml'
        path.write_text("width: [1, 2\n")
        with pytest.raises(ConfigError, match='Invalid YAML'):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        """Test that a YAML list is rejected."""
        path = tmp_path / 'list.yaml'
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError, match='mapping'):
            load_config(path)

    def test_invalid_value_names_file(self, tmp_path):
        """Test that validation errors name the offending file."""
        path = tmp_path / 'neg.yaml'
        path.write_text("fps: 0\n")
        with pytest.raises(ConfigError, match='neg.yaml'):
            load_config(path)

    def test_undecodable_file(self, tmp_path):
        """Test that a file that is not UTF-8 raises ConfigError."""
        path = tmp_path / 'binary.yaml'
        path.write_bytes(b'width: \xff\xfe\n')
        with pytest.raises(ConfigError, match='binary.yaml'):
            load_config(path)
