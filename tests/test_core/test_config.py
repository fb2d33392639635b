"""Tests for configuration loading."""

import os
from datetime import datetime

import pytest

from intervalle.core.config import DEFAULT_FORMAT, IntervalleConfig, load_config, parse_anchor
from intervalle.core.exceptions import ConfigError


class TestIntervalleConfig:
    """Tests for IntervalleConfig class."""

    def test_empty_config(self):
        """Test default configuration."""
        config = IntervalleConfig()
        assert config.anchor is None
        assert config.output_format == DEFAULT_FORMAT


class TestParseAnchor:
    """Tests for anchor values."""

    def test_full_date_time(self):
        assert parse_anchor("2012-10-30 18:17:16", "test") == datetime(2012, 10, 30, 18, 17, 16)

    def test_date_only(self):
        assert parse_anchor("2012-10-30", "test") == datetime(2012, 10, 30)

    def test_relative_anchor_rejected(self):
        """Test an anchor that itself needs an anchor is an error."""
        with pytest.raises(ConfigError, match="absolute"):
            parse_anchor("yesterday", "test")

    def test_time_only_rejected(self):
        with pytest.raises(ConfigError, match="absolute"):
            parse_anchor("18:17", "test")

    def test_invalid_anchor(self):
        with pytest.raises(ConfigError, match="invalid month"):
            parse_anchor("2012-13-01", "test")


class TestLoadConfig:
    """Tests for config loading."""

    def test_no_file_no_env(self, clean_env):
        config = load_config()
        assert config == IntervalleConfig()

    def test_load_config_from_file(self, sample_config, clean_env):
        """Test loading config from a file."""
        config = load_config(sample_config)

        assert config.output_format == "%d/%m/%Y %H:%M"
        assert config.anchor == datetime(2012, 10, 30, 18, 17, 16)

    def test_env_anchor_without_file(self, clean_env):
        os.environ["INTERVALLE_ANCHOR"] = "2024-08-08"
        assert load_config().anchor == datetime(2024, 8, 8)

    def test_env_overrides_file_anchor(self, sample_config, clean_env):
        """Test INTERVALLE_ANCHOR takes precedence over the file."""
        os.environ["INTERVALLE_ANCHOR"] = "2024-08-08 14:10:11"
        config = load_config(sample_config)

        assert config.anchor == datetime(2024, 8, 8, 14, 10, 11)
        assert config.output_format == "%d/%m/%Y %H:%M"

    def test_bad_env_anchor(self, clean_env):
        os.environ["INTERVALLE_ANCHOR"] = "+1d"
        with pytest.raises(ConfigError, match="INTERVALLE_ANCHOR"):
            load_config()

    def test_load_invalid_toml(self, temp_dir):
        bad = temp_dir / "intervalle.toml"
        bad.write_text("anchor = \n")

        with pytest.raises(ConfigError, match="Cannot parse"):
            load_config(bad)

    def test_anchor_must_be_string(self, temp_dir, clean_env):
        bad = temp_dir / "intervalle.toml"
        bad.write_text("anchor = 2012\n")

        with pytest.raises(ConfigError, match="must be a string"):
            load_config(bad)

    def test_format_must_be_string(self, temp_dir, clean_env):
        bad = temp_dir / "intervalle.toml"
        bad.write_text("format = 1\n")

        with pytest.raises(ConfigError, match="must be a string"):
            load_config(bad)
