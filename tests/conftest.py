"""Pytest configuration and fixtures."""

import os
import tempfile
from datetime import datetime
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def anchor():
    """Reference "now" shared by the resolution tests."""
    return datetime(2012, 10, 30, 18, 17, 16)


@pytest.fixture
def sample_config(temp_dir):
    """Create a sample configuration file."""
    config_content = '''
anchor = "2012-10-30 18:17:16"
format = "%d/%m/%Y %H:%M"
'''
    config_file = temp_dir / "intervalle.toml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def clean_env():
    """Clean environment variables that might affect tests."""
    env_vars = ["INTERVALLE_ANCHOR"]
    old_values = {var: os.environ.get(var) for var in env_vars}

    for var in env_vars:
        if var in os.environ:
            del os.environ[var]

    yield

    for var, value in old_values.items():
        if value is not None:
            os.environ[var] = value
        elif var in os.environ:
            del os.environ[var]


@pytest.fixture
def isolated_dirs(temp_dir, monkeypatch, clean_env):
    """Run from an empty directory with an empty home and no anchor override."""
    work = temp_dir / "work"
    home = temp_dir / "home"
    work.mkdir()
    home.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setenv("HOME", str(home))
    return work
