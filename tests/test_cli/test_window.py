"""Tests for CLI window command."""

import json

import pytest
from click.testing import CliRunner

from intervalle.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def _window(runner, *args):
    return runner.invoke(cli, ["--anchor", "2012-10-30 18:17:16", "window", "--json", *args])


class TestWindow:
    def test_both_bounds(self, runner, isolated_dirs):
        result = _window(runner, "--since", "yesterday", "--until", "-1h")
        assert result.exit_code == 0, result.output

        data = json.loads(result.output)
        assert data == {
            "anchor": "2012-10-30 18:17:16",
            "since": "2012-10-29 00:00:00",
            "until": "2012-10-30 17:17:16",
        }

    def test_open_window(self, runner, isolated_dirs):
        data = json.loads(_window(runner).output)
        assert data["since"] is None
        assert data["until"] is None

    def test_equals_syntax(self, runner, isolated_dirs):
        result = _window(runner, "--since=-2days")
        assert json.loads(result.output)["since"] == "2012-10-28 18:17:16"

    def test_reversed_bounds(self, runner, isolated_dirs):
        result = _window(runner, "--since", "tomorrow", "--until", "today")
        assert result.exit_code == 1
        assert "must not be after" in result.output

    def test_invalid_bound(self, runner, isolated_dirs):
        result = _window(runner, "--since", "2013-02-29")
        assert result.exit_code == 2
        assert "invalid day: 29" in result.output

    def test_table_output(self, runner, isolated_dirs):
        result = runner.invoke(
            cli, ["--anchor", "2012-10-30 18:17:16", "window", "--since", "today"]
        )
        assert result.exit_code == 0, result.output
        assert "2012-10-30 00:00:00" in result.output
        assert "open" in result.output
