"""Main CLI entry point using rich-click."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import rich_click as click
from rich.console import Console

from intervalle.cli.params import TIMESPEC
from intervalle.core.config import IntervalleConfig, load_config
from intervalle.core.timespec import TimeSpec

# Configure rich-click
click.rich_click.SHOW_ARGUMENTS = True

# Global console for Rich output
console = Console()

# Context object to pass state between commands
class Context:
    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.anchor: Optional[TimeSpec] = None
        self.verbose: bool = False
        self._config: Optional[IntervalleConfig] = None

    @property
    def config(self) -> IntervalleConfig:
        """Configuration, loaded on first use."""
        if self._config is None:
            self._config = load_config(self.config_path)
        return self._config

    def get_anchor(self) -> datetime:
        """Anchor for resolution: --anchor, then config, then the clock."""
        from intervalle.core.resolve import now, resolve

        if self.anchor is not None:
            return resolve(self.anchor, now())
        return self.config.anchor or now()

pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, path_type=Path),
    help="TOML file with anchor and format settings",
)
@click.option(
    "--anchor", "-a",
    type=TIMESPEC,
    help="Reference time used as 'now' (any time specification)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.version_option(package_name="intervalle")
@pass_context
def cli(ctx: Context, config: Optional[Path], anchor: Optional[TimeSpec], verbose: bool) -> None:
    """journalctl-style time specification parser.

    Recognize values such as "yesterday", "-2hours" or
    "2012-10-30 18:17" and resolve them to a date-time.
    """
    ctx.config_path = config
    ctx.anchor = anchor
    ctx.verbose = verbose

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from intervalle.cli.parse import parse
from intervalle.cli.window import window

cli.add_command(parse)
cli.add_command(window)


def main() -> None:
    """Entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
