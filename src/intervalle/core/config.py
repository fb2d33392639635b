"""Configuration: a fixed anchor and the output format.

Both come from an optional TOML file passed explicitly::

    anchor = "2012-10-30 18:17:16"   # any full date, with or without time
    format = "%Y-%m-%d %H:%M:%S"     # strftime format for printed results

INTERVALLE_ANCHOR in the environment takes precedence over the file's anchor.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from intervalle.core.exceptions import ConfigError, ParseError
from intervalle.core.grammar import recognize
from intervalle.core.timespec import Absolute

DEFAULT_FORMAT = "%Y-%m-%d %H:%M:%S"

ANCHOR_ENV = "INTERVALLE_ANCHOR"


@dataclass(frozen=True)
class IntervalleConfig:
    """Loaded configuration."""

    anchor: datetime | None = None
    output_format: str = DEFAULT_FORMAT


def parse_anchor(value: str, source: str) -> datetime:
    """Parse a configured anchor, which must not depend on another anchor."""
    try:
        spec = recognize(value)
    except ParseError as e:
        raise ConfigError(f"Invalid anchor {value!r} in {source}: {e.reason}") from e

    if not isinstance(spec, Absolute):
        raise ConfigError(f"Anchor in {source} must be an absolute date, got {value!r}")

    return spec.to_datetime()


def load_config(path: Path | str | None = None) -> IntervalleConfig:
    """Load configuration from *path* (if given) and the environment.

    Raises:
        ConfigError: The file is not valid TOML, or a value has the wrong
            type or is not a usable anchor.
    """
    data: dict = {}
    if path is not None:
        path = Path(path)
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Cannot parse {path}: {e}") from e

    output_format = data.get("format", DEFAULT_FORMAT)
    if not isinstance(output_format, str):
        raise ConfigError(f"format in {path} must be a string")

    anchor = None
    if env_anchor := os.environ.get(ANCHOR_ENV):
        anchor = parse_anchor(env_anchor, ANCHOR_ENV)
    elif "anchor" in data:
        if not isinstance(data["anchor"], str):
            raise ConfigError(f"anchor in {path} must be a string")
        anchor = parse_anchor(data["anchor"], str(path))

    return IntervalleConfig(anchor=anchor, output_format=output_format)
