"""intervalle: journalctl-style --since/--until time specifications."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("intervalle")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"

from intervalle.core.config import IntervalleConfig, load_config
from intervalle.core.exceptions import (
    ConfigError,
    IntervalleError,
    InvalidField,
    InvalidWindow,
    MalformedNumber,
    OutOfRangeError,
    ParseError,
    UnrecognizedFormat,
    UnrecognizedUnit,
)
from intervalle.core.grammar import recognize
from intervalle.core.resolve import parse, resolve, window
from intervalle.core.timespec import (
    Absolute,
    Keyword,
    Named,
    Relative,
    Sign,
    TimeOfDay,
    TimeSpec,
    Unit,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "recognize",
    "resolve",
    "parse",
    "window",
    # Types
    "TimeSpec",
    "Absolute",
    "TimeOfDay",
    "Named",
    "Relative",
    "Keyword",
    "Sign",
    "Unit",
    # Config
    "load_config",
    "IntervalleConfig",
    # Exceptions
    "IntervalleError",
    "ParseError",
    "UnrecognizedFormat",
    "InvalidField",
    "UnrecognizedUnit",
    "MalformedNumber",
    "OutOfRangeError",
    "InvalidWindow",
    "ConfigError",
]
