"""Core parsing and resolution for intervalle."""

from .exceptions import (
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
from .grammar import recognize
from .resolve import parse, resolve, window
from .timespec import Absolute, Keyword, Named, Relative, Sign, TimeOfDay, TimeSpec, Unit

__all__ = [
    # Exceptions
    "ConfigError",
    "IntervalleError",
    "InvalidField",
    "InvalidWindow",
    "MalformedNumber",
    "OutOfRangeError",
    "ParseError",
    "UnrecognizedFormat",
    "UnrecognizedUnit",
    # Types
    "Absolute",
    "Keyword",
    "Named",
    "Relative",
    "Sign",
    "TimeOfDay",
    "TimeSpec",
    "Unit",
    # Operations
    "parse",
    "recognize",
    "resolve",
    "window",
]
