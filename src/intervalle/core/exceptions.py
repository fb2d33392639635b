"""Custom exceptions for intervalle."""


class IntervalleError(Exception):
    """Base exception for intervalle."""


class ParseError(IntervalleError, ValueError):
    """A time specification could not be recognized.

    Attributes:
        text: The input that was being parsed (surrounding whitespace removed).
        offset: Zero-based column in ``text`` where the problem starts.
        reason: Short description of the problem, without the input.
    """

    def __init__(self, text: str, offset: int, reason: str) -> None:
        super().__init__(f"{reason} in {text!r} at column {offset}")
        self.text = text
        self.offset = offset
        self.reason = reason

    def diagnostic(self) -> str:
        """Render the input with a caret under the offending column."""
        pad = " " * self.offset
        return f"    |\n{self.offset:3} | {self.text}\n    | {pad}^ {self.reason}"


class UnrecognizedFormat(ParseError):
    """Input matches none of the keyword, relative or absolute forms."""

    def __init__(self, text: str) -> None:
        super().__init__(text, 0, "unrecognized time specification")


class InvalidField(ParseError):
    """A numeric field is well formed but out of range (e.g. month 13)."""

    def __init__(self, text: str, offset: int, field: str, value: int) -> None:
        super().__init__(text, offset, f"invalid {field}: {value}")
        self.field = field
        self.value = value


class UnrecognizedUnit(ParseError):
    """A relative offset uses a unit word outside the unit table."""

    def __init__(self, text: str, offset: int, unit: str) -> None:
        super().__init__(text, offset, f"unrecognized unit {unit!r}")
        self.unit = unit


class MalformedNumber(ParseError):
    """A digit run has the wrong width or is too large to use."""

    def __init__(self, text: str, offset: int, field: str, token: str) -> None:
        super().__init__(text, offset, f"malformed {field}: {token!r}")
        self.field = field
        self.token = token


class OutOfRangeError(IntervalleError, OverflowError):
    """Resolution produced a date-time outside years 1-9999."""


class InvalidWindow(IntervalleError, ValueError):
    """The --since bound resolves to a point after the --until bound."""


class ConfigError(IntervalleError):
    """Error in configuration."""
