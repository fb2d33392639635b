"""Recognizer for journalctl-style ``--since``/``--until`` values.

Accepted forms (all case-sensitive)::

    now | today | tomorrow | yesterday
    -1hour, +2days, -30min, +90        (sign, count, optional unit)
    2012-10-30 18:17:16, 2012-10-30 18:17, 2012-10-30, 18:17:16, 18:17

A relative count without a unit is in seconds. Recognition never consults
the clock; see :mod:`intervalle.core.resolve` for turning the result into a
date-time.
"""

import calendar
import logging
import re

from intervalle.core.exceptions import (
    InvalidField,
    MalformedNumber,
    UnrecognizedFormat,
    UnrecognizedUnit,
)
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

logger = logging.getLogger(__name__)

_KEYWORDS: dict[str, Keyword] = {keyword.value: keyword for keyword in Keyword}

_UNITS: dict[str, Unit] = {
    "": Unit.SECONDS,
    "s": Unit.SECONDS,
    "sec": Unit.SECONDS,
    "second": Unit.SECONDS,
    "seconds": Unit.SECONDS,
    "m": Unit.MINUTES,
    "min": Unit.MINUTES,
    "minute": Unit.MINUTES,
    "minutes": Unit.MINUTES,
    "h": Unit.HOURS,
    "hour": Unit.HOURS,
    "hours": Unit.HOURS,
    "d": Unit.DAYS,
    "day": Unit.DAYS,
    "days": Unit.DAYS,
    "w": Unit.WEEKS,
    "week": Unit.WEEKS,
    "weeks": Unit.WEEKS,
    "M": Unit.MONTHS,
    "month": Unit.MONTHS,
    "months": Unit.MONTHS,
    "y": Unit.YEARS,
    "year": Unit.YEARS,
    "years": Unit.YEARS,
}

# Largest count every unit can express as a timedelta/relativedelta.
MAX_AMOUNT = 999_999_999

_RELATIVE_RE = re.compile(r"([-+])([0-9]+)(.*)")

# Digit runs are matched loosely so that a wrong width is reported as a
# malformed number rather than an unrecognized format.
_DATE = r"(?P<year>[0-9]+)-(?P<month>[0-9]+)-(?P<day>[0-9]+)"
_TIME = r"(?P<hour>[0-9]+):(?P<minute>[0-9]+)(?::(?P<second>[0-9]+))?"
_DATETIME_RE = re.compile(rf"{_DATE}(?: {_TIME})?")
_TIME_RE = re.compile(_TIME)

_WIDTHS: dict[str, int] = {
    "year": 4,
    "month": 2,
    "day": 2,
    "hour": 2,
    "minute": 2,
    "second": 2,
}


def recognize(text: str) -> TimeSpec:
    """Recognize a time specification without resolving it.

    Args:
        text: The raw option value. Surrounding whitespace is ignored.

    Returns:
        One of :class:`Absolute`, :class:`TimeOfDay`, :class:`Named` or
        :class:`Relative`.

    Raises:
        UnrecognizedFormat: *text* matches none of the accepted forms.
        UnrecognizedUnit: a relative offset has an unknown unit word.
        MalformedNumber: a field has the wrong number of digits, or a
            relative count is too large.
        InvalidField: a date or time field is out of range.
    """
    value = text.strip()

    if value in _KEYWORDS:
        spec: TimeSpec = Named(_KEYWORDS[value])
    elif value[:1] in ("-", "+"):
        spec = _recognize_relative(value)
    else:
        spec = _recognize_absolute(value)

    logger.debug(f"Recognized {value!r} as {spec!r}")
    return spec


def _recognize_relative(value: str) -> Relative:
    match = _RELATIVE_RE.fullmatch(value)
    if not match:
        raise UnrecognizedFormat(value)

    sign, digits, word = match.groups()
    unit = _UNITS.get(word)
    if unit is None:
        raise UnrecognizedUnit(value, match.start(3), word)

    # Compare widths first: int() refuses very long digit strings.
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(MAX_AMOUNT)) or int(significant) > MAX_AMOUNT:
        raise MalformedNumber(value, match.start(2), "amount", digits)

    return Relative(Sign(sign), int(significant), unit)


def _recognize_absolute(value: str) -> Absolute | TimeOfDay:
    match = _DATETIME_RE.fullmatch(value) or _TIME_RE.fullmatch(value)
    if not match:
        raise UnrecognizedFormat(value)

    fields = _validate_fields(value, match)
    if "year" not in fields:
        return TimeOfDay(**fields)
    return Absolute(**fields)


def _validate_fields(value: str, match: re.Match[str]) -> dict[str, int]:
    """Check digit widths and ranges of every matched field, in order."""
    fields: dict[str, int] = {}

    for name, token in match.groupdict().items():
        if token is None:
            continue

        offset = match.start(name)
        if len(token) != _WIDTHS[name]:
            raise MalformedNumber(value, offset, name, token)

        number = int(token)
        low, high = _field_range(name, fields)
        if not low <= number <= high:
            raise InvalidField(value, offset, name, number)
        fields[name] = number

    return fields


def _field_range(name: str, fields: dict[str, int]) -> tuple[int, int]:
    """Inclusive bounds for *name* given the fields validated so far."""
    if name == "year":
        return 1, 9999
    if name == "month":
        return 1, 12
    if name == "day":
        return 1, calendar.monthrange(fields["year"], fields["month"])[1]
    if name == "hour":
        return 0, 23
    return 0, 59
