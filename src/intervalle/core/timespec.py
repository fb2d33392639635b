"""Parsed time specification types."""

from dataclasses import dataclass
from datetime import datetime, time, timedelta
from enum import Enum
from typing import TypeAlias

from dateutil.relativedelta import relativedelta


class Keyword(Enum):
    """Named points in time, resolved against the anchor."""

    NOW = "now"
    TODAY = "today"
    TOMORROW = "tomorrow"
    YESTERDAY = "yesterday"


class Sign(Enum):
    """Direction of a relative offset."""

    BEFORE = "-"
    AFTER = "+"


class Unit(Enum):
    """Granularity of a relative offset.

    The value is the matching keyword argument of ``timedelta`` or
    ``relativedelta``.
    """

    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @property
    def is_calendar(self) -> bool:
        """True for units whose length depends on the calendar."""
        return self in (Unit.MONTHS, Unit.YEARS)


@dataclass(frozen=True)
class Absolute:
    """A fully specified civil date-time.

    Fields must form a valid date-time (month 1-12, a day that exists in
    that month, hour 0-23, minute and second 0-59); otherwise ValueError.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        try:
            self.to_datetime()
        except ValueError as e:
            raise ValueError(f"invalid date-time {self}: {e}") from e

    def to_datetime(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )


@dataclass(frozen=True)
class TimeOfDay:
    """An absolute time whose date was omitted; the anchor supplies it."""

    hour: int
    minute: int
    second: int = 0

    def __post_init__(self) -> None:
        try:
            self.to_time()
        except ValueError as e:
            raise ValueError(f"invalid time {self}: {e}") from e

    def to_time(self) -> time:
        return time(self.hour, self.minute, self.second)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


@dataclass(frozen=True)
class Named:
    """One of the ``now``/``today``/``tomorrow``/``yesterday`` keywords."""

    keyword: Keyword

    def __str__(self) -> str:
        return self.keyword.value


@dataclass(frozen=True)
class Relative:
    """An offset from the anchor, e.g. ``-1hour`` or ``+2weeks``."""

    sign: Sign
    amount: int
    unit: Unit

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"amount must be non-negative, got {self.amount}")

    @property
    def delta(self) -> timedelta | relativedelta:
        """Signed offset to add to the anchor.

        Months and years are ``relativedelta`` so that the day of month
        is clamped to the end of the target month.
        """
        amount = -self.amount if self.sign is Sign.BEFORE else self.amount
        if self.unit.is_calendar:
            return relativedelta(**{self.unit.value: amount})
        return timedelta(**{self.unit.value: amount})

    def __str__(self) -> str:
        return f"{self.sign.value}{self.amount}{self.unit.value}"


TimeSpec: TypeAlias = Absolute | TimeOfDay | Named | Relative
