"""Resolution of recognized time specifications against an anchor."""

import logging
from datetime import datetime, timedelta

from intervalle.core.exceptions import InvalidWindow, OutOfRangeError
from intervalle.core.grammar import recognize
from intervalle.core.timespec import Absolute, Keyword, Named, Relative, TimeOfDay, TimeSpec

logger = logging.getLogger(__name__)


def resolve(spec: TimeSpec, anchor: datetime) -> datetime:
    """Turn *spec* into a civil date-time using *anchor* as "now".

    ``Absolute`` values ignore the anchor. Sub-second precision on the
    anchor is dropped.

    Raises:
        OutOfRangeError: The result falls outside years 1-9999.
    """
    anchor = anchor.replace(microsecond=0)

    try:
        result = _resolve(spec, anchor)
    except OverflowError as e:
        raise OutOfRangeError(f"{spec} from {anchor} is out of range") from e

    logger.debug(f"Resolved {spec} against {anchor} to {result}")
    return result


def _resolve(spec: TimeSpec, anchor: datetime) -> datetime:
    if isinstance(spec, Absolute):
        return spec.to_datetime()

    if isinstance(spec, TimeOfDay):
        return datetime.combine(anchor.date(), spec.to_time())

    if isinstance(spec, Named):
        if spec.keyword is Keyword.NOW:
            return anchor
        midnight = datetime.combine(anchor.date(), datetime.min.time())
        if spec.keyword is Keyword.TOMORROW:
            return midnight + timedelta(days=1)
        if spec.keyword is Keyword.YESTERDAY:
            return midnight - timedelta(days=1)
        return midnight

    if isinstance(spec, Relative):
        try:
            return anchor + spec.delta
        except ValueError as e:
            # relativedelta reports a year outside 1-9999 as ValueError
            raise OverflowError(str(e)) from e

    raise TypeError(f"Not a time specification: {spec!r}")


def now() -> datetime:
    """Current local wall-clock time, without zone or microseconds."""
    return datetime.now().replace(microsecond=0)


def parse(text: str, anchor: datetime | None = None) -> datetime:
    """Recognize and resolve *text* in one step.

    Args:
        text: A ``--since``/``--until`` style value.
        anchor: Reference time; defaults to the current local time.
    """
    return resolve(recognize(text), anchor or now())


def window(
    since: str | TimeSpec | None,
    until: str | TimeSpec | None,
    anchor: datetime | None = None,
) -> tuple[datetime | None, datetime | None]:
    """Resolve an optional since/until pair against one shared anchor.

    Bounds may be raw strings or already recognized specs.

    Raises:
        InvalidWindow: Both bounds are given and *since* is after *until*.
    """
    anchor = anchor or now()
    start = _bound(since, anchor)
    end = _bound(until, anchor)

    if start is not None and end is not None and start > end:
        raise InvalidWindow(f"--since ({start}) must not be after --until ({end})")

    return start, end


def _bound(value: str | TimeSpec | None, anchor: datetime) -> datetime | None:
    if value is None:
        return None
    spec = recognize(value) if isinstance(value, str) else value
    return resolve(spec, anchor)
