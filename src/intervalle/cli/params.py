"""Click parameter type for --since/--until style options."""

from typing import Any

import click

from intervalle.core.exceptions import ParseError
from intervalle.core.grammar import recognize
from intervalle.core.timespec import Absolute, Named, Relative, TimeOfDay


class TimeSpecParam(click.ParamType):
    """Convert an option value into a recognized time specification.

    Example:
        @click.option("--since", type=TIMESPEC)
        def logs(since): ...

    Resolution is left to the command, so several options can share one
    anchor.
    """

    name = "timespec"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, (Absolute, TimeOfDay, Named, Relative)):
            return value

        try:
            return recognize(value)
        except ParseError as e:
            self.fail(f"{value!r}: {e.reason}", param, ctx)


TIMESPEC = TimeSpecParam()
