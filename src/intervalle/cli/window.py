"""Window command - resolve a --since/--until pair."""

import json
from typing import Optional

import rich_click as click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from intervalle.cli.main import Context, pass_context
from intervalle.cli.params import TIMESPEC
from intervalle.core.exceptions import IntervalleError
from intervalle.core.timespec import TimeSpec

console = Console()


@click.command()
@click.option("--since", "-S", type=TIMESPEC, help="Start of the window")
@click.option("--until", "-U", type=TIMESPEC, help="End of the window")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_context
def window(
    ctx: Context,
    since: Optional[TimeSpec],
    until: Optional[TimeSpec],
    as_json: bool,
) -> None:
    """Resolve both bounds of a time window against one anchor.

    Either bound may be omitted, meaning the window is open on that side.
    """
    from intervalle.core.resolve import window as resolve_window

    try:
        anchor = ctx.get_anchor()
        start, end = resolve_window(since, until, anchor)
        fmt = ctx.config.output_format
    except IntervalleError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise SystemExit(1)

    if as_json:
        data = {
            "anchor": anchor.isoformat(sep=" "),
            "since": start.isoformat(sep=" ") if start else None,
            "until": end.isoformat(sep=" ") if end else None,
        }
        click.echo(json.dumps(data, indent=2))
        return

    table = Table(title="Window")
    table.add_column("Bound", style="cyan")
    table.add_column("Value")

    table.add_row("Since", start.strftime(fmt) if start else "[dim]open[/dim]")
    table.add_row("Until", end.strftime(fmt) if end else "[dim]open[/dim]")
    table.add_row("Anchor", anchor.strftime(fmt))

    console.print(table)
