"""Parse command - recognize and resolve a single time specification."""

import json
from dataclasses import asdict
from enum import Enum
from typing import Any

import rich_click as click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from intervalle.cli.main import Context, pass_context
from intervalle.core.exceptions import IntervalleError, ParseError
from intervalle.core.timespec import TimeSpec

console = Console()


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("spec")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_context
def parse(ctx: Context, spec: str, as_json: bool) -> None:
    """Recognize SPEC and resolve it against the anchor.

    Signed offsets may be passed directly or after "--":

        intervalle parse -- -1hour
    """
    from intervalle.core.grammar import recognize
    from intervalle.core.resolve import resolve

    try:
        timespec = recognize(spec)
        anchor = ctx.get_anchor()
        resolved = resolve(timespec, anchor)
        fmt = ctx.config.output_format
    except ParseError as e:
        console.print(f"[red]Error:[/red] {escape(e.reason)}", highlight=False)
        console.print(e.diagnostic(), markup=False, highlight=False)
        raise SystemExit(1)
    except IntervalleError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise SystemExit(1)

    if as_json:
        data = {
            "input": spec,
            "kind": type(timespec).__name__,
            "fields": spec_fields(timespec),
            "anchor": anchor.isoformat(sep=" "),
            "resolved": resolved.isoformat(sep=" "),
        }
        click.echo(json.dumps(data, indent=2))
        return

    table = Table(title=spec)
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Kind", type(timespec).__name__)
    for name, value in spec_fields(timespec).items():
        table.add_row(name.capitalize(), str(value))
    table.add_row("Anchor", anchor.strftime(fmt))
    table.add_row("Resolved", f"[bold green]{resolved.strftime(fmt)}[/bold green]")

    console.print(table)


def spec_fields(timespec: TimeSpec) -> dict[str, Any]:
    """Plain field mapping of a spec, with enums replaced by their values."""
    fields = asdict(timespec)
    return {k: v.value if isinstance(v, Enum) else v for k, v in fields.items()}
