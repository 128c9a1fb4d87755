"""Rack resolution CLI commands."""

from __future__ import annotations

from collections import defaultdict

import click
from rich.console import Console
from rich.markup import escape

from rackmap.cli.main import Context, pass_context

console = Console()


@click.command()
@click.argument("names", nargs=-1, required=True)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["plain", "json", "table"]),
    default="plain",
    help="Output format",
)
@pass_context
def resolve(ctx: Context, names: tuple[str, ...], output_format: str) -> None:
    """
    Resolve host names to rack identifiers.

    Unknown hosts resolve to the default rack.

    Examples:

        # One rack per line
        rackmap resolve host1 host2

        # As a JSON object
        rackmap -t cluster.yml resolve host1 --format json
    """
    import json

    from rich.table import Table

    from rackmap.core.cache import CachedStaticMapping

    try:
        registry = ctx.registry
    except click.ClickException as e:
        console.print(f"[red]Error:[/red] {escape(e.format_message())}")
        raise SystemExit(1)

    mapping = CachedStaticMapping(registry)
    racks = mapping.resolve(list(names))

    if output_format == "plain":
        for rack in racks:
            click.echo(rack)

    elif output_format == "json":
        data = [{"name": name, "rack": rack} for name, rack in zip(names, racks)]
        click.echo(json.dumps(data, indent=2))

    elif output_format == "table":
        table = Table(title="Rack Resolution")
        table.add_column("Host", style="cyan")
        table.add_column("Rack")

        for name, rack in zip(names, racks):
            rack_style = "dim" if name not in registry else "green"
            table.add_row(name, f"[{rack_style}]{rack}[/{rack_style}]")

        console.print(table)


@click.command()
@pass_context
def racks(ctx: Context) -> None:
    """List hosts grouped by rack."""
    from rich.table import Table

    try:
        registry = ctx.registry
    except click.ClickException as e:
        console.print(f"[red]Error:[/red] {escape(e.format_message())}")
        raise SystemExit(1)

    if len(registry) == 0:
        console.print(f"[yellow]No racks declared, all hosts on {registry.default_rack}[/yellow]")
        return

    by_rack: dict[str, list[str]] = defaultdict(list)
    for name, rack in registry.to_dict().items():
        by_rack[rack].append(name)

    table = Table(title="Simulated Topology")
    table.add_column("Rack", style="cyan")
    table.add_column("Hosts", justify="right")
    table.add_column("Names")

    for rack in sorted(by_rack):
        hosts = sorted(by_rack[rack])
        table.add_row(rack, str(len(hosts)), ", ".join(hosts))

    console.print(table)
