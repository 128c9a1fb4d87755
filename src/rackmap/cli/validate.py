"""Validation CLI command."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from rackmap.cli.main import Context, pass_context

console = Console()


@click.command()
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on warnings",
)
@pass_context
def validate(ctx: Context, strict: bool) -> None:
    """
    Validate a topology file.

    Checks schema compliance and warns about topologies that
    only simulate a single rack.

    Examples:

        rackmap -t cluster.yml validate --strict
    """
    errors: list[str] = []
    warnings: list[str] = []

    console.print("[bold]Validating topology...[/bold]")
    if not ctx.topology_path or not ctx.topology_path.exists():
        errors.append(f"Topology not found: {ctx.topology_path}")
        console.print(f"  [red]✗[/red] Topology not found: {ctx.topology_path}")
    else:
        try:
            registry = ctx.registry
            console.print(f"  [green]✓[/green] Topology loaded: {len(registry)} hosts")
        except click.ClickException as e:
            errors.append(escape(e.format_message()))
            console.print(f"  [red]✗[/red] {escape(e.format_message())}")
        else:
            racks = registry.racks()
            if len(racks) < 2:
                warnings.append(f"Only {len(racks)} rack declared; topology is single-rack")
                console.print("  [yellow]![/yellow] Topology is single-rack")
            if registry.default_rack in racks:
                warnings.append(f"Hosts explicitly assigned to default rack {registry.default_rack}")
                console.print("  [yellow]![/yellow] Hosts assigned to the default rack")

    # Summary
    console.print("\n[bold]Validation Summary[/bold]")
    console.print(f"  Errors: {len(errors)}")
    console.print(f"  Warnings: {len(warnings)}")

    if errors:
        console.print("\n[red bold]Validation failed[/red bold]")
        for err in errors:
            console.print(f"  [red]•[/red] {err}")
        raise SystemExit(1)

    if warnings and strict:
        console.print("\n[yellow bold]Validation failed (strict mode)[/yellow bold]")
        for warn in warnings:
            console.print(f"  [yellow]•[/yellow] {warn}")
        raise SystemExit(1)

    if warnings:
        console.print("\n[yellow]Warnings:[/yellow]")
        for warn in warnings:
            console.print(f"  [yellow]•[/yellow] {warn}")

    console.print("\n[green bold]Validation passed[/green bold]")
