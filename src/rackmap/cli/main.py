"""Main CLI entry point for rackmap."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from rackmap import __version__
from rackmap.log import setup_logging

console = Console()

# Default path (can be overridden with -t or RACKMAP_TOPOLOGY)
DEFAULT_TOPOLOGY = "topology.yml"


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.topology_path: Path | None = None
        self.verbose: bool = False
        self._registry = None

    @property
    def registry(self):
        """Lazy-load the topology registry."""
        if self._registry is None:
            import yaml
            from pydantic import ValidationError

            from rackmap.core.registry import TopologyRegistry

            if self.topology_path and self.topology_path.exists():
                try:
                    self._registry = TopologyRegistry.load(self.topology_path)
                except (ValidationError, yaml.YAMLError, OSError) as e:
                    raise click.ClickException(f"Invalid topology {self.topology_path}: {e}")
            else:
                # No topology: every host lands on the default rack
                self._registry = TopologyRegistry()
        return self._registry


pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.version_option(version=__version__, prog_name="rackmap")
@click.option(
    "-t",
    "--topology",
    type=click.Path(exists=False, path_type=Path),
    default=DEFAULT_TOPOLOGY,
    envvar="RACKMAP_TOPOLOGY",
    help="Path to topology YAML file",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@pass_context
def cli(ctx: Context, topology: Path, verbose: bool) -> None:
    """
    Rackmap - simulated rack awareness.

    Resolve host names to rack identifiers from a static topology file.
    """
    ctx.topology_path = topology
    ctx.verbose = verbose
    setup_logging(verbose=verbose)


# Import and register subcommands
from rackmap.cli.resolve import racks, resolve
from rackmap.cli.validate import validate

cli.add_command(resolve)
cli.add_command(racks)
cli.add_command(validate)


if __name__ == "__main__":
    cli()
