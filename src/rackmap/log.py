"""Logging configuration."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", verbose: bool = False, console: Console | None = None) -> None:
    """
    Route rackmap log records through rich.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)
        verbose: Force DEBUG regardless of level
        console: Console to write to (defaults to stderr)
    """
    if verbose:
        level = "DEBUG"
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown logging level: {level}")

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root = logging.getLogger("rackmap")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)
