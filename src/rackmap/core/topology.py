"""Topology constants shared by every switch mapping."""

from __future__ import annotations

# Rack assigned to any host without topology information
DEFAULT_RACK = "/default-rack"

PATH_SEPARATOR = "/"


def normalize_rack(rack: str) -> str:
    """Return the rack identifier as an absolute path ("rack1" -> "/rack1")."""
    rack = rack.strip()
    if not rack:
        raise ValueError("Rack identifier must not be empty")
    if not rack.startswith(PATH_SEPARATOR):
        rack = PATH_SEPARATOR + rack
    return rack.rstrip(PATH_SEPARATOR) or PATH_SEPARATOR
