"""Static host to rack registry used to simulate rack awareness."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml

from rackmap.core.mapping import SwitchMapping
from rackmap.core.schema import TopologySchema
from rackmap.core.topology import DEFAULT_RACK

logger = logging.getLogger(__name__)


def _require_str(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a string, got {type(value).__name__}")
    return value


class TopologyRegistry(SwitchMapping):
    """
    In-memory host name to rack table.

    Hosts that were never added (or were added before the last reset)
    resolve to the default rack. A single lock guards the table, so
    resolve never observes a partially cleared map.
    """

    def __init__(self, default_rack: str = DEFAULT_RACK) -> None:
        self._default_rack = default_rack
        self._racks: dict[str, str] = {}  # name -> rack
        self._lock = threading.Lock()

    @classmethod
    def load(cls, path: str | Path) -> TopologyRegistry:
        """Load registry from a YAML topology file."""
        path = Path(path)
        with path.open() as f:
            data = yaml.safe_load(f) or {}

        # Validate with schema
        schema = TopologySchema.model_validate(data)

        registry = cls()
        registry.add_entries(schema.racks)
        return registry

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TopologyRegistry:
        """Create registry from dictionary."""
        schema = TopologySchema.model_validate(data)
        registry = cls()
        registry.add_entries(schema.racks)
        return registry

    @property
    def default_rack(self) -> str:
        return self._default_rack

    def add_entry(self, name: str, rack: str) -> None:
        """Add or overwrite the rack for a host."""
        _require_str(name, "Host name")
        _require_str(rack, "Rack identifier")
        with self._lock:
            self._racks[name] = rack
        logger.debug("Added %s to rack %s", name, rack)

    def add_entries(self, racks: Mapping[str, str]) -> None:
        """Add several hosts under a single lock acquisition."""
        for name, rack in racks.items():
            _require_str(name, "Host name")
            _require_str(rack, "Rack identifier")
        with self._lock:
            self._racks.update(racks)
        logger.debug("Added %d hosts", len(racks))

    def resolve(self, names: Iterable[str]) -> list[str]:
        """Resolve each name to its rack, or the default rack if unknown."""
        if isinstance(names, str):
            raise TypeError("names must be a sequence of host names, not a string")
        names = [_require_str(name, "Host name") for name in names]
        with self._lock:
            return [self._racks.get(name, self._default_rack) for name in names]

    def reset(self) -> None:
        """Remove every entry."""
        with self._lock:
            count = len(self._racks)
            self._racks.clear()
        logger.debug("Reset topology registry (%d entries removed)", count)

    def reload_cached_mappings(self, names: list[str] | None = None) -> None:
        # Nothing to reload: all data is already in memory.
        pass

    def racks(self) -> set[str]:
        """Get all distinct rack identifiers."""
        with self._lock:
            return set(self._racks.values())

    def to_dict(self) -> dict[str, str]:
        """Return a snapshot of the table."""
        with self._lock:
            return dict(self._racks)

    def __len__(self) -> int:
        with self._lock:
            return len(self._racks)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._racks

    def __repr__(self) -> str:
        return f"TopologyRegistry({len(self)} hosts, default={self._default_rack})"


# One simulated topology per process
_shared_registry = TopologyRegistry()


def shared_registry() -> TopologyRegistry:
    """Get the process-wide registry."""
    return _shared_registry


def add_node_to_rack(name: str, rack: str) -> None:
    """Add a host to the shared registry."""
    _shared_registry.add_entry(name, rack)


def reset_map() -> None:
    """Clear the shared registry."""
    _shared_registry.reset()
