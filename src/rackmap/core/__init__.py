"""Core rack resolution components."""

from rackmap.core.cache import CachedStaticMapping, CachedSwitchMapping
from rackmap.core.mapping import MappingError, SwitchMapping
from rackmap.core.registry import (
    TopologyRegistry,
    add_node_to_rack,
    reset_map,
    shared_registry,
)
from rackmap.core.schema import TopologySchema
from rackmap.core.topology import DEFAULT_RACK

__all__ = [
    "DEFAULT_RACK",
    "SwitchMapping",
    "MappingError",
    "TopologyRegistry",
    "shared_registry",
    "add_node_to_rack",
    "reset_map",
    "CachedSwitchMapping",
    "CachedStaticMapping",
    "TopologySchema",
]
