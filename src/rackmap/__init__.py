"""
Rackmap - simulated rack awareness for test clusters.

This package provides tools for:
- Registering host to rack assignments in a process-wide table
- Resolving host names to rack identifiers with a default-rack fallback
- Caching resolutions on top of any switch mapping strategy
- Loading static topologies from YAML files
"""

__version__ = "0.1.0"

from rackmap.core.cache import CachedStaticMapping
from rackmap.core.mapping import SwitchMapping
from rackmap.core.registry import TopologyRegistry, shared_registry
from rackmap.core.topology import DEFAULT_RACK

__all__ = [
    "__version__",
    "DEFAULT_RACK",
    "SwitchMapping",
    "TopologyRegistry",
    "shared_registry",
    "CachedStaticMapping",
]
