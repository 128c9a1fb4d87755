"""Caching wrapper around switch mappings."""

from __future__ import annotations

import logging
import threading

from rackmap.core.mapping import MappingError, SwitchMapping
from rackmap.core.registry import TopologyRegistry, shared_registry
from rackmap.core.schema import TopologySchema

logger = logging.getLogger(__name__)


class CachedSwitchMapping(SwitchMapping):
    """
    Caches the results of another switch mapping.

    Only names missing from the cache are passed to the raw mapping, in a
    single batch. Cached results are kept until reload_cached_mappings is
    called, even if the raw mapping changes in the meantime.
    """

    def __init__(self, raw_mapping: SwitchMapping) -> None:
        self._raw_mapping = raw_mapping
        self._cache: dict[str, str] = {}  # name -> rack
        self._lock = threading.Lock()

    @property
    def raw_mapping(self) -> SwitchMapping:
        """The wrapped mapping."""
        return self._raw_mapping

    def resolve(self, names: list[str]) -> list[str]:
        if isinstance(names, str):
            raise TypeError("names must be a sequence of host names, not a string")
        names = list(names)
        with self._lock:
            cached = {name: self._cache[name] for name in names if name in self._cache}
        uncached = [name for name in dict.fromkeys(names) if name not in cached]

        if uncached:
            resolved = self._raw_mapping.resolve(uncached)
            if len(resolved) != len(uncached):
                raise MappingError(
                    f"Raw mapping returned {len(resolved)} racks for {len(uncached)} names"
                )
            fresh = dict(zip(uncached, resolved))
            with self._lock:
                self._cache.update(fresh)
            logger.debug("Cached %d new resolutions", len(fresh))
            cached.update(fresh)

        return [cached[name] for name in names]

    def reload_cached_mappings(self, names: list[str] | None = None) -> None:
        with self._lock:
            if names is None:
                self._cache.clear()
            else:
                for name in names:
                    self._cache.pop(name, None)
        logger.debug("Reloaded cached mappings for %s", "all hosts" if names is None else names)
        self._raw_mapping.reload_cached_mappings(names)

    def switch_map(self) -> dict[str, str]:
        """Return a copy of the cached name -> rack map."""
        with self._lock:
            return dict(self._cache)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._raw_mapping!r})"


class CachedStaticMapping(CachedSwitchMapping):
    """
    Cached view of a static topology registry.

    Uses the process-wide registry unless one is given. Hosts listed in a
    configuration are added to that registry and stay there after this
    wrapper is discarded; call reset on the registry to remove them.
    """

    def __init__(
        self,
        registry: TopologyRegistry | None = None,
        config: TopologySchema | None = None,
    ) -> None:
        super().__init__(registry if registry is not None else shared_registry())
        if config is not None:
            self.configure(config)

    @property
    def raw_mapping(self) -> TopologyRegistry:
        return self._raw_mapping  # type: ignore[return-value]

    def configure(self, config: TopologySchema) -> None:
        """Add every host listed in the configuration to the registry."""
        self.raw_mapping.add_entries(config.racks)
        logger.info("Configured %d static rack assignments", len(config.racks))
