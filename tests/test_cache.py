"""Tests for cache module."""

import pytest

from rackmap.core.cache import CachedStaticMapping, CachedSwitchMapping
from rackmap.core.mapping import MappingError, SwitchMapping
from rackmap.core.registry import TopologyRegistry, reset_map, shared_registry
from rackmap.core.schema import TopologySchema
from rackmap.core.topology import DEFAULT_RACK


class CountingMapping(SwitchMapping):
    """Raw mapping that records every batch it is asked to resolve."""

    def __init__(self, racks):
        self.racks = racks
        self.calls = []
        self.reloads = []

    def resolve(self, names):
        self.calls.append(list(names))
        return [self.racks.get(name, DEFAULT_RACK) for name in names]

    def reload_cached_mappings(self, names=None):
        self.reloads.append(names)


class BrokenMapping(CountingMapping):
    def resolve(self, names):
        return []


@pytest.fixture
def raw():
    return CountingMapping({"host1": "/rack1", "host2": "/rack2"})


class TestCachedSwitchMapping:
    """Tests for CachedSwitchMapping."""

    def test_resolve_uses_raw_mapping(self, raw):
        mapping = CachedSwitchMapping(raw)

        assert mapping.resolve(["host1", "host2", "host3"]) == ["/rack1", "/rack2", DEFAULT_RACK]
        assert raw.calls == [["host1", "host2", "host3"]]

    def test_only_uncached_names_are_forwarded(self, raw):
        """Test the raw mapping only sees names missing from the cache."""
        mapping = CachedSwitchMapping(raw)
        mapping.resolve(["host1"])
        mapping.resolve(["host1", "host2", "host2"])

        assert raw.calls == [["host1"], ["host2"]]

    def test_fully_cached_skips_raw_mapping(self, raw):
        mapping = CachedSwitchMapping(raw)
        mapping.resolve(["host1", "host2"])
        mapping.resolve(["host2", "host1"])

        assert len(raw.calls) == 1

    def test_stale_until_reload(self, raw):
        """Test cached racks survive raw changes until reloaded."""
        mapping = CachedSwitchMapping(raw)
        mapping.resolve(["host1"])
        raw.racks["host1"] = "/rack7"

        assert mapping.resolve(["host1"]) == ["/rack1"]

        mapping.reload_cached_mappings()
        assert mapping.resolve(["host1"]) == ["/rack7"]
        assert raw.reloads == [None]

    def test_partial_reload(self, raw):
        """Test reloading named hosts evicts only those hosts."""
        mapping = CachedSwitchMapping(raw)
        mapping.resolve(["host1", "host2"])

        mapping.reload_cached_mappings(["host1"])

        assert mapping.switch_map() == {"host2": "/rack2"}
        assert raw.reloads == [["host1"]]

    def test_reload_during_resolve(self, raw):
        """Test names evicted while the raw mapping runs still get a rack."""
        mapping = CachedSwitchMapping(raw)
        mapping.resolve(["host1"])

        original_resolve = raw.resolve

        def resolve_and_reload(names):
            mapping.reload_cached_mappings()
            return original_resolve(names)

        raw.resolve = resolve_and_reload

        assert mapping.resolve(["host1", "host2"]) == ["/rack1", "/rack2"]

    def test_rejects_bare_string(self, raw):
        with pytest.raises(TypeError):
            CachedSwitchMapping(raw).resolve("host1")

    def test_mismatched_result_raises(self):
        mapping = CachedSwitchMapping(BrokenMapping({}))

        with pytest.raises(MappingError):
            mapping.resolve(["host1"])

    def test_raw_mapping_property(self, raw):
        assert CachedSwitchMapping(raw).raw_mapping is raw


class TestCachedStaticMapping:
    """Tests for CachedStaticMapping."""

    @pytest.fixture(autouse=True)
    def clean_shared(self):
        reset_map()
        yield
        reset_map()

    def test_defaults_to_shared_registry(self):
        mapping = CachedStaticMapping()
        assert mapping.raw_mapping is shared_registry()

    def test_configure_adds_to_registry(self):
        """Test configured hosts outlive the wrapper in the shared registry."""
        config = TopologySchema(racks={"host1": "/rack1", "host2": "rack2"})
        mapping = CachedStaticMapping(config=config)

        assert mapping.resolve(["host1", "host2", "host3"]) == ["/rack1", "/rack2", DEFAULT_RACK]

        del mapping
        assert shared_registry().resolve(["host2"]) == ["/rack2"]

    def test_explicit_registry(self):
        registry = TopologyRegistry()
        registry.add_entry("host1", "/rack1")
        mapping = CachedStaticMapping(registry)

        assert mapping.resolve(["host1"]) == ["/rack1"]
        assert shared_registry().resolve(["host1"]) == [DEFAULT_RACK]

    def test_reset_needs_reload(self):
        """Test a registry reset is only visible after reloading the cache."""
        registry = TopologyRegistry()
        registry.add_entry("host1", "/rack1")
        mapping = CachedStaticMapping(registry)
        mapping.resolve(["host1"])

        registry.reset()
        assert mapping.resolve(["host1"]) == ["/rack1"]

        mapping.reload_cached_mappings(["host1"])
        assert mapping.resolve(["host1"]) == [DEFAULT_RACK]
