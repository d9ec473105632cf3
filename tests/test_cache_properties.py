"""Contract tests run against every cache implementation."""

import pytest

from evictcache import (
    BaseCache,
    EvictionPolicy,
    LFUCache,
    LRUCache,
    MRUCache,
    OrderedDictLFUCache,
    OrderedDictLRUCache,
)

from conftest import apply_operation, check_invariants, random_operations


class TestCacheContract:
    """Properties every eviction policy must satisfy."""

    def test_is_base_cache(self, cache_class):
        cache = cache_class(3)

        assert isinstance(cache, BaseCache)
        assert isinstance(cache.policy, EvictionPolicy)
        assert cache.capacity == 3

    def test_get_missing_key(self, cache_class):
        assert cache_class(3).get("missing") is None

    @pytest.mark.parametrize("capacity", [1, 2, 3, 5])
    @pytest.mark.parametrize("seed", range(4))
    def test_capacity_bound_and_consistency(self, cache_class, capacity, seed):
        cache = cache_class(capacity)
        for operation in random_operations(seed):
            apply_operation(cache, operation)
            assert cache.size() <= capacity
            assert len(cache) == cache.size()
            check_invariants(cache)

    @pytest.mark.parametrize("capacity", [0, -1, -10])
    def test_non_positive_capacity_stores_nothing(self, cache_class, capacity):
        cache = cache_class(capacity)
        for operation in random_operations(7, count=50):
            apply_operation(cache, operation)
            assert cache.size() == 0

        cache.put("k", "v")
        assert cache.get("k") is None
        assert "k" not in cache
        assert cache.keys() == []
        assert cache.capacity == capacity

    def test_absent_after_evict(self, cache_class):
        cache = cache_class(3)
        cache.put("a", 1)
        cache.put("b", 2)

        cache.evict("a")

        assert cache.get("a") is None
        assert cache.get("b") == 2
        assert cache.size() == 1

    def test_update_preserves_identity(self, cache_class):
        cache = cache_class(3)
        cache.put("k", "v1")
        cache.put("other", "x")

        cache.put("k", "v2")

        assert cache.get("k") == "v2"
        assert cache.size() == 2

    def test_update_in_full_cache_does_not_evict(self, cache_class):
        cache = cache_class(2)
        cache.put("a", 1)
        cache.put("b", 2)

        cache.put("a", 10)
        cache.put("b", 20)

        assert cache.get("a") == 10
        assert cache.get("b") == 20
        assert cache.size() == 2

    def test_idempotent_evict(self, cache_class):
        cache = cache_class(3)
        cache.put("a", 1)
        cache.put("b", 2)

        cache.evict("a")
        cache.evict("a")
        cache.evict("never-stored")

        assert cache.keys() == ["b"]
        check_invariants(cache)

    def test_stored_none_is_distinguished_by_membership(self, cache_class):
        cache = cache_class(2)
        cache.put("k", None)

        assert cache.get("k") is None
        assert "k" in cache

    def test_full_cache_evicts_exactly_one(self, cache_class):
        cache = cache_class(3)
        for key in range(3):
            cache.put(key, key)

        cache.put(99, 99)

        assert cache.size() == 3
        assert 99 in cache
        assert sum(key in cache for key in range(3)) == 2


class TestEvictionOrder:
    """The three reference eviction scenarios."""

    def _fill(self, cache):
        cache.put(1, "one")
        cache.put(2, "two")
        cache.put(3, "three")

    @pytest.mark.parametrize("cache_cls", [LRUCache, OrderedDictLRUCache])
    def test_lru_order(self, cache_cls):
        cache = cache_cls(3)
        self._fill(cache)
        cache.get(1)

        cache.put(4, "four")

        assert cache.get(1) == "one"
        assert cache.get(2) is None
        assert cache.get(3) == "three"
        assert cache.get(4) == "four"

    def test_mru_order(self):
        cache = MRUCache(3)
        self._fill(cache)
        cache.get(3)

        cache.put(4, "four")

        assert cache.get(3) is None
        assert cache.get(1) == "one"
        assert cache.get(2) == "two"
        assert cache.get(4) == "four"

    @pytest.mark.parametrize("cache_cls", [LFUCache, OrderedDictLFUCache])
    def test_lfu_order(self, cache_cls):
        cache = cache_cls(3)
        self._fill(cache)
        cache.get(1)
        cache.get(1)
        cache.get(3)

        cache.put(4, "four")

        assert cache.get(2) is None
        assert cache.get(1) == "one"
        assert cache.get(3) == "three"
        assert cache.get(4) == "four"


class TestOrderedDictEquivalence:
    """Linked-list engines behave exactly like their OrderedDict counterparts."""

    @pytest.mark.parametrize(
        "engine_cls, reference_cls",
        [(LRUCache, OrderedDictLRUCache), (LFUCache, OrderedDictLFUCache)],
        ids=["LRU", "LFU"],
    )
    @pytest.mark.parametrize("capacity", [1, 3, 6])
    @pytest.mark.parametrize("seed", range(6))
    def test_same_results_and_order(self, engine_cls, reference_cls, capacity, seed):
        engine = engine_cls(capacity)
        reference = reference_cls(capacity)
        for operation in random_operations(seed, count=500, key_space=10):
            assert apply_operation(engine, operation) == apply_operation(reference, operation)
            assert engine.keys() == reference.keys()
