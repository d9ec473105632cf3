"""Shared fixtures and helpers for the cache tests."""

import random
from typing import List, Tuple

import pytest
import structlog

from evictcache import (
    LFUCache,
    LRUCache,
    MRUCache,
    OrderedDictLFUCache,
    OrderedDictLRUCache,
    reset_in_memory_cache,
)

ALL_CACHE_CLASSES = [LRUCache, LFUCache, MRUCache, OrderedDictLRUCache, OrderedDictLFUCache]


@pytest.fixture(autouse=True)
def _isolate_global_state():
    """Reset the shared cache and structlog config around every test."""
    reset_in_memory_cache()
    yield
    reset_in_memory_cache()
    structlog.reset_defaults()


@pytest.fixture(params=ALL_CACHE_CLASSES, ids=lambda cls: cls.__name__)
def cache_class(request):
    return request.param


def random_operations(seed: int, count: int = 400, key_space: int = 8) -> List[Tuple[str, int, str]]:
    """Seeded sequence of (operation, key, value) triples."""
    rng = random.Random(seed)
    operations = []
    for i in range(count):
        op = rng.choices(["put", "get", "evict"], weights=[5, 4, 1])[0]
        operations.append((op, rng.randrange(key_space), f"v{i}"))
    return operations


def apply_operation(cache, operation: Tuple[str, int, str]):
    op, key, value = operation
    if op == "put":
        return cache.put(key, value)
    if op == "get":
        return cache.get(key)
    return cache.evict(key)


def _assert_list_links(linked_list) -> list:
    """Walk a DoublyLinkedList both ways and return its nodes front to back."""
    forward = list(linked_list)
    backward = []
    node = linked_list._tail.prev
    while node is not linked_list._head:
        backward.append(node)
        node = node.prev
    assert backward[::-1] == forward
    assert len(forward) == len(linked_list)
    return forward


def check_invariants(cache) -> None:
    """Assert that a cache's index and ordering structures agree."""
    assert cache.size() <= max(cache.capacity, 0)
    assert len(cache.keys()) == cache.size()
    assert set(cache.keys()) == {key for key in cache.keys() if key in cache}

    if isinstance(cache, LRUCache):
        nodes = _assert_list_links(cache._order)
        assert len(nodes) == len(cache._cache)
        for node in nodes:
            assert cache._cache[node.key] is node
            assert node.frequency is None

    elif isinstance(cache, LFUCache):
        seen = 0
        for frequency, bucket in cache._frequency_buckets.items():
            nodes = _assert_list_links(bucket)
            assert nodes, f"empty bucket retained for frequency {frequency}"
            for node in nodes:
                assert node.frequency == frequency
                assert cache._cache[node.key] is node
            seen += len(nodes)
        assert seen == len(cache._cache)
        if cache._frequency_buckets:
            assert cache.min_frequency <= min(cache._frequency_buckets)

    elif isinstance(cache, OrderedDictLFUCache):
        assert set(cache.key_to_val) == set(cache.key_to_freq)
        for freq, keys in cache.freq_to_keys.items():
            assert keys
            for key in keys:
                assert cache.key_to_freq[key] == freq
        assert sum(len(keys) for keys in cache.freq_to_keys.values()) == len(cache.key_to_val)
