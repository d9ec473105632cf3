"""LFU (Least Frequently Used) cache implementation."""

from typing import Any, Dict, Hashable, List, Optional

import structlog

from evictcache.base import BaseCache
from evictcache.eviction_policy.eviction_policy import EvictionPolicy
from evictcache.linked_list import DoublyLinkedList
from evictcache.node import Node

logger = structlog.get_logger()


class LFUCache(BaseCache):
    """
    LFU (Least Frequently Used) cache implementation.

    Uses a hash map for O(1) key lookup and frequency buckets with
    doubly linked lists to maintain frequency order for O(1) eviction.
    Within a bucket the least recently touched node is evicted first.

    The minimum frequency is tracked without scanning: a fresh insert
    resets it to 1, and emptying the minimum bucket advances it by one.
    Frequencies only ever grow one step at a time, so the touched node
    always lands in the bucket right above the one it left.
    """

    policy = EvictionPolicy.LFU

    def __init__(self, capacity: int):
        """
        Initialize LFU cache.

        Args:
            capacity: Maximum number of keys the cache can hold
        """
        super().__init__(capacity)
        self._cache: Dict[Hashable, Node] = {}
        # Frequency buckets: frequency -> DoublyLinkedList
        self._frequency_buckets: Dict[int, DoublyLinkedList] = {}
        self._min_frequency = 0

    def get(self, key: Hashable) -> Optional[Any]:
        """
        Get a value from the cache by key.

        Increments the frequency of the accessed key.

        Args:
            key: The key to look up

        Returns:
            The value associated with the key, or None if not found
        """
        node = self._cache.get(key)
        if node is None:
            return None

        self._increment_frequency(node)
        return node.value

    def put(self, key: Hashable, value: Any) -> None:
        """
        Set a key-value pair in the cache.

        If key exists, updates value and increments frequency.
        If key doesn't exist, creates new node with frequency=1.
        Evicts least frequently used item if cache is at capacity.

        Args:
            key: The key to store
            value: The value to store
        """
        if self._capacity <= 0:
            return

        node = self._cache.get(key)
        if node is not None:
            node.value = value
            self._increment_frequency(node)
            return

        if len(self._cache) >= self._capacity:
            self._evict_lfu()

        node = Node(key, value, frequency=1)
        self._cache[key] = node
        self._add_to_frequency_bucket(node)
        self._min_frequency = 1

    def evict(self, key: Hashable) -> None:
        """
        Remove a key from the cache.

        Args:
            key: The key to remove
        """
        node = self._cache.pop(key, None)
        if node is None:
            return

        self._remove_from_frequency_bucket(node)
        logger.debug("Invalidated cache key", policy=self.policy.value, key=key)

    def clear(self) -> None:
        """Clear all entries from the cache."""
        self._cache.clear()
        self._frequency_buckets.clear()
        self._min_frequency = 0

    def size(self) -> int:
        return len(self._cache)

    def keys(self) -> List[Hashable]:
        """Keys from the highest frequency bucket down, most recent first within a bucket."""
        result = []
        for frequency in sorted(self._frequency_buckets, reverse=True):
            result.extend(node.key for node in self._frequency_buckets[frequency])
        return result

    def __contains__(self, key: Hashable) -> bool:
        return key in self._cache

    @property
    def min_frequency(self) -> int:
        """Current eviction floor; 0 before anything has been inserted."""
        return self._min_frequency

    def frequency(self, key: Hashable) -> Optional[int]:
        """Access count of a key without touching it, or None if absent."""
        node = self._cache.get(key)
        return None if node is None else node.frequency

    def _increment_frequency(self, node: Node) -> None:
        """
        Increment the frequency of a node and move it to the next bucket.

        Args:
            node: The node whose frequency should be incremented
        """
        self._remove_from_frequency_bucket(node)
        node.frequency += 1
        self._add_to_frequency_bucket(node)

    def _add_to_frequency_bucket(self, node: Node) -> None:
        """Push a node to the front of the bucket for its frequency."""
        bucket = self._frequency_buckets.get(node.frequency)
        if bucket is None:
            bucket = self._frequency_buckets[node.frequency] = DoublyLinkedList()

        bucket.push_front(node)

    def _remove_from_frequency_bucket(self, node: Node) -> None:
        """
        Remove a node from its current frequency bucket.

        Drops the bucket once empty and advances the floor by one step if
        the emptied bucket was the minimum.

        Args:
            node: The node to remove
        """
        frequency = node.frequency
        bucket = self._frequency_buckets[frequency]
        bucket.remove(node)
        if bucket.is_empty():
            del self._frequency_buckets[frequency]
            if frequency == self._min_frequency:
                self._min_frequency += 1

    def _evict_lfu(self) -> None:
        """Evict the least recently touched node of the minimum-frequency bucket."""
        # An explicit evict may leave the floor on a frequency nobody holds,
        # but it also frees a slot, and the insert filling it resets the floor.
        bucket = self._frequency_buckets[self._min_frequency]
        lfu_node = bucket.pop_back()
        if bucket.is_empty():
            # The floor stays put; the insert that follows resets it to 1
            del self._frequency_buckets[self._min_frequency]

        del self._cache[lfu_node.key]
        logger.debug(
            "Evicted cache key",
            policy=self.policy.value,
            key=lfu_node.key,
            frequency=lfu_node.frequency,
            capacity=self._capacity
        )
