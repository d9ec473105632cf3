"""LRU (Least Recently Used) cache implementation."""

from typing import Any, Dict, Hashable, List, Optional

import structlog

from evictcache.base import BaseCache
from evictcache.eviction_policy.eviction_policy import EvictionPolicy
from evictcache.linked_list import DoublyLinkedList
from evictcache.node import Node

logger = structlog.get_logger()


class LRUCache(BaseCache):
    """
    LRU (Least Recently Used) cache implementation.

    Uses a hash map for O(1) key lookup and a doubly linked list
    to maintain access order for O(1) eviction.
    """

    policy = EvictionPolicy.LRU

    def __init__(self, capacity: int):
        """
        Initialize LRU cache.

        Args:
            capacity: Maximum number of keys the cache can hold
        """
        super().__init__(capacity)
        self._cache: Dict[Hashable, Node] = {}
        self._order = DoublyLinkedList()

    def get(self, key: Hashable) -> Optional[Any]:
        """
        Get a value from the cache by key.

        Moves the accessed node to the front (most recently used).

        Args:
            key: The key to look up

        Returns:
            The value associated with the key, or None if not found
        """
        node = self._cache.get(key)
        if node is None:
            return None

        self._order.move_to_front(node)
        return node.value

    def put(self, key: Hashable, value: Any) -> None:
        """
        Set a key-value pair in the cache.

        If key exists, updates value and moves it to the front.
        If key doesn't exist, evicts the least recently used item when
        the cache is at capacity, then adds a new node at the front.

        Args:
            key: The key to store
            value: The value to store
        """
        if self._capacity <= 0:
            return

        node = self._cache.get(key)
        if node is not None:
            node.value = value
            self._order.move_to_front(node)
            return

        if len(self._cache) >= self._capacity:
            self._evict_victim()

        node = Node(key, value)
        self._cache[key] = node
        self._order.push_front(node)

    def evict(self, key: Hashable) -> None:
        """
        Remove a key from the cache.

        Args:
            key: The key to remove
        """
        node = self._cache.pop(key, None)
        if node is None:
            return

        self._order.remove(node)
        logger.debug("Invalidated cache key", policy=self.policy.value, key=key)

    def clear(self) -> None:
        """Clear all entries from the cache."""
        self._cache.clear()
        self._order.clear()

    def size(self) -> int:
        return len(self._cache)

    def keys(self) -> List[Hashable]:
        return [node.key for node in self._order]

    def __contains__(self, key: Hashable) -> bool:
        return key in self._cache

    def _victim(self) -> Optional[Node]:
        """The node to drop when a new key arrives at a full cache."""
        return self._order.peek_back()

    def _evict_victim(self) -> None:
        """Evict the node chosen by the policy to make room for a new key."""
        victim = self._victim()
        if victim is None:
            return

        self._order.remove(victim)
        del self._cache[victim.key]
        logger.debug(
            "Evicted cache key",
            policy=self.policy.value,
            key=victim.key,
            capacity=self._capacity
        )
