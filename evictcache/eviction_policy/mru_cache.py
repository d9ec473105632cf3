"""MRU (Most Recently Used) cache implementation."""

from typing import Optional

from evictcache.eviction_policy.eviction_policy import EvictionPolicy
from evictcache.eviction_policy.lru_cache import LRUCache
from evictcache.node import Node


class MRUCache(LRUCache):
    """
    MRU (Most Recently Used) cache implementation.

    Shares the LRU bookkeeping: every touch still moves the node to the
    front of the list. Only the eviction target differs, it is the node
    at the front, so the entry touched last is the first to go when a
    new key arrives.
    """

    policy = EvictionPolicy.MRU

    def _victim(self) -> Optional[Node]:
        return self._order.peek_front()
