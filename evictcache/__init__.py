"""Fixed-capacity in-memory cache with LRU, LFU and MRU eviction policies."""

from evictcache.cache_factory import create_cache, get_in_memory_cache, reset_in_memory_cache
from evictcache.eviction_policy.eviction_policy import EvictionPolicy
from evictcache.base import BaseCache
from evictcache.eviction_policy.lru_cache import LRUCache
from evictcache.eviction_policy.lfu_cache import LFUCache
from evictcache.eviction_policy.mru_cache import MRUCache
from evictcache.eviction_policy.ordered_dict_cache import OrderedDictLFUCache, OrderedDictLRUCache
from evictcache.exceptions import (
    EvictCacheError,
    InvalidCapacityError,
    InvalidEvictionPolicyError
)
from evictcache.logging_config import configure_logging

__all__ = [
    "create_cache",
    "get_in_memory_cache",
    "reset_in_memory_cache",
    "configure_logging",
    "EvictionPolicy",
    "BaseCache",
    "LRUCache",
    "LFUCache",
    "MRUCache",
    "OrderedDictLRUCache",
    "OrderedDictLFUCache",
    "EvictCacheError",
    "InvalidCapacityError",
    "InvalidEvictionPolicyError",
]
