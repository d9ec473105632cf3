"""Factory for creating cache instances based on eviction policy."""

from typing import Dict, Optional, Type, Union

import structlog

from evictcache.base import BaseCache
from evictcache.config import settings
from evictcache.eviction_policy.eviction_policy import EvictionPolicy
from evictcache.eviction_policy.lfu_cache import LFUCache
from evictcache.eviction_policy.lru_cache import LRUCache
from evictcache.eviction_policy.mru_cache import MRUCache
from evictcache.exceptions import InvalidCapacityError, InvalidEvictionPolicyError

logger = structlog.get_logger()

_CACHE_CLASSES: Dict[EvictionPolicy, Type[BaseCache]] = {
    EvictionPolicy.LRU: LRUCache,
    EvictionPolicy.LFU: LFUCache,
    EvictionPolicy.MRU: MRUCache,
}

# Shared cache instance
_cache_instance: Optional[BaseCache] = None


def create_cache(
    eviction_policy: Union[EvictionPolicy, str],
    capacity: int
) -> BaseCache:
    """
    Create a cache instance based on the specified eviction policy.

    Args:
        eviction_policy: The eviction policy to use (LRU, LFU or MRU),
                         as an enum member or a case-insensitive name
        capacity: Maximum number of keys the cache can hold. Zero or
                  negative values give a cache that stores nothing.

    Returns:
        A cache instance implementing the BaseCache interface

    Raises:
        InvalidEvictionPolicyError: If the eviction policy is not supported
        InvalidCapacityError: If capacity is not an integer
    """
    # bool is an int subclass but never a meaningful capacity
    if not isinstance(capacity, int) or isinstance(capacity, bool):
        logger.warning("Rejected cache capacity", capacity=repr(capacity))
        raise InvalidCapacityError(capacity)

    # Normalize eviction policy
    if not isinstance(eviction_policy, EvictionPolicy):
        try:
            eviction_policy = EvictionPolicy(str(eviction_policy).upper())
        except ValueError:
            logger.warning("Rejected eviction policy", policy=repr(eviction_policy))
            raise InvalidEvictionPolicyError(eviction_policy)

    cache = _CACHE_CLASSES[eviction_policy](capacity)
    logger.info("Created cache", policy=eviction_policy.value, capacity=capacity)
    return cache


def get_in_memory_cache(
    eviction_policy: Optional[Union[EvictionPolicy, str]] = None,
    capacity: Optional[int] = None
) -> BaseCache:
    """
    Get the shared in-memory cache instance.

    On first call, initializes the cache with the provided parameters.
    On subsequent calls, returns the same instance (parameters are ignored).
    Creation is not synchronized; callers sharing the cache across
    threads must serialize access themselves.

    Args:
        eviction_policy: Optional eviction policy to use. Defaults to
                         settings.default_eviction_policy on first call.
        capacity: Optional maximum number of keys. Defaults to
                  settings.default_capacity on first call.

    Returns:
        The shared cache instance implementing the BaseCache interface

    Raises:
        InvalidEvictionPolicyError: If the eviction policy is not supported (only on first call)
        InvalidCapacityError: If capacity is invalid (only on first call)

    Example:
        # First call - initializes from settings
        cache = get_in_memory_cache()

        # Subsequent calls - returns same instance, parameters ignored
        cache2 = get_in_memory_cache(EvictionPolicy.MRU, 2000)  # Same instance as cache
    """
    global _cache_instance

    if _cache_instance is None:
        if eviction_policy is None:
            eviction_policy = settings.default_eviction_policy
        if capacity is None:
            capacity = settings.default_capacity

        _cache_instance = create_cache(eviction_policy, capacity)

    return _cache_instance


def reset_in_memory_cache() -> None:
    """Discard the shared cache so the next get_in_memory_cache() builds a new one."""
    global _cache_instance
    _cache_instance = None
