"""Custom exceptions for cache construction."""

from typing import Any

from evictcache.eviction_policy.eviction_policy import EvictionPolicy


class EvictCacheError(Exception):
    """Base class for errors raised by evictcache."""


class InvalidEvictionPolicyError(EvictCacheError):
    """Raised when an invalid eviction policy is provided."""

    def __init__(self, policy: Any):
        self.policy = policy
        supported = ", ".join(p.value for p in EvictionPolicy)
        super().__init__(f"Invalid eviction policy: {policy}. Supported policies: {supported}")


class InvalidCapacityError(EvictCacheError):
    """Raised when a capacity is not an integer."""

    def __init__(self, capacity: Any):
        self.capacity = capacity
        super().__init__(f"Invalid capacity: {capacity!r}. Must be an integer")
