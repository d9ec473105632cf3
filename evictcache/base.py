"""Base cache interface for the eviction-policy engines."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Hashable, List, Optional

from evictcache.eviction_policy.eviction_policy import EvictionPolicy


class BaseCache(ABC):
    """
    Abstract base class for fixed-capacity caches.

    A capacity of zero or less is accepted and yields a cache that never
    stores anything.
    """

    policy: ClassVar[EvictionPolicy]

    def __init__(self, capacity: int):
        """
        Initialize the cache.

        Args:
            capacity: Maximum number of keys the cache can hold
        """
        self._capacity = capacity

    @abstractmethod
    def get(self, key: Hashable) -> Optional[Any]:
        """
        Get a value from the cache by key.

        A hit counts as a touch for the eviction policy.

        Args:
            key: The key to look up

        Returns:
            The value associated with the key, or None if not found
        """
        pass

    @abstractmethod
    def put(self, key: Hashable, value: Any) -> None:
        """
        Insert or update a key-value pair.

        Updating an existing key counts as a touch. Inserting a new key
        into a full cache evicts exactly one entry first.

        Args:
            key: The key to store
            value: The value to store
        """
        pass

    @abstractmethod
    def evict(self, key: Hashable) -> None:
        """
        Remove a key from the cache. Does nothing if the key is absent.

        Args:
            key: The key to remove
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear all entries from the cache."""
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Get the current number of keys in the cache.

        Returns:
            The number of keys currently in the cache
        """
        pass

    @abstractmethod
    def keys(self) -> List[Hashable]:
        """
        Snapshot of the cached keys, safest first.

        The last key is the next eviction candidate for LRU and LFU.
        """
        pass

    @abstractmethod
    def __contains__(self, key: Hashable) -> bool:
        pass

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={self.size()})"

    @property
    def capacity(self) -> int:
        """Get the maximum number of keys the cache can hold."""
        return self._capacity
