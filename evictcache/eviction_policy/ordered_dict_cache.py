"""Caches built directly on ``collections.OrderedDict``.

These delegate ordering to the built-in ordered map instead of managing
nodes by hand. They follow the same contract as the linked-list engines
and are used to cross-check them.
"""

from collections import OrderedDict
from typing import Any, Dict, Hashable, List, Optional

import structlog

from evictcache.base import BaseCache
from evictcache.eviction_policy.eviction_policy import EvictionPolicy

logger = structlog.get_logger()


# Most recently used key sits at the end of the OrderedDict
class OrderedDictLRUCache(BaseCache):
    policy = EvictionPolicy.LRU

    def __init__(self, capacity: int):
        super().__init__(capacity)
        self._cache: "OrderedDict[Hashable, Any]" = OrderedDict()

    def get(self, key: Hashable) -> Optional[Any]:
        if key not in self._cache:
            return None
        self._cache.move_to_end(key)
        return self._cache[key]

    def put(self, key: Hashable, value: Any) -> None:
        if self._capacity <= 0:
            return

        if key in self._cache:
            self._cache[key] = value
            self._cache.move_to_end(key)
            return

        if len(self._cache) >= self._capacity:
            evicted, _ = self._cache.popitem(last=False)
            logger.debug("Evicted cache key", policy=self.policy.value, key=evicted, capacity=self._capacity)
        self._cache[key] = value

    def evict(self, key: Hashable) -> None:
        if key not in self._cache:
            return
        del self._cache[key]
        logger.debug("Invalidated cache key", policy=self.policy.value, key=key)

    def clear(self) -> None:
        self._cache.clear()

    def size(self) -> int:
        return len(self._cache)

    def keys(self) -> List[Hashable]:
        return list(reversed(self._cache))

    def __contains__(self, key: Hashable) -> bool:
        return key in self._cache


class OrderedDictLFUCache(BaseCache):
    """
    LFU cache keeping one OrderedDict of keys per frequency.

    Keys within a frequency are kept oldest first, so ``popitem(last=False)``
    drops the least recently touched key of the bucket.
    """

    policy = EvictionPolicy.LFU

    def __init__(self, capacity: int):
        super().__init__(capacity)
        self.key_to_val: Dict[Hashable, Any] = {}
        self.key_to_freq: Dict[Hashable, int] = {}
        self.freq_to_keys: Dict[int, "OrderedDict[Hashable, None]"] = {}
        self.min_freq = 0

    def get(self, key: Hashable) -> Optional[Any]:
        if key not in self.key_to_val:
            return None

        self._increase_freq(key)
        return self.key_to_val[key]

    def put(self, key: Hashable, value: Any) -> None:
        if self._capacity <= 0:
            return

        if key in self.key_to_val:
            self.key_to_val[key] = value
            self._increase_freq(key)
            return

        if len(self.key_to_val) >= self._capacity:
            self._evict()

        self.key_to_val[key] = value
        self.key_to_freq[key] = 1
        self.freq_to_keys.setdefault(1, OrderedDict())[key] = None
        self.min_freq = 1

    def evict(self, key: Hashable) -> None:
        if key not in self.key_to_val:
            return

        self._discard(key, self.key_to_freq.pop(key))
        del self.key_to_val[key]
        logger.debug("Invalidated cache key", policy=self.policy.value, key=key)

    def clear(self) -> None:
        self.key_to_val.clear()
        self.key_to_freq.clear()
        self.freq_to_keys.clear()
        self.min_freq = 0

    def size(self) -> int:
        return len(self.key_to_val)

    def keys(self) -> List[Hashable]:
        result = []
        for freq in sorted(self.freq_to_keys, reverse=True):
            result.extend(reversed(self.freq_to_keys[freq]))
        return result

    def __contains__(self, key: Hashable) -> bool:
        return key in self.key_to_val

    def _discard(self, key: Hashable, freq: int) -> None:
        del self.freq_to_keys[freq][key]
        if not self.freq_to_keys[freq]:
            del self.freq_to_keys[freq]
            if freq == self.min_freq:
                self.min_freq += 1

    def _increase_freq(self, key: Hashable) -> None:
        freq = self.key_to_freq[key]
        self._discard(key, freq)
        self.key_to_freq[key] = freq + 1
        self.freq_to_keys.setdefault(freq + 1, OrderedDict())[key] = None

    def _evict(self) -> None:
        keys = self.freq_to_keys[self.min_freq]
        key, _ = keys.popitem(last=False)
        if not keys:
            del self.freq_to_keys[self.min_freq]

        del self.key_to_val[key]
        del self.key_to_freq[key]
        logger.debug("Evicted cache key", policy=self.policy.value, key=key, capacity=self._capacity)
