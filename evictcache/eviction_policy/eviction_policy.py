"""Eviction policy definitions for the cache engines."""

from enum import Enum


class EvictionPolicy(str, Enum):
    """Enumeration of supported eviction policies."""

    LRU = "LRU"  # Least Recently Used
    LFU = "LFU"  # Least Frequently Used
    MRU = "MRU"  # Most Recently Used
