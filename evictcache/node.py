"""Cache entry node shared by every eviction policy."""

from typing import Any, Hashable, Optional


class Node:
    """
    Node for the doubly linked lists used by the cache engines.

    Recency policies leave ``frequency`` as None; the LFU engine sets it
    to the entry's access count.
    """

    def __init__(self, key: Optional[Hashable], value: Any, frequency: Optional[int] = None):
        self.key = key
        self.value = value
        self.frequency = frequency
        self.prev: Optional['Node'] = None
        self.next: Optional['Node'] = None

    def __repr__(self) -> str:
        if self.frequency is None:
            return f"Node(key={self.key!r})"
        return f"Node(key={self.key!r}, frequency={self.frequency})"
