"""Doubly linked list with sentinel head and tail nodes."""

from typing import Iterator, Optional

from evictcache.node import Node


class DoublyLinkedList:
    """
    Doubly linked list ordering cache nodes from front (most recently
    touched) to back (least recently touched).

    The head and tail sentinels are never removed, so every real node
    always has both neighbours set.
    """

    def __init__(self):
        # Dummy head and tail nodes
        self._head = Node(None, None)
        self._tail = Node(None, None)
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0

    def push_front(self, node: Node) -> None:
        """
        Add a node right after the head sentinel.

        Args:
            node: A detached node
        """
        node.next = self._head.next
        node.prev = self._head
        self._head.next.prev = node
        self._head.next = node
        self._size += 1

    def remove(self, node: Node) -> None:
        """
        Unlink a node from the list and detach it.

        Args:
            node: A node currently linked into this list
        """
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = None
        node.next = None
        self._size -= 1

    def move_to_front(self, node: Node) -> None:
        """Move a linked node to the front of the list."""
        self.remove(node)
        self.push_front(node)

    def peek_front(self) -> Optional[Node]:
        """Return the node next to the head sentinel, or None if empty."""
        if self._size == 0:
            return None
        return self._head.next

    def peek_back(self) -> Optional[Node]:
        """Return the node next to the tail sentinel, or None if empty."""
        if self._size == 0:
            return None
        return self._tail.prev

    def pop_back(self) -> Optional[Node]:
        """
        Remove and return the back node (least recently touched).

        Returns:
            The removed node, or None if the list is empty
        """
        node = self.peek_back()
        if node is not None:
            self.remove(node)
        return node

    def clear(self) -> None:
        """Drop every node, leaving only the sentinels."""
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0

    def is_empty(self) -> bool:
        """Check if the list is empty."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Node]:
        node = self._head.next
        while node is not self._tail:
            yield node
            node = node.next
