"""Double-ended queue built on an index-linked pool of nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(slots=True)
class _Node:
    data: Any = None
    next: Optional[int] = None
    prev: Optional[int] = None


class Deque:
    """A deque whose nodes live in a growable pool and are addressed by index.

    Node indices are stable while a value stays in the deque, so callers may
    walk the deque by index with ``head``, ``next_node`` and ``prev_node``.
    Freed nodes are recycled before the pool grows; a full pool doubles.
    """

    def __init__(self, capacity: int = 8) -> None:
        if capacity < 1:
            raise ValueError("deque capacity must be at least 1")
        self._nodes: list[_Node] = []
        self._len = 0
        self._head: Optional[int] = None
        self._tail: Optional[int] = None
        self._freed: Optional[int] = None
        self._grow(capacity)

    def __len__(self) -> int:
        return self._len

    def __bool__(self) -> bool:
        return self._head is not None and self._len > 0

    def __iter__(self) -> Iterator[Any]:
        for index in self.nodes():
            yield self._nodes[index].data

    def __repr__(self) -> str:
        return f"Deque({list(self)!r})"

    def nodes(self) -> Iterator[int]:
        """Yield the node indices from front to back."""
        index = self._head
        while index is not None:
            yield index
            index = self._nodes[index].next

    @property
    def capacity(self) -> int:
        return len(self._nodes)

    @property
    def head(self) -> Optional[int]:
        return self._head

    @property
    def tail(self) -> Optional[int]:
        return self._tail

    def next_node(self, node: int) -> Optional[int]:
        """Index of the node after ``node``, or None."""
        if not 0 <= node < len(self._nodes):
            return None
        return self._nodes[node].next

    def prev_node(self, node: int) -> Optional[int]:
        """Index of the node before ``node``, or None."""
        if not 0 <= node < len(self._nodes):
            return None
        return self._nodes[node].prev

    def get(self, node: int) -> Any:
        """Value held by node ``node``; None for a free node."""
        if not 0 <= node < len(self._nodes):
            raise IndexError(f"node index {node} out of range")
        return self._nodes[node].data

    def append(self, value: Any) -> int:
        """Add ``value`` at the back and return its node index."""
        index = self._take_node(value)
        node = self._nodes[index]
        if self._tail is None:
            node.next = node.prev = None
            self._head = self._tail = index
        else:
            node.prev = self._tail
            node.next = None
            self._nodes[self._tail].next = index
            self._tail = index
        self._len += 1
        return index

    def prepend(self, value: Any) -> int:
        """Add ``value`` at the front and return its node index."""
        index = self._take_node(value)
        node = self._nodes[index]
        if self._head is None:
            node.next = node.prev = None
            self._head = self._tail = index
        else:
            node.next = self._head
            node.prev = None
            self._nodes[self._head].prev = index
            self._head = index
        self._len += 1
        return index

    def pop_front(self) -> Any:
        """Remove and return the front value."""
        if self._head is None:
            raise IndexError("pop from an empty deque")
        index = self._head
        node = self._nodes[index]
        self._head = node.next
        value = self._detach(index)
        if self._head is not None:
            self._nodes[self._head].prev = None
        else:
            self._tail = None
        self._len -= 1
        return value

    def pop_back(self) -> Any:
        """Remove and return the back value."""
        if self._tail is None:
            raise IndexError("pop from an empty deque")
        index = self._tail
        node = self._nodes[index]
        self._tail = node.prev
        value = self._detach(index)
        if self._tail is not None:
            self._nodes[self._tail].next = None
        else:
            self._head = None
        self._len -= 1
        return value

    def front(self) -> Any:
        if self._head is None:
            raise IndexError("front of an empty deque")
        return self._nodes[self._head].data

    def back(self) -> Any:
        if self._tail is None:
            raise IndexError("back of an empty deque")
        return self._nodes[self._tail].data

    def reset(self) -> None:
        """Drop every value but keep the node pool."""
        last = len(self._nodes) - 1
        for i, node in enumerate(self._nodes):
            node.data = None
            node.prev = i - 1 if i > 0 else None
            node.next = i + 1 if i < last else None
        self._head = self._tail = None
        self._freed = last if last >= 0 else None
        self._len = 0

    def clear(self) -> None:
        """Drop every value and release the node pool."""
        self._nodes = []
        self._len = 0
        self._head = self._tail = self._freed = None

    def _grow(self, new_size: int) -> None:
        old_size = len(self._nodes)
        self._nodes.extend(
            _Node(prev=self._freed if i == old_size else i - 1, next=i + 1)
            for i in range(old_size, new_size)
        )
        self._nodes[-1].next = None
        self._freed = new_size - 1

    def _take_node(self, value: Any) -> int:
        if self._len >= len(self._nodes):
            self._grow(max(len(self._nodes) * 2, 1))
        index = self._freed
        assert index is not None
        self._freed = self._nodes[index].prev
        if self._freed is not None:
            self._nodes[self._freed].next = None
        self._nodes[index].data = value
        return index

    def _detach(self, index: int) -> Any:
        node = self._nodes[index]
        value = node.data
        node.data = None
        node.next = node.prev = None
        if self._freed is None:
            self._freed = index
        else:
            node.prev = self._freed
            self._nodes[self._freed].next = index
            self._freed = index
        return value