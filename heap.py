from __future__ import annotations

from typing import Callable, List


Less = Callable[[int, int], bool]


class IndexedHeap:
    """Binary heap over vertex identifiers with a position table.

    The heap never stores priorities. ``less(a, b)`` decides whether ``a``
    must leave the heap before ``b``; it usually looks the identifiers up in
    a distance list owned by the caller. Because the position of every
    queued identifier is tracked, ``fixup`` runs in O(log n) after that
    external priority improves.
    """

    def __init__(self, capacity: int, less: Less) -> None:
        if capacity < 0:
            raise ValueError(f"Heap capacity must be non-negative, got {capacity}.")
        self.capacity = capacity
        self._less = less
        self._items: List[int] = []
        # _position[identifier] is its slot in _items, -1 when not queued.
        self._position: List[int] = [-1] * capacity

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, identifier: object) -> bool:
        return (
            isinstance(identifier, int)
            and 0 <= identifier < self.capacity
            and self._position[identifier] != -1
        )

    def is_empty(self) -> bool:
        return not self._items

    def insert(self, identifier: int) -> None:
        if len(self._items) == self.capacity:
            raise IndexError("insert into a full heap")
        if not 0 <= identifier < self.capacity:
            raise IndexError(
                f"Identifier {identifier} outside heap range 0..{self.capacity - 1}."
            )
        if self._position[identifier] != -1:
            raise ValueError(f"Identifier {identifier} is already queued.")

        self._items.append(identifier)
        self._position[identifier] = len(self._items) - 1
        self._sift_up(len(self._items) - 1)

    def peek(self) -> int:
        if not self._items:
            raise IndexError("peek into an empty heap")
        return self._items[0]

    def extract(self) -> int:
        """Remove and return the identifier ranked first by ``less``."""
        if not self._items:
            raise IndexError("extract from an empty heap")

        top = self._items[0]
        last = self._items.pop()
        self._position[top] = -1
        if self._items:
            self._items[0] = last
            self._position[last] = 0
            self._sift_down(0)
        return top

    def fixup(self, identifier: int) -> None:
        """Restore heap order after ``identifier``'s priority improved."""
        if identifier not in self:
            raise KeyError(identifier)
        self._sift_up(self._position[identifier])

    def _swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]
        self._position[items[i]] = i
        self._position[items[j]] = j

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not self._less(items[index], items[parent]):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            child = 2 * index + 1
            if child >= size:
                break
            right = child + 1
            if right < size and self._less(items[right], items[child]):
                child = right
            if not self._less(items[child], items[index]):
                break
            self._swap(index, child)
            index = child
