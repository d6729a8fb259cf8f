"""A binary-heap priority queue ordered by a comparator function."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from containerkit.errors import InvalidCapacityError, MaxCapacityError, OutOfRangeError

DEFAULT_CAPACITY = 8
DEFAULT_EXPANSION_FACTOR = 2.0

_MAX_ELEMENTS = (1 << 64) - 2

Comparator = Callable[[Any, Any], int]


def _parent(index: int) -> int:
    return (index - 1) // 2


class PriorityQueue:
    """A max-heap: the element that compares greatest under ``cmp`` is on top.

    ``cmp(a, b)`` returns a negative number, zero or a positive number when
    ``a`` has lower, equal or higher priority than ``b``.
    """

    def __init__(
        self,
        cmp: Comparator,
        capacity: int = DEFAULT_CAPACITY,
        exp_factor: float = DEFAULT_EXPANSION_FACTOR,
    ) -> None:
        factor = exp_factor if exp_factor > 1 else DEFAULT_EXPANSION_FACTOR
        if capacity <= 0 or factor >= _MAX_ELEMENTS // capacity:
            raise InvalidCapacityError(
                f"unusable capacity {capacity} with expansion factor {factor}"
            )
        self._cmp = cmp
        self._capacity = capacity
        self._exp_factor = factor
        self._heap: list[Any] = []

    def _expand(self) -> None:
        if self._capacity == _MAX_ELEMENTS:
            raise MaxCapacityError("priority queue is at maximum capacity")
        grown = int(self._capacity * self._exp_factor)
        self._capacity = _MAX_ELEMENTS if grown <= self._capacity else grown

    def push(self, element: Any) -> None:
        """Insert an element and restore the heap order."""
        if len(self._heap) >= self._capacity:
            self._expand()
        heap = self._heap
        heap.append(element)
        i = len(heap) - 1
        while i != 0 and self._cmp(heap[i], heap[_parent(i)]) > 0:
            p = _parent(i)
            heap[i], heap[p] = heap[p], heap[i]
            i = p

    def top(self) -> Any:
        """Return the highest-priority element without removing it."""
        if not self._heap:
            raise OutOfRangeError("top of an empty priority queue")
        return self._heap[0]

    def pop(self) -> Any:
        """Remove and return the highest-priority element."""
        heap = self._heap
        if not heap:
            raise OutOfRangeError("pop from an empty priority queue")
        heap[0], heap[-1] = heap[-1], heap[0]
        element = heap.pop()
        self._sift_down(0)
        return element

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while size > 1:
            left = 2 * index + 1
            right = 2 * index + 2
            # Only nodes with both children are rebalanced.
            if right >= size:
                return
            largest = index
            if self._cmp(heap[largest], heap[left]) < 0:
                largest = left
            if self._cmp(heap[largest], heap[right]) < 0:
                largest = right
            if largest == index:
                return
            heap[index], heap[largest] = heap[largest], heap[index]
            index = largest

    def clear(self, cb: Callable[[Any], Any] | None = None) -> None:
        """Remove every element, passing each one to ``cb`` first if given."""
        if cb is not None:
            for element in self._heap:
                cb(element)
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._heap)})"