"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

from containerkit.errors import OutOfRangeError


class Queue:
    """A FIFO queue with constant-time enqueue, poll and peek.

    Elements enter at the back and leave from the front. Iteration walks
    the queue from the back (most recently enqueued) to the front.
    """

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._items: deque[Any] = deque()
        if iterable is not None:
            for element in iterable:
                self.enqueue(element)

    def enqueue(self, element: Any) -> None:
        """Add an element at the back of the queue."""
        self._items.appendleft(element)

    def peek(self) -> Any:
        """Return the element at the front without removing it."""
        if not self._items:
            raise OutOfRangeError("peek at an empty queue")
        return self._items[-1]

    def poll(self) -> Any:
        """Remove and return the element at the front."""
        if not self._items:
            raise OutOfRangeError("poll from an empty queue")
        return self._items.pop()

    def foreach(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on every element, in iteration order."""
        for element in self._items:
            fn(element)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._items)})"