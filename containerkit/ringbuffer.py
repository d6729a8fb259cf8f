"""A fixed-capacity ring buffer of unsigned 64-bit integers."""

from __future__ import annotations

import operator

from containerkit.errors import InvalidCapacityError, OutOfRangeError

DEFAULT_CAPACITY = 10

_U64_MASK = (1 << 64) - 1


class RingBuffer:
    """A circular buffer that overwrites its oldest slot once it is full.

    Items are stored as unsigned 64-bit integers; larger or negative
    values wrap around modulo 2**64.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        capacity = operator.index(capacity)
        if capacity < 1:
            raise InvalidCapacityError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._buf = [0] * capacity
        self._head = 0
        self._tail = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of slots in the buffer."""
        return self._capacity

    def enqueue(self, item: int) -> None:
        """Write an item at the head, advancing the tail when they meet."""
        value = operator.index(item) & _U64_MASK
        if self._head == self._tail:
            self._tail = (self._tail + 1) % self._capacity
        self._buf[self._head] = value
        self._head = (self._head + 1) % self._capacity
        if self._size < self._capacity:
            self._size += 1

    def dequeue(self) -> int:
        """Remove and return the item at the tail."""
        if self.is_empty():
            raise OutOfRangeError("dequeue from an empty ring buffer")
        value = self._buf[self._tail]
        self._tail = (self._tail + 1) % self._capacity
        self._size -= 1
        return value

    def peek(self, index: int) -> int:
        """Return the raw contents of slot ``index``."""
        index = operator.index(index)
        if not 0 <= index < self._capacity:
            raise OutOfRangeError(
                f"slot {index} outside ring buffer of capacity {self._capacity}"
            )
        return self._buf[index]

    def is_empty(self) -> bool:
        """Whether the buffer holds no items."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={self._size})"