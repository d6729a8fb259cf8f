"""Iterators over linked lists that can change the list as they go."""

from __future__ import annotations

from typing import Any, Optional

from containerkit.errors import ValueNotFoundError
from containerkit.linkedlist import LinkedList
from containerkit.nodes import Node, link_after, link_behind


def _insert_after(lst: LinkedList, base: Node, element: Any) -> None:
    node = Node(element)
    link_after(base, node)
    if node.next is None:
        lst._tail = node
    lst._size += 1


def _insert_before(lst: LinkedList, base: Node, element: Any) -> Node:
    node = Node(element)
    link_behind(base, node)
    if node.prev is None:
        lst._head = node
    lst._size += 1
    return node


def _require(node: Optional[Node]) -> Node:
    if node is None:
        raise ValueNotFoundError("no element has been returned since the last removal")
    return node


class ListIterator:
    """Walks a list from head to tail.

    ``remove``, ``add`` and ``replace`` act on the element most recently
    returned and leave the iterator usable.
    """

    def __init__(self, lst: LinkedList) -> None:
        self._list = lst
        self._index = 0
        self._last: Optional[Node] = None
        self._next: Optional[Node] = lst._head

    def __iter__(self) -> ListIterator:
        return self

    def __next__(self) -> Any:
        node = self._next
        if node is None:
            raise StopIteration
        self._last = node
        self._next = node.next
        self._index += 1
        return node.data

    def remove(self) -> Any:
        """Remove and return the element last returned."""
        node = _require(self._last)
        self._last = None
        self._index -= 1
        return self._list._unlink(node)

    def add(self, element: Any) -> None:
        """Insert an element right after the one last returned.

        The new element is not visited by this iterator.
        """
        _insert_after(self._list, _require(self._last), element)
        self._index += 1

    def replace(self, element: Any) -> Any:
        """Replace the element last returned and return the old one."""
        node = _require(self._last)
        old = node.data
        node.data = element
        return old

    def index(self) -> int:
        """Position in the list of the element last returned."""
        return self._index - 1


class DescendingListIterator:
    """Walks a list from tail to head.

    ``add`` inserts in front of the element last returned, so the new
    element is not visited either.
    """

    def __init__(self, lst: LinkedList) -> None:
        self._list = lst
        self._index = len(lst)
        self._last: Optional[Node] = None
        self._next: Optional[Node] = lst._tail

    def __iter__(self) -> DescendingListIterator:
        return self

    def __next__(self) -> Any:
        node = self._next
        if node is None:
            raise StopIteration
        self._last = node
        self._next = node.prev
        self._index -= 1
        return node.data

    def remove(self) -> Any:
        """Remove and return the element last returned."""
        node = _require(self._last)
        self._last = None
        return self._list._unlink(node)

    def add(self, element: Any) -> None:
        """Insert an element just before, in list order, the one last returned."""
        self._last = _insert_before(self._list, _require(self._last), element)

    def replace(self, element: Any) -> Any:
        """Replace the element last returned and return the old one."""
        node = _require(self._last)
        old = node.data
        node.data = element
        return old

    def index(self) -> int:
        """Position in the list of the element last returned."""
        return self._index


class ListZipIterator:
    """Walks two lists in lockstep until either one runs out."""

    def __init__(self, first: LinkedList, second: LinkedList) -> None:
        self._first = first
        self._second = second
        self._index = 0
        self._first_last: Optional[Node] = None
        self._second_last: Optional[Node] = None
        self._first_next: Optional[Node] = first._head
        self._second_next: Optional[Node] = second._head

    def __iter__(self) -> ListZipIterator:
        return self

    def __next__(self) -> tuple[Any, Any]:
        a, b = self._first_next, self._second_next
        if a is None or b is None:
            raise StopIteration
        self._first_last, self._second_last = a, b
        self._first_next, self._second_next = a.next, b.next
        self._index += 1
        return a.data, b.data

    def _lasts(self) -> tuple[Node, Node]:
        if self._first_last is None or self._second_last is None:
            raise ValueNotFoundError("no pair has been returned since the last removal")
        return self._first_last, self._second_last

    def remove(self) -> tuple[Any, Any]:
        """Remove and return the pair last returned."""
        a, b = self._lasts()
        self._first_last = self._second_last = None
        self._index -= 1
        return self._first._unlink(a), self._second._unlink(b)

    def add(self, first: Any, second: Any) -> None:
        """Insert a pair right after the pair last returned."""
        a, b = self._lasts()
        _insert_after(self._first, a, first)
        _insert_after(self._second, b, second)
        self._index += 1

    def replace(self, first: Any, second: Any) -> tuple[Any, Any]:
        """Replace the pair last returned and return the old pair."""
        a, b = self._lasts()
        old = (a.data, b.data)
        a.data, b.data = first, second
        return old

    def index(self) -> int:
        """Position of the pair last returned."""
        return self._index - 1