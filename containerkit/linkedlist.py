"""A doubly linked list of arbitrary Python objects."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from functools import cmp_to_key
from typing import Any, Optional

from containerkit.errors import InvalidRangeError, OutOfRangeError, ValueNotFoundError
from containerkit.nodes import Node, link_behind, merge_sort

Comparator = Callable[[Any, Any], int]


class LinkedList:
    """A doubly linked list.

    Insertion, removal and lookup at either end take constant time; access
    by index walks from whichever end is closer.

    ``contains`` and ``remove`` match elements by identity, the way a list of
    references does; ``contains_value`` and ``index_of`` compare values
    through a comparator.
    """

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        if iterable is not None:
            for element in iterable:
                self.add_last(element)

    # ------------------------------------------------------------------ nodes

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def _node_at(self, index: int) -> Node:
        index = operator.index(index)
        if not 0 <= index < self._size:
            raise OutOfRangeError(f"index {index} outside list of size {self._size}")
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def _unlink(self, node: Node) -> Any:
        """Detach ``node`` from the list and return its element."""
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.data

    @staticmethod
    def _chain(elements: Iterable[Any]) -> tuple[Optional[Node], Optional[Node], int]:
        head: Optional[Node] = None
        tail: Optional[Node] = None
        count = 0
        for element in elements:
            node = Node(element)
            if tail is None:
                head = node
            else:
                tail.next = node
                node.prev = tail
            tail = node
            count += 1
        return head, tail, count

    def _check_insert_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index <= self._size:
            raise OutOfRangeError(f"index {index} outside list of size {self._size}")
        return index

    def _insert_chain(self, head: Node, tail: Node, count: int, index: int) -> None:
        if self._size == 0:
            self._head, self._tail = head, tail
        elif index == self._size:
            self._tail.next = head
            head.prev = self._tail
            self._tail = tail
        elif index == 0:
            tail.next = self._head
            self._head.prev = tail
            self._head = head
        else:
            end = self._node_at(index)
            base = end.prev
            base.next = head
            head.prev = base
            tail.next = end
            end.prev = tail
        self._size += count

    # --------------------------------------------------------------- protocol

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            previous = node.prev
            yield node.data
            node = previous

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    # -------------------------------------------------------------- insertion

    def add(self, element: Any) -> None:
        """Append an element, making it the last one."""
        self.add_last(element)

    def add_first(self, element: Any) -> None:
        """Prepend an element, making it the first one."""
        node = Node(element)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def add_last(self, element: Any) -> None:
        """Append an element, making it the last one."""
        node = Node(element)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def add_at(self, element: Any, index: int) -> None:
        """Insert an element before the one currently at ``index``.

        The index must name an existing element, so this cannot add to an
        empty list or past the last element.
        """
        base = self._node_at(index)
        node = Node(element)
        link_behind(base, node)
        if node.prev is None:
            self._head = node
        self._size += 1

    def add_all(self, other: Iterable[Any]) -> None:
        """Append every element of ``other``, which is left unchanged."""
        self.add_all_at(other, self._size)

    def add_all_at(self, other: Iterable[Any], index: int) -> None:
        """Insert every element of ``other`` so the first lands at ``index``.

        ``index`` may range from 0 to ``len(self)``; ``other`` is left unchanged.
        """
        head, tail, count = self._chain(list(other))
        if count == 0:
            return
        index = self._check_insert_index(index)
        self._insert_chain(head, tail, count, index)

    def splice(self, other: LinkedList) -> None:
        """Move every element of ``other`` to the end of this list."""
        self.splice_at(other, self._size)

    def splice_at(self, other: LinkedList, index: int) -> None:
        """Move every element of ``other`` into this list at ``index``.

        ``other`` is left empty.
        """
        if other is self:
            raise ValueError("cannot splice a list into itself")
        if other._size == 0:
            return
        index = self._check_insert_index(index)
        self._insert_chain(other._head, other._tail, other._size, index)
        other._head = other._tail = None
        other._size = 0

    # ---------------------------------------------------------------- removal

    def remove(self, element: Any) -> Any:
        """Remove and return the first occurrence of this exact object."""
        for node in self._nodes():
            if node.data is element:
                return self._unlink(node)
        raise ValueNotFoundError("element not in list")

    def remove_at(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        return self._unlink(self._node_at(index))

    def remove_first(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise ValueNotFoundError("remove from an empty list")
        return self._unlink(self._head)

    def remove_last(self) -> Any:
        """Remove and return the last element."""
        if self._tail is None:
            raise ValueNotFoundError("remove from an empty list")
        return self._unlink(self._tail)

    def remove_all(self, cb: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every element, passing each one to ``cb`` first if given."""
        if self._size == 0:
            raise ValueNotFoundError("list is already empty")
        for node in list(self._nodes()):
            if cb is not None:
                cb(node.data)
            self._unlink(node)

    # ----------------------------------------------------------------- access

    def replace_at(self, element: Any, index: int) -> Any:
        """Put ``element`` at ``index`` and return the element it replaced."""
        node = self._node_at(index)
        old = node.data
        node.data = element
        return old

    def get_first(self) -> Any:
        """Return the first element."""
        if self._head is None:
            raise ValueNotFoundError("list is empty")
        return self._head.data

    def get_last(self) -> Any:
        """Return the last element."""
        if self._tail is None:
            raise ValueNotFoundError("list is empty")
        return self._tail.data

    def get_at(self, index: int) -> Any:
        """Return the element at ``index``."""
        return self._node_at(index).data

    # ------------------------------------------------------------ whole list

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        for node in self._nodes():
            node.next, node.prev = node.prev, node.next
        self._head, self._tail = self._tail, self._head

    def sublist(self, begin: int, end: int) -> LinkedList:
        """Return a new list of the elements from ``begin`` to ``end`` inclusive."""
        begin = operator.index(begin)
        end = operator.index(end)
        if begin < 0 or begin > end or end >= self._size:
            raise InvalidRangeError(
                f"range [{begin}, {end}] invalid for list of size {self._size}"
            )
        node = self._node_at(begin)
        sub = LinkedList()
        for _ in range(end - begin + 1):
            sub.add_last(node.data)
            node = node.next
        return sub

    def copy_shallow(self) -> LinkedList:
        """Return a new list holding the same element objects."""
        return LinkedList(self)

    def copy_deep(self, copier: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding ``copier(e)`` for every element ``e``."""
        return LinkedList(copier(element) for element in self)

    def to_array(self) -> list[Any]:
        """Return the elements as a Python list; the list must not be empty."""
        if self._size == 0:
            raise InvalidRangeError("cannot make an array of an empty list")
        return list(self)

    def contains(self, element: Any) -> int:
        """Count the occurrences of this exact object."""
        return sum(1 for item in self if item is element)

    def contains_value(self, element: Any, cmp: Comparator) -> int:
        """Count the elements for which ``cmp(item, element)`` is zero."""
        return sum(1 for item in self if cmp(item, element) == 0)

    def index_of(self, element: Any, cmp: Comparator) -> int:
        """Return the index of the first element equal to ``element`` under ``cmp``."""
        for index, item in enumerate(self):
            if cmp(item, element) == 0:
                return index
        raise OutOfRangeError("element not in list")

    def sort(self, cmp: Comparator) -> None:
        """Sort the elements by ``cmp``; the list must not be empty."""
        ordered = sorted(self.to_array(), key=cmp_to_key(cmp))
        for node, element in zip(self._nodes(), ordered):
            node.data = element

    def sort_in_place(self, cmp: Comparator) -> None:
        """Stably sort the list by relinking its nodes."""
        head, _ = merge_sort(self._head, self._size, cmp)
        self._head = head
        tail = head
        while tail is not None and tail.next is not None:
            tail = tail.next
        self._tail = tail

    def foreach(self, op: Callable[[Any], Any]) -> None:
        """Call ``op`` on every element in order."""
        for element in self:
            op(element)

    def filter_mut(self, pred: Callable[[Any], bool]) -> None:
        """Remove every element for which ``pred`` is false."""
        if self._size == 0:
            raise OutOfRangeError("cannot filter an empty list")
        for node in self._nodes():
            if not pred(node.data):
                self._unlink(node)

    def filter(self, pred: Callable[[Any], bool]) -> LinkedList:
        """Return a new list of the elements for which ``pred`` is true."""
        if self._size == 0:
            raise OutOfRangeError("cannot filter an empty list")
        return LinkedList(element for element in self if pred(element))