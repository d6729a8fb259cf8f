"""Doubly linked nodes and the relinking primitives the lists are built on."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional

Comparator = Callable[[Any, Any], int]


@dataclass(eq=False)
class Node:
    """A list node holding one element and links to its neighbours.

    Changing the links by hand may break the list the node belongs to.
    """

    data: Any = None
    next: Optional[Node] = field(default=None, repr=False)
    prev: Optional[Node] = field(default=None, repr=False)


def _unlink(node: Node) -> None:
    """Close the gap a node leaves behind, without touching its own links."""
    if node.next is not None:
        node.next.prev = node.prev
    if node.prev is not None:
        node.prev.next = node.next


def link_behind(base: Node, ins: Node) -> None:
    """Move ``ins`` from wherever it is to just before ``base``."""
    _unlink(ins)
    ins.prev = base.prev
    if base.prev is not None:
        base.prev.next = ins
    ins.next = base
    base.prev = ins


def link_after(base: Node, ins: Node) -> None:
    """Move ``ins`` from wherever it is to just after ``base``."""
    _unlink(ins)
    ins.next = base.next
    if base.next is not None:
        base.next.prev = ins
    ins.prev = base
    base.next = ins


def _swap_adjacent(first: Node, second: Node) -> None:
    if first.next is second:
        left, right = first, second
    elif second.next is first:
        left, right = second, first
    else:
        return
    if right.next is not None:
        right.next.prev = left
    left.next = right.next
    if left.prev is not None:
        left.prev.next = right
    right.prev = left.prev
    left.prev = right
    right.next = left


def swap(first: Node, second: Node) -> None:
    """Exchange the positions of two nodes in their chain."""
    if first.next is second or second.next is first:
        _swap_adjacent(first, second)
        return

    first_left, first_right = first.prev, first.next
    second_left, second_right = second.prev, second.next

    if first_left is not None:
        first_left.next = second
    second.prev = first_left
    if first_right is not None:
        first_right.prev = second
    second.next = first_right

    if second_left is not None:
        second_left.next = first
    first.prev = second_left
    if second_right is not None:
        second_right.prev = first
    first.next = second_right


def _merge(
    left: Node, right: Node, l_size: int, r_size: int, cmp: Comparator
) -> tuple[Node, Node]:
    """Merge two adjacent sorted sections in place; return the new head and tail."""
    size = l_size + r_size
    l_done = r_done = 0
    l_part, r_part = left, right
    head, tail = left, right

    for i in range(size):
        if cmp(l_part.data, r_part.data) <= 0:
            if i == 0 and size == 2:
                break
            # Every left element is placed, so the rest of the right is too.
            if l_done == l_size:
                for _ in range(r_done, r_size - 1):
                    r_part = r_part.next
                tail = r_part
                break
            l_part = l_part.next
            l_done += 1
        else:
            following = r_part.next
            link_behind(l_part, r_part)
            if i == 0 and size == 2:
                return r_part, l_part
            r_done += 1
            # Every right element now sits among the left ones.
            if r_done == r_size:
                for _ in range(l_done, l_size - 1):
                    l_part = l_part.next
                tail = l_part
                break
            if i == 0:
                head = r_part
            r_part = following
    return head, tail


def _split(head: Node, size: int, cmp: Comparator) -> tuple[Node, Node]:
    if size < 2:
        return head, head
    l_size = size // 2
    r_size = size - l_size
    center = head
    for _ in range(l_size):
        center = center.next
    l_head, _ = _split(head, l_size, cmp)
    r_head, _ = _split(center, r_size, cmp)
    return _merge(l_head, r_head, l_size, r_size, cmp)


def merge_sort(
    head: Optional[Node], size: int, cmp: Comparator
) -> tuple[Optional[Node], Optional[Node]]:
    """Stably sort ``size`` nodes starting at ``head`` by relinking them.

    ``cmp(a, b)`` compares two elements and returns a negative number, zero
    or a positive number. Nodes outside the section stay linked to it.
    Returns the first and last node of the sorted section.
    """
    if head is None or size < 1:
        return None, None
    return _split(head, size, cmp)