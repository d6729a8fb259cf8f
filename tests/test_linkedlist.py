import random

import pytest

from containerkit.errors import (
    InvalidRangeError,
    OutOfRangeError,
    ValueNotFoundError,
)
from containerkit.linkedlist import LinkedList


def _cmp(a, b):
    return (a > b) - (a < b)


def _consistent(lst):
    forward = list(lst)
    assert list(reversed(lst)) == forward[::-1]
    assert len(lst) == len(forward)
    return forward


@pytest.fixture
def items():
    return [1, 2, 3, 4]


@pytest.fixture
def lst(items):
    return LinkedList(items)


def test_new_list_is_empty():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    with pytest.raises(ValueNotFoundError):
        lst.get_first()
    with pytest.raises(ValueNotFoundError):
        lst.get_last()


def test_add_and_add_last_append():
    lst = LinkedList()
    for value in (8, 3, 20, 1):
        lst.add(value)
    assert lst.get_last() == 1
    lst.add_last(90)
    assert lst.get_last() == 90
    assert _consistent(lst) == [8, 3, 20, 1, 90]


def test_add_first_prepends():
    lst = LinkedList([8, 3, 20, 1])
    assert lst.get_first() == 8
    lst.add_first(90)
    assert lst.get_first() == 90
    assert _consistent(lst) == [90, 8, 3, 20, 1]


def test_add_first_on_empty_sets_both_ends():
    lst = LinkedList()
    lst.add_first("x")
    assert lst.get_first() == "x"
    assert lst.get_last() == "x"


def test_add_at_inserts_before_index(lst, items):
    lst.add_at(90, 2)
    assert lst.get_at(2) == 90
    assert _consistent(lst) == items[:2] + [90] + items[2:]


def test_add_at_zero_becomes_head(lst, items):
    lst.add_at(90, 0)
    assert lst.get_first() == 90
    assert _consistent(lst) == [90] + items


def test_add_at_last_index_keeps_tail(lst, items):
    lst.add_at(90, len(items) - 1)
    assert lst.get_last() == items[-1]
    assert _consistent(lst) == items[:-1] + [90, items[-1]]


def test_add_at_rejects_index_past_end(lst, items):
    with pytest.raises(OutOfRangeError):
        lst.add_at(90, len(items))
    with pytest.raises(OutOfRangeError):
        LinkedList().add_at(90, 0)
    assert list(lst) == items


def test_add_all_appends_and_keeps_source(lst, items):
    other = LinkedList([5, 6, 7, 7])
    other.add_all(lst)
    assert _consistent(other) == [5, 6, 7, 7] + items
    assert list(lst) == items
    assert other.get_last() == lst.get_last()


def test_add_all_into_empty(items):
    target = LinkedList()
    target.add_all(LinkedList(items))
    assert _consistent(target) == items


def test_add_all_at_middle(lst, items):
    other = LinkedList([5, 6, 7, 7])
    lst.add_all_at(other, 2)
    assert len(other) == 4
    assert lst.get_last() == items[-1]
    assert lst.get_at(5) == other.get_at(2)
    assert _consistent(lst) == items[:2] + [5, 6, 7, 7] + items[2:]


@pytest.mark.parametrize("index", [0, 4])
def test_add_all_at_ends(lst, items, index):
    lst.add_all_at([10, 11], index)
    assert _consistent(lst) == items[:index] + [10, 11] + items[index:]


def test_add_all_at_out_of_range(lst, items):
    with pytest.raises(OutOfRangeError):
        lst.add_all_at([10], len(items) + 1)
    assert list(lst) == items


def test_add_all_at_with_nothing_to_add_ignores_index(lst, items):
    lst.add_all_at(LinkedList(), len(items) + 5)
    assert list(lst) == items


def test_splice_moves_everything(lst, items):
    other = LinkedList([5, 6, 7, 7])
    lst.splice(other)
    assert len(other) == 0
    assert list(other) == []
    assert lst.get_first() == items[0]
    assert lst.get_last() == 7
    assert lst.get_at(4) == 5
    assert _consistent(lst) == items + [5, 6, 7, 7]


def test_splice_at_middle(lst, items):
    other = LinkedList([5, 6, 7, 7])
    lst.splice_at(other, 2)
    assert len(other) == 0
    assert lst.get_at(2) == 5
    assert lst.get_last() == items[-1]
    assert _consistent(lst) == items[:2] + [5, 6, 7, 7] + items[2:]


def test_splice_at_zero(lst, items):
    other = LinkedList(["a", "b"])
    lst.splice_at(other, 0)
    assert _consistent(lst) == ["a", "b"] + items


def test_splice_into_empty(items):
    target = LinkedList()
    source = LinkedList(items)
    target.splice(source)
    assert _consistent(target) == items
    assert len(source) == 0


def test_splice_out_of_range_keeps_both(lst, items):
    other = LinkedList(["a"])
    with pytest.raises(OutOfRangeError):
        lst.splice_at(other, len(items) + 1)
    assert list(other) == ["a"]
    assert list(lst) == items


def test_splice_self_rejected(lst):
    with pytest.raises(ValueError):
        lst.splice(lst)


def test_remove_matches_identity():
    a, b, c = [1], [1], [2]
    lst = LinkedList([a, b, c])
    assert lst.remove(b) is b
    assert lst.contains(b) == 0
    assert lst.contains(a) == 1
    assert _consistent(lst) == [a, c]


def test_remove_missing_raises(lst, items):
    with pytest.raises(ValueNotFoundError):
        lst.remove(object())
    assert list(lst) == items


def test_remove_at(lst, items):
    assert lst.remove_at(2) == items[2]
    assert lst.get_at(2) == items[3]
    assert lst.remove_at(0) == items[0]
    assert lst.get_at(0) == items[1]
    assert _consistent(lst) == [items[1], items[3]]
    with pytest.raises(OutOfRangeError):
        lst.remove_at(2)


def test_remove_first_and_last(lst, items):
    assert lst.remove_first() == items[0]
    assert lst.get_first() == items[1]
    assert lst.remove_last() == items[-1]
    assert lst.get_last() == items[-2]
    assert _consistent(lst) == items[1:-1]


def test_remove_first_last_on_empty():
    lst = LinkedList()
    with pytest.raises(ValueNotFoundError):
        lst.remove_first()
    with pytest.raises(ValueNotFoundError):
        lst.remove_last()


def test_remove_all_with_callback(lst, items):
    seen = []
    lst.remove_all(seen.append)
    assert seen == items
    assert len(lst) == 0
    with pytest.raises(ValueNotFoundError):
        lst.get_first()
    with pytest.raises(ValueNotFoundError):
        lst.remove_all()


def test_replace_at(lst, items):
    replacement = object()
    assert lst.replace_at(replacement, 2) == items[2]
    assert lst.get_at(2) is replacement
    with pytest.raises(OutOfRangeError):
        lst.replace_at(replacement, len(items))


def test_get_at(lst, items):
    assert [lst.get_at(i) for i in range(len(items))] == items
    with pytest.raises(OutOfRangeError):
        lst.get_at(len(items))
    with pytest.raises(OutOfRangeError):
        lst.get_at(-1)


@pytest.mark.parametrize("count", [0, 1, 2, 5, 10])
def test_reverse(count):
    values = list(range(count))
    lst = LinkedList(values)
    lst.reverse()
    assert _consistent(lst) == values[::-1]


def test_sublist_is_inclusive(lst, items):
    sub = lst.sublist(1, 2)
    assert list(sub) == items[1:3]
    assert sub.get_at(1) == lst.get_at(2)
    assert list(lst) == items


@pytest.mark.parametrize("begin, end", [(2, 1), (0, 4), (3, 10)])
def test_sublist_invalid_range(lst, begin, end):
    with pytest.raises(InvalidRangeError):
        lst.sublist(begin, end)


def test_copy_shallow_shares_elements():
    elements = [[1], [2], [3], [4]]
    lst = LinkedList(elements)
    cp = lst.copy_shallow()
    assert len(cp) == len(lst)
    assert all(x is y for x, y in zip(cp, lst))
    cp.remove_first()
    assert len(lst) == len(elements)


def test_copy_deep_uses_copier():
    elements = [[1], [2], [3], [4]]
    lst = LinkedList(elements)
    cp = lst.copy_deep(list)
    assert list(cp) == elements
    assert cp.get_at(2) is not lst.get_at(2)
    assert cp.get_at(2) == lst.get_at(2)


def test_to_array(lst, items):
    assert lst.to_array() == items
    with pytest.raises(InvalidRangeError):
        LinkedList().to_array()


def test_contains_counts_identity():
    a, b, c = [8], [3], [20]
    lst = LinkedList([a, b, b, c])
    assert lst.contains(b) == 2
    assert lst.contains(c) == 1
    assert lst.contains([3]) == 0


def test_contains_value():
    lst = LinkedList([8, 3, 3, 20, 7])
    assert lst.contains_value(3, _cmp) == 2
    assert lst.contains_value(7, _cmp) == 1
    assert lst.contains_value(32, _cmp) == 0


def test_index_of():
    values = [8, 3, 20, 1]
    lst = LinkedList(values)
    assert lst.index_of(8, _cmp) == values.index(8)
    assert lst.index_of(20, _cmp) == values.index(20)
    with pytest.raises(OutOfRangeError):
        lst.index_of(99, _cmp)


def test_sort_ascending():
    rng = random.Random(7)
    values = [rng.randrange(100000) for _ in range(1000)]
    lst = LinkedList(values)
    lst.sort(_cmp)
    assert _consistent(lst) == sorted(values)


def test_sort_empty_raises():
    with pytest.raises(InvalidRangeError):
        LinkedList().sort(_cmp)


@pytest.mark.parametrize("count", [0, 1, 2, 3, 7, 1000])
def test_sort_in_place_ascending(count):
    rng = random.Random(count)
    values = [rng.randrange(100) for _ in range(count)]
    lst = LinkedList(values)
    lst.sort_in_place(_cmp)
    assert _consistent(lst) == sorted(values)


def test_sort_in_place_is_stable():
    rng = random.Random(3)
    values = [(rng.randrange(5), i) for i in range(200)]
    lst = LinkedList(values)
    lst.sort_in_place(lambda a, b: _cmp(a[0], b[0]))
    assert _consistent(lst) == sorted(values, key=lambda pair: pair[0])


def test_foreach_visits_in_order(lst, items):
    seen = []
    lst.foreach(seen.append)
    assert seen == items


@pytest.mark.parametrize(
    "pred",
    [lambda e: e == 0, lambda e: e >= 3, lambda e: e > 0],
)
def test_filter_mut(lst, items, pred):
    lst.filter_mut(pred)
    assert _consistent(lst) == [e for e in items if pred(e)]


def test_filter_mut_empty_raises():
    with pytest.raises(OutOfRangeError):
        LinkedList().filter_mut(bool)


@pytest.mark.parametrize(
    "pred",
    [lambda e: e == 0, lambda e: e >= 3, lambda e: e > 0],
)
def test_filter_returns_new_list(lst, items, pred):
    filtered = lst.filter(pred)
    assert _consistent(filtered) == [e for e in items if pred(e)]
    assert list(lst) == items


def test_filter_empty_raises():
    with pytest.raises(OutOfRangeError):
        LinkedList().filter(bool)