# containerkit

A small set of container data structures written in plain Python with no
third-party dependencies.

| Module | Contents |
| --- | --- |
| `containerkit.linkedlist` | `LinkedList`: a doubly linked list with indexed access, splicing, sublists, sorting and filtering |
| `containerkit.listiter` | `ListIterator`, `DescendingListIterator`, `ListZipIterator`: iterators that can add, remove and replace elements while iterating |
| `containerkit.nodes` | `Node` and the relinking helpers `link_behind`, `link_after`, `swap` and `merge_sort` that the list is built on |
| `containerkit.pqueue` | `PriorityQueue`: a binary heap ordered by a comparator function |
| `containerkit.queue` | `Queue`: a first-in, first-out queue |
| `containerkit.ringbuffer` | `RingBuffer`: a fixed-capacity circular buffer of unsigned 64-bit integers |
| `containerkit.errors` | `CollectionError` and its subclasses |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

### Linked list

```python
from containerkit.linkedlist import LinkedList

items = LinkedList([4, 1, 3])
items.add_first(0)
items.add_at(9, 2)
print(list(items))          # [0, 4, 9, 1, 3]

items.sort(lambda a, b: (a > b) - (a < b))
print(items.get_first(), items.get_last())   # 0 9

evens = items.filter(lambda e: e % 2 == 0)
print(list(evens))          # [0, 4]
```

`contains` and `remove` match elements by identity (`is`); `contains_value`
and `index_of` compare through a comparator that returns zero for equal
values. `sort` reorders the elements; `sort_in_place` is a stable merge sort
that relinks the nodes. `add_at` inserts before an existing element, so its
index must be inside the list; `add_all_at` and `splice_at` accept any index
from 0 to `len(list)`. `splice` and `splice_at` move the elements out of the
other list, leaving it empty, while `add_all` and `add_all_at` copy them.

### Modifying a list while iterating

```python
from containerkit.linkedlist import LinkedList
from containerkit.listiter import ListIterator

items = LinkedList([1, 2, 3, 4])
it = ListIterator(items)
for value in it:
    if value == 3:
        it.remove()
print(list(items))          # [1, 2, 4]
```

`remove`, `add` and `replace` act on the element last returned; calling
`remove` or `replace` again before the next step raises
`ValueNotFoundError`. Elements inserted with `add` are not visited by the
same iterator. `ListZipIterator` walks two lists in lockstep, yielding pairs,
and stops when either list runs out.

### Priority queue

```python
from containerkit.pqueue import PriorityQueue

pq = PriorityQueue(lambda a, b: (a > b) - (a < b))
for n in (5, 1, 8, 3):
    pq.push(n)
print(pq.top())             # 8
print(pq.pop(), pq.pop())   # 8 5
```

The element that compares greatest under the comparator sits on top. After a
`pop`, only nodes with two children are rebalanced, so a parent whose single
child outranks it is left as it is. `clear` empties the queue, optionally
passing each element to a callback first.

### Queue

```python
from containerkit.queue import Queue

q = Queue()
q.enqueue("a")
q.enqueue("b")
print(q.peek(), q.poll(), len(q))   # a a 1
```

Iterating a `Queue` walks it from the most recently enqueued element to the
front.

### Ring buffer

```python
from containerkit.ringbuffer import RingBuffer

rb = RingBuffer(3)
for n in range(5):
    rb.enqueue(n)
print(rb.dequeue())         # 2: the oldest entries were overwritten
```

Items are stored modulo 2**64. `peek(index)` returns the raw contents of
slot `index`, not the n-th queued item. The read position moves forward
whenever the write position catches up with it, so `dequeue` returns items in
the order they were written once the buffer has been filled at least once.
The default capacity is 10.

## Errors

Every error derives from `containerkit.errors.CollectionError` and also from
the matching built-in exception:

- `OutOfRangeError` (`IndexError`): bad index, or an empty queue or heap
- `ValueNotFoundError` (`LookupError`): element not present, or an empty list
- `InvalidRangeError` (`ValueError`): malformed sublist range, or an empty list where one is not allowed
- `InvalidCapacityError` (`ValueError`): unusable capacity or growth factor
- `MaxCapacityError` (`OverflowError`): a priority queue cannot grow further

## What it does not include

This is a library only: there is no command-line tool. It has no array,
deque, stack, hash table, hash set or tree containers.