"""Container data structures: linked list and its iterators, priority queue, queue and ring buffer."""

__version__ = "0.1.0"

__all__ = ["errors", "ringbuffer", "pqueue", "nodes", "linkedlist", "listiter", "queue"]