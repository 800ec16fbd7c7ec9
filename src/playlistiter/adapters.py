"""
Adapters exposing plain collections through the aggregate interface.
"""

from collections import deque
from queue import Queue
from typing import Deque, Generic, Optional, Sequence, TypeVar, Union

from .iterators import SequentialIterator

T = TypeVar("T")


class ArrayAggregate(Generic[T]):
    """Wraps a fixed sequence such as a list or tuple."""

    def __init__(self, items: Optional[Sequence[T]] = None) -> None:
        self._items: Sequence[T] = items if items is not None else ()

    def create_iterator(self) -> SequentialIterator[T]:
        return SequentialIterator(self._items)


class QueueAggregate(Generic[T]):
    """
    Wraps a collections.deque or a queue.Queue, front to back.

    Creating an iterator only reads the queue; nothing is popped from it.
    """

    def __init__(self, queue: Optional[Union[Deque[T], "Queue[T]"]] = None) -> None:
        self._queue: Union[Deque[T], "Queue[T]"] = queue if queue is not None else deque()

    def create_iterator(self) -> SequentialIterator[T]:
        if isinstance(self._queue, Queue):
            # Queue keeps its items in a deque guarded by its own mutex
            with self._queue.mutex:
                return SequentialIterator(tuple(self._queue.queue))
        return SequentialIterator(tuple(self._queue))
