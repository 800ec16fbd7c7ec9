"""
Concrete iterators over song snapshots.

Every iterator copies its source into a tuple when it is created and keeps
its own cursor, so iterators never see later changes to the container they
came from and never interfere with each other.
"""

import logging
import random
from typing import Callable, Generic, Iterable, Optional, Tuple, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ExhaustedError(LookupError):
    """Raised when next() is called on an iterator with no items left."""


class SnapshotIterator(Generic[T]):
    """
    Iterator over an immutable snapshot, in the order given.

    A concrete class that subclasses reuse for cursor handling. They only
    decide which items end up in the snapshot and in what order.
    """

    def __init__(self, items: Iterable[T]) -> None:
        """Initialize the iterator over a private copy of the items."""
        self._items: Tuple[T, ...] = tuple(items)
        self._index = 0

    def has_next(self) -> bool:
        """Return True if next() would return an item."""
        return self._index < len(self._items)

    def next(self) -> T:
        """
        Return the current item and advance the cursor.

        Raises:
            ExhaustedError: If every item has already been returned
        """
        if not self.has_next():
            raise ExhaustedError(f"{type(self).__name__} has no more items")
        item = self._items[self._index]
        self._index += 1
        return item

    def reset(self) -> None:
        """Rewind to the first item without taking a new snapshot."""
        self._index = 0

    def remaining(self) -> int:
        """Number of items next() will still return."""
        return len(self._items) - self._index

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> "SnapshotIterator[T]":
        return self

    def __next__(self) -> T:
        try:
            return self.next()
        except ExhaustedError:
            raise StopIteration from None


class SequentialIterator(SnapshotIterator[T]):
    """Iterates items in the order they were given."""


class ShuffleIterator(SnapshotIterator[T]):
    """
    Iterates items in a random order fixed at construction.

    The same seed over the same items always produces the same order.
    reset() replays that order rather than shuffling again.
    """

    def __init__(
        self,
        items: Iterable[T],
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the shuffled iterator.

        Args:
            items: Items to iterate
            seed: Seed for a reproducible order (ignored when rng is given)
            rng: Random source to shuffle with, defaults to a fresh generator
        """
        super().__init__(items)
        if rng is None:
            rng = random.Random(seed)
        shuffled = list(self._items)
        rng.shuffle(shuffled)
        self._items = tuple(shuffled)
        logger.debug("Shuffled %d items (seed=%s)", len(self._items), seed)


class FilterIterator(SnapshotIterator[T]):
    """
    Iterates only the items matching a predicate, optionally sorted.

    Sorting is stable: items with equal keys keep their input order.
    """

    def __init__(
        self,
        items: Iterable[T],
        predicate: Callable[[T], bool],
        order_by: Optional[Callable[[T], int]] = None,
    ) -> None:
        """
        Initialize the filtering iterator.

        Args:
            items: Items to filter
            predicate: Function returning True for items to keep
            order_by: Optional sort key applied to the kept items
        """
        kept = [item for item in items if predicate(item)]
        if order_by is not None:
            kept.sort(key=order_by)
        super().__init__(kept)
        logger.debug("Filter kept %d items", len(self._items))
