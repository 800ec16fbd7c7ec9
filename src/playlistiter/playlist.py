"""
Playlist aggregate.

A named, ordered list of songs that only ever hands out iterators, never the
list itself.
"""

import logging
import threading
from typing import Iterable, List, Optional, Tuple

from .iterators import FilterIterator, SequentialIterator, ShuffleIterator
from .models import Song

logger = logging.getLogger(__name__)

DEFAULT_OLDIES_CUTOFF = 2000


class Playlist:
    """
    Represents a playlist of songs in insertion order.

    Each create_* method snapshots the songs at call time, so iterators are
    unaffected by songs added afterwards.
    """

    def __init__(self, name: str) -> None:
        """Initialize an empty playlist."""
        self.name = name
        self._songs: List[Song] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._songs)

    def add(self, song: Song) -> None:
        """Append a song to the end of the playlist."""
        with self._lock:
            self._songs.append(song)
        logger.debug("Added '%s' to playlist '%s'", song.title, self.name)

    def add_all(self, songs: Iterable[Song]) -> None:
        """Append several songs in order."""
        songs = list(songs)
        with self._lock:
            self._songs.extend(songs)
        logger.debug("Added %d songs to playlist '%s'", len(songs), self.name)

    def _snapshot(self) -> Tuple[Song, ...]:
        with self._lock:
            return tuple(self._songs)

    def create_iterator(self) -> SequentialIterator[Song]:
        """Iterate all songs in the order they were added."""
        return SequentialIterator(self._snapshot())

    def create_shuffle_iterator(self, seed: Optional[int] = None) -> ShuffleIterator[Song]:
        """
        Iterate all songs in random order.

        Args:
            seed: Seed for a reproducible order, None for a different order each time
        """
        return ShuffleIterator(self._snapshot(), seed=seed)

    def create_genre_iterator(self, genre: str) -> FilterIterator[Song]:
        """Iterate songs of one genre, compared case-insensitively."""
        wanted = genre.casefold()
        return FilterIterator(self._snapshot(), lambda song: song.genre.casefold() == wanted)

    def create_oldies_iterator(self, year_cutoff: int = DEFAULT_OLDIES_CUTOFF) -> FilterIterator[Song]:
        """
        Iterate songs released before a year, oldest first.

        Args:
            year_cutoff: Songs from this year onwards are skipped
        """
        return FilterIterator(
            self._snapshot(),
            lambda song: song.year < year_cutoff,
            order_by=lambda song: song.year,
        )
