"""
Music library aggregate.

Stores songs indexed both by genre and by artist while exposing nothing but
iterators over them.
"""

import logging
import threading
from typing import Dict, List, Tuple

from .iterators import SequentialIterator
from .models import Song

logger = logging.getLogger(__name__)


class MusicLibrary:
    """
    Collection of songs with genre and artist indexes.

    Both indexes are updated together on every add, so a song is reachable
    by its genre and by its artist as soon as it is added.
    """

    def __init__(self) -> None:
        """Initialize an empty library."""
        self._songs_by_genre: Dict[str, List[Song]] = {}
        self._songs_by_artist: Dict[str, List[Song]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return sum(len(songs) for songs in self._songs_by_genre.values())

    def add(self, song: Song) -> None:
        """Index a song under its genre and its artist."""
        with self._lock:
            self._songs_by_genre.setdefault(song.genre, []).append(song)
            self._songs_by_artist.setdefault(song.artist, []).append(song)
        logger.debug("Indexed '%s' under genre '%s' and artist '%s'", song.title, song.genre, song.artist)

    def genres(self) -> Tuple[str, ...]:
        """Get the genres present, in the order they were first added."""
        with self._lock:
            return tuple(self._songs_by_genre)

    def artists(self) -> Tuple[str, ...]:
        """Get the artists present, in the order they were first added."""
        with self._lock:
            return tuple(self._songs_by_artist)

    def create_iterator(self) -> SequentialIterator[Song]:
        """
        Iterate every song in the library.

        Songs are grouped by genre, genres in the order they were first seen.
        """
        with self._lock:
            all_songs = tuple(song for songs in self._songs_by_genre.values() for song in songs)
        return SequentialIterator(all_songs)

    def create_genre_iterator(self, genre: str) -> SequentialIterator[Song]:
        """Iterate the songs of a genre; an unknown genre gives an empty iterator."""
        with self._lock:
            songs = tuple(self._songs_by_genre.get(genre, ()))
        return SequentialIterator(songs)

    def create_artist_iterator(self, artist: str) -> SequentialIterator[Song]:
        """Iterate the songs of an artist; an unknown artist gives an empty iterator."""
        with self._lock:
            songs = tuple(self._songs_by_artist.get(artist, ()))
        return SequentialIterator(songs)
