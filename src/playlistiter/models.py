"""
Data models for PlaylistIter.

Defines the song value record and the two contracts the rest of the package
is built on: iterators that walk a snapshot of songs, and aggregates that
hand those iterators out.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

REQUIRED_SONG_FIELDS = ("title", "artist", "genre", "duration", "year")


@dataclass(frozen=True)
class Song:
    """
    Represents a song with descriptive metadata.

    Songs are immutable values: two songs with the same fields are equal
    and interchangeable.
    """

    title: str
    artist: str
    genre: str
    duration: int  # seconds
    year: int

    def __str__(self) -> str:
        return f"{self.title} - {self.artist} ({self.genre}, {self.year})"

    def duration_label(self) -> str:
        """Format the duration as minutes and seconds, e.g. "5:54"."""
        minutes, seconds = divmod(self.duration, 60)
        return f"{minutes}:{seconds:02d}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Song":
        """
        Create a Song from a mapping such as a parsed YAML entry.

        Args:
            data: Mapping with title, artist, genre, duration and year keys

        Returns:
            Song built from the mapping

        Raises:
            ValueError: If a key is missing or duration/year is not an integer
        """
        missing = [name for name in REQUIRED_SONG_FIELDS if name not in data]
        if missing:
            raise ValueError(f"song is missing required field(s): {', '.join(missing)}")

        for name in ("duration", "year"):
            # bool is an int subclass but never a valid duration or year
            if not isinstance(data[name], int) or isinstance(data[name], bool):
                raise ValueError(f"song {name} must be an integer, got {type(data[name]).__name__}")

        return cls(
            title=str(data["title"]),
            artist=str(data["artist"]),
            genre=str(data["genre"]),
            duration=data["duration"],
            year=data["year"],
        )


class IIterator(Protocol[T_co]):
    """
    Generic iteration contract.

    A cursor over a fixed sequence of items that can report whether more
    items remain, hand out the next one, and rewind to the start.
    """

    def has_next(self) -> bool:
        """Return True if next() would return an item."""
        raise NotImplementedError

    def next(self) -> T_co:
        """Return the current item and advance the cursor."""
        raise NotImplementedError

    def reset(self) -> None:
        """Rewind the cursor to the first item."""
        raise NotImplementedError


class IAggregate(Protocol[T]):
    """
    Generic interface for any container that can be iterated.

    Consumers depend only on this contract, never on how the container
    stores its elements.
    """

    def create_iterator(self) -> IIterator[T]:
        """Create a new iterator over the container's elements."""
        raise NotImplementedError
