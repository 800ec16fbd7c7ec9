"""
Tests for the MusicLibrary aggregate.

Tests genre and artist indexing and the iterators built from them.
"""

from playlistiter.iterators import SequentialIterator
from playlistiter.music_library import MusicLibrary
from .conftest import create_song, drain


class TestMusicLibrary:
    """Test MusicLibrary indexing and iteration."""

    def setup_method(self):
        """Set up a library with songs across two genres and three artists."""
        self.one = create_song(title="One", artist="Metallica", genre="Rock", year=1988)
        self.smooth = create_song(title="Smooth", artist="Santana", genre="Pop", year=1999)
        self.back_in_black = create_song(title="Back In Black", artist="AC/DC", genre="Rock", year=1980)
        self.enter_sandman = create_song(title="Enter Sandman", artist="Metallica", genre="Metal", year=1991)

        self.library = MusicLibrary()
        for song in (self.one, self.smooth, self.back_in_black, self.enter_sandman):
            self.library.add(song)

    def test_len(self):
        """Test the library counts each added song once."""
        assert len(self.library) == 4

    def test_create_iterator_groups_by_genre(self):
        """Test the full iterator flattens genre buckets in first-seen order."""
        iterator = self.library.create_iterator()

        assert isinstance(iterator, SequentialIterator)
        assert drain(iterator) == [self.one, self.back_in_black, self.smooth, self.enter_sandman]

    def test_create_iterator_is_stable(self):
        """Test repeated full iterators over an unchanged library agree."""
        assert drain(self.library.create_iterator()) == drain(self.library.create_iterator())

    def test_genre_iterator(self):
        """Test the genre iterator yields that genre's songs in insertion order."""
        assert drain(self.library.create_genre_iterator("Rock")) == [self.one, self.back_in_black]

    def test_artist_iterator(self):
        """Test the artist iterator yields that artist's songs in insertion order."""
        assert drain(self.library.create_artist_iterator("Metallica")) == [self.one, self.enter_sandman]

    def test_song_reachable_by_genre_and_artist(self):
        """Test an added song appears in both indexes."""
        song = create_song(title="Take Five", artist="Dave Brubeck", genre="Jazz")
        self.library.add(song)

        assert drain(self.library.create_genre_iterator("Jazz")) == [song]
        assert drain(self.library.create_artist_iterator("Dave Brubeck")) == [song]

    def test_genres_and_artists(self):
        """Test index keys are reported in first-seen order."""
        assert self.library.genres() == ("Rock", "Pop", "Metal")
        assert self.library.artists() == ("Metallica", "Santana", "AC/DC")

    def test_snapshot_isolation(self):
        """Test iterators ignore songs added after creation."""
        everything = self.library.create_iterator()
        rock = self.library.create_genre_iterator("Rock")
        metallica = self.library.create_artist_iterator("Metallica")

        self.library.add(create_song(title="Fuel", artist="Metallica", genre="Rock"))

        assert len(drain(everything)) == 4
        assert len(drain(rock)) == 2
        assert len(drain(metallica)) == 2


class TestMusicLibraryMissingKeys:
    """Test lookups for genres and artists that were never added."""

    def test_missing_genre_is_empty(self):
        """Test a genre never added yields an exhausted iterator, not an error."""
        library = MusicLibrary()
        library.add(create_song(title="X", genre="Rock"))
        library.add(create_song(title="Y", genre="Pop"))

        iterator = library.create_genre_iterator("Jazz")

        assert not iterator.has_next()

    def test_missing_artist_is_empty(self):
        """Test an artist never added yields an exhausted iterator."""
        assert not MusicLibrary().create_artist_iterator("Nobody").has_next()

    def test_missing_lookup_does_not_create_bucket(self):
        """Test looking up an absent genre does not add it to the index."""
        library = MusicLibrary()

        library.create_genre_iterator("Jazz")
        library.create_artist_iterator("Nobody")

        assert library.genres() == ()
        assert library.artists() == ()

    def test_empty_library(self):
        """Test a new library iterates nothing."""
        library = MusicLibrary()

        assert len(library) == 0
        assert not library.create_iterator().has_next()
