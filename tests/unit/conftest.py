"""
Test Configuration and Fixtures

Centralized song and container factories for unit tests.
"""

from unittest.mock import patch

import pytest
import yaml

from playlistiter.models import Song
from playlistiter.playlist import Playlist


def create_song(
    title="Test Song",
    artist="Test Artist",
    genre="Rock",
    duration=180,
    year=1990,
):
    """
    Create a song for testing.

    Args:
        title: Song title
        artist: Artist name
        genre: Genre name
        duration: Duration in seconds
        year: Release year

    Returns:
        Song model object
    """
    return Song(title=title, artist=artist, genre=genre, duration=duration, year=year)


def create_playlist(name="Test Playlist", songs=None):
    """Create a playlist pre-filled with the given songs."""
    playlist = Playlist(name)
    for song in songs or []:
        playlist.add(song)
    return playlist


def drain(iterator):
    """Collect every remaining item using only has_next()/next()."""
    items = []
    while iterator.has_next():
        items.append(iterator.next())
    return items


def write_songs_file(path, songs, name=None):
    """Write songs to a YAML file in the format load_songs() reads."""
    entries = [
        {
            "title": song.title,
            "artist": song.artist,
            "genre": song.genre,
            "duration": song.duration,
            "year": song.year,
        }
        for song in songs
    ]
    data = {"name": name, "songs": entries} if name is not None else entries
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f)
    return path


def silence_click_echo():
    """Context manager to silence click.echo calls in tests."""
    return patch("playlistiter.player.click.echo")


# Common Test Data Fixtures


@pytest.fixture
def song_a():
    """Rock song from 1975."""
    return create_song(title="Bohemian Rhapsody", artist="Queen", genre="Rock", duration=354, year=1975)


@pytest.fixture
def song_b():
    """Pop song from 1971."""
    return create_song(title="Imagine", artist="John Lennon", genre="Pop", duration=183, year=1971)


@pytest.fixture
def song_c():
    """Rock song from 1991."""
    return create_song(
        title="Smells Like Teen Spirit", artist="Nirvana", genre="Rock", duration=301, year=1991
    )


@pytest.fixture
def sample_songs(song_a, song_b, song_c):
    """Three songs: Rock 1975, Pop 1971, Rock 1991."""
    return [song_a, song_b, song_c]


@pytest.fixture
def sample_playlist(sample_songs):
    """Playlist holding the sample songs in order."""
    return create_playlist(name="Favourites", songs=sample_songs)


@pytest.fixture
def many_songs():
    """Ten distinct songs, enough to make shuffles distinguishable."""
    return [
        create_song(title=f"Song {i}", artist=f"Artist {i % 3}", year=1960 + i * 5)
        for i in range(10)
    ]
