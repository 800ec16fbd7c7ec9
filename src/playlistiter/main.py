"""
Command-line player for PlaylistIter.

Loads songs from a YAML file and plays them through one of the iteration
strategies.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import click

from playlistiter import __version__
from .config import (
    ConfigValidationError,
    create_default_config,
    get_config_path,
    load_config,
    load_songs,
)
from .models import IIterator, Song
from .music_library import MusicLibrary
from .player import MusicPlayer
from .playlist import DEFAULT_OLDIES_CUTOFF, Playlist

MODES = ("sequential", "shuffle", "genre", "oldies", "library")


def resolve_songs_file(songs_file: Optional[str], config: Dict[str, Any]) -> Optional[Path]:
    """Pick the songs file from the command line, falling back to the config."""
    if songs_file:
        return Path(songs_file)

    configured = config.get("songs_file")
    if configured:
        return Path(configured)

    if not get_config_path().exists():
        click.echo("No songs file given and no configuration found")
        click.echo("Creating default config file...")
        create_default_config()
        click.echo(f"Config created at: {get_config_path()}")
    else:
        click.echo(f"No songs file given and songs_file not set in {get_config_path()}")
    return None


def build_playlist(name: str, songs: List[Song]) -> Playlist:
    """Create a playlist holding the songs in file order."""
    playlist = Playlist(name)
    playlist.add_all(songs)
    return playlist


def build_library(songs: List[Song]) -> MusicLibrary:
    """Create a library indexing the songs by genre and artist."""
    library = MusicLibrary()
    for song in songs:
        library.add(song)
    return library


def select_iterator(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    mode: str,
    playlist: Playlist,
    songs: List[Song],
    genre: Optional[str],
    artist: Optional[str],
    seed: Optional[int],
    cutoff: int,
) -> Tuple[str, IIterator[Song]]:
    """
    Choose the iterator for a play mode.

    Returns:
        Tuple of the heading to show and the iterator to play
    """
    if mode == "shuffle":
        return f"{playlist.name} (Shuffle)", playlist.create_shuffle_iterator(seed)

    if mode == "genre":
        if not genre:
            raise click.UsageError("--mode genre requires --genre")
        return f"{playlist.name} (Genre: {genre})", playlist.create_genre_iterator(genre)

    if mode == "oldies":
        return f"{playlist.name} (Before {cutoff})", playlist.create_oldies_iterator(cutoff)

    if mode == "library":
        if genre and artist:
            raise click.UsageError("--genre and --artist cannot be combined in library mode")
        library = build_library(songs)
        if genre:
            return f"Library (Genre: {genre})", library.create_genre_iterator(genre)
        if artist:
            return f"Library (Artist: {artist})", library.create_artist_iterator(artist)
        return "Library (All)", library.create_iterator()

    return f"{playlist.name} (Sequential)", playlist.create_iterator()


@click.command()
@click.version_option(version=__version__)
@click.argument("songs_file", required=False)
@click.option(
    "--mode",
    type=click.Choice(MODES),
    default="sequential",
    show_default=True,
    help="Order in which to play the songs",
)
@click.option("--genre", help="Genre to play (genre and library modes)")
@click.option("--artist", help="Artist to play (library mode, not with --genre)")
@click.option("--seed", type=int, help="Seed for a reproducible shuffle")
@click.option("--cutoff", type=int, help="Play songs released before this year (oldies mode)")
@click.option("--verbose", is_flag=True, help="Show debug logging")
def cli(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    songs_file: Optional[str],
    mode: str,
    genre: Optional[str],
    artist: Optional[str],
    seed: Optional[int],
    cutoff: Optional[int],
    verbose: bool,
) -> None:
    """
    PlaylistIter - Play songs through interchangeable iterators.

    Reads songs from SONGS_FILE (or songs_file in the config) and plays them
    sequentially, shuffled, filtered by genre, or oldest first.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config()
    except ConfigValidationError as e:
        click.echo(f"Error: {e}")
        sys.exit(1)

    path = resolve_songs_file(songs_file, config)
    if path is None:
        sys.exit(1)

    try:
        name, songs = load_songs(path)
    except FileNotFoundError:
        click.echo(f"Error: songs file not found at {path}")
        sys.exit(1)
    except (OSError, ConfigValidationError) as e:
        click.echo(f"Error loading songs: {e}")
        sys.exit(1)

    player_config = config.get("player") or {}
    if seed is None:
        seed = player_config.get("shuffle_seed")
    if cutoff is None:
        cutoff = player_config.get("oldies_cutoff", DEFAULT_OLDIES_CUTOFF)

    playlist = build_playlist(name, songs)
    label, iterator = select_iterator(mode, playlist, songs, genre, artist, seed, cutoff)

    played = MusicPlayer().play(label, iterator)
    if played == 0:
        click.echo("No songs to play")


if __name__ == "__main__":
    cli()  # pylint: disable=no-value-for-parameter  # Click handles args
