"""
PlaylistIter - Iterator pattern over songs, playlists and a music library.

A small library showing how playlists and a music library hand out
iterators (sequential, shuffled, filtered) without exposing their internal
storage, plus a command-line player that drains any of them.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("playlistiter")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = ["__version__"]
