"""
Entry point for PlaylistIter when run as a module.

This allows the package to be run with 'python -m playlistiter'.
"""

from playlistiter.main import cli

if __name__ == "__main__":
    cli()  # pylint: disable=no-value-for-parameter  # Click handles args
