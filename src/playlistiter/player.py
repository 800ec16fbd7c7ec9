"""
Music player that plays anything exposed through an iterator.
"""

import click

from .models import IIterator, Song


class MusicPlayer:  # pylint: disable=too-few-public-methods
    """Plays songs from any iterator, whatever container or order produced it."""

    def play(self, label: str, iterator: IIterator[Song]) -> int:
        """
        Play every remaining song of an iterator.

        Args:
            label: Heading shown before the songs
            iterator: Iterator to drain

        Returns:
            Number of songs played
        """
        click.echo()
        click.echo(f"=== {label} ===")

        count = 0
        while iterator.has_next():
            count += 1
            click.echo(f"{count}. {iterator.next()}")
        return count
