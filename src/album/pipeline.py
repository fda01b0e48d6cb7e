"""Iterate, filter, map and flatten operations over albums and songs."""

import logging
import sys
from itertools import chain
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, TextIO, TypeVar

from .models import Album, Song

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def iter_titles(album: Album) -> Iterator[str]:
    """Yield the titles of an album's songs in order.

    Args:
        album: Album to read

    Returns:
        Lazy iterator of song titles
    """
    return (song.title for song in album.songs)


def print_titles(album: Album, out: Optional[TextIO] = None) -> None:
    """Write one song title per line.

    Args:
        album: Album whose titles are printed
        out: Stream to write to (defaults to stdout)
    """
    stream = out if out is not None else sys.stdout
    for title in iter_titles(album):
        print(title, file=stream)


def filter_songs(songs: Iterable[Song], substring: str) -> Iterator[Song]:
    """Yield the songs whose title contains ``substring``.

    Containment is an exact, case-sensitive substring check.

    Args:
        songs: Songs to filter
        substring: Text that must appear in the title

    Returns:
        Lazy iterator of matching Song objects in original order
    """
    return (song for song in songs if substring in song.title)


def titles_containing(album: Album, substring: str) -> Iterator[str]:
    """Yield the titles of an album that contain ``substring``.

    Args:
        album: Album to search
        substring: Case-sensitive text to look for

    Returns:
        Lazy iterator of matching titles in album order

    Examples:
        >>> album = Album("Mix")
        >>> album.add_song(Song("My heart belongs to daddy"))
        >>> album.add_song(Song("Daddy was a rolling stone"))
        >>> list(titles_containing(album, "daddy"))
        ['My heart belongs to daddy']
    """
    logger.debug(f"Filtering album '{album.name}' for titles containing '{substring}'")
    return (title for title in iter_titles(album) if substring in title)


def flat_map(func: Callable[[T], Iterable[R]], items: Iterable[T]) -> Iterator[R]:
    """Map each item to an iterable and flatten the results one level.

    Examples:
        >>> list(flat_map(lambda n: [n, n], [1, 2]))
        [1, 1, 2, 2]
    """
    return chain.from_iterable(func(item) for item in items)


def flatten_albums(groups: Iterable[Sequence[Album]]) -> List[Album]:
    """Flatten a sequence of album sequences into one list.

    Args:
        groups: Outer sequence of inner album sequences

    Returns:
        Albums in outer order, then inner order
    """
    albums = list(chain.from_iterable(groups))
    logger.debug(f"Flattened {len(albums)} albums")
    return albums


def album_names(groups: Iterable[Sequence[Album]]) -> List[str]:
    """Return the names of every album in a nested album structure."""
    return [album.name for album in flatten_albums(groups)]


def flatten_songs(groups: Iterable[Sequence[Album]]) -> List[Song]:
    """Flatten nested album groups down to a single list of songs.

    Order is group order, then album order, then song order within each album.

    Args:
        groups: Outer sequence of inner album sequences

    Returns:
        Every song of every album, depth-first
    """
    songs = list(flat_map(lambda album: album.songs, chain.from_iterable(groups)))
    logger.debug(f"Flattened {len(songs)} songs")
    return songs
