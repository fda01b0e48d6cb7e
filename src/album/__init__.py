"""Album/Song collection pipeline examples.

This package holds a tiny in-memory music model and the iterate, filter, map
and flatten operations demonstrated over it.
"""

from .models import Album, Song
from .pipeline import (
    album_names,
    filter_songs,
    flat_map,
    flatten_albums,
    flatten_songs,
    iter_titles,
    print_titles,
    titles_containing,
)

__version__ = "1.0.0"

__all__ = [
    # Models
    "Album",
    "Song",
    # Pipeline
    "album_names",
    "filter_songs",
    "flat_map",
    "flatten_albums",
    "flatten_songs",
    "iter_titles",
    "print_titles",
    "titles_containing",
]
