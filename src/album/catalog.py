"""Sample albums used by the demonstration CLI and the test suite."""

from typing import List

from .models import Album, Song

BEST_OF_TITLES = [
    "Strawberry fields forever",
    "Puttin' on the Ritz",
    "My heart belongs to daddy",
    "Daddy was a rolling stone",
]

AVERAGE_TITLES = [
    "TNT",
    "Satisfaction",
    "Aber bitte mit Sahne",
    "Griechischer Wein",
]


def _build_album(name: str, titles: List[str]) -> Album:
    album = Album(name)
    for title in titles:
        album.add_song(Song(title))
    return album


def best_of_rock_and_pop() -> Album:
    """Return a fresh "Best Of Rock&Pop" album."""
    return _build_album("Best Of Rock&Pop", BEST_OF_TITLES)


def average_rock_and_pop() -> Album:
    """Return a fresh "Average songs from Rock&Pop" album."""
    return _build_album("Average songs from Rock&Pop", AVERAGE_TITLES)


def sample_groups() -> List[List[Album]]:
    """Return two single-album groups, best-of first."""
    return [[best_of_rock_and_pop()], [average_rock_and_pop()]]
