"""
Pytest fixtures for the album pipeline tests.

Every fixture builds fresh objects so tests never share album state.
"""

import pytest

from src.album.catalog import average_rock_and_pop, best_of_rock_and_pop, sample_groups
from src.album.models import Album, Song


@pytest.fixture
def best_of_album() -> Album:
    """Return the four-song "Best Of Rock&Pop" album."""
    return best_of_rock_and_pop()


@pytest.fixture
def average_album() -> Album:
    """Return the four-song "Average songs from Rock&Pop" album."""
    return average_rock_and_pop()


@pytest.fixture
def album_groups():
    """Return the nested two-group structure of sample albums."""
    return sample_groups()


@pytest.fixture
def empty_album() -> Album:
    return Album("Empty")


@pytest.fixture
def song_factory():
    """Return a helper that builds songs from titles."""
    def _make(*titles):
        return [Song(title) for title in titles]
    return _make
