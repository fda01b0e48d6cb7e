"""Data models for the Album/Song examples."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Song:
    """A single song.

    Attributes:
        title: Song title
    """

    title: str

    def get_title(self) -> str:
        return self.title


@dataclass
class Album:
    """A named, ordered collection of songs.

    Albums are created empty; songs are appended afterwards. Insertion order
    is preserved and duplicates are allowed.

    Attributes:
        name: Album name
        songs: Songs in insertion order
    """

    name: str
    songs: List[Song] = field(default_factory=list)

    def get_name(self) -> str:
        return self.name

    def get_songs(self) -> List[Song]:
        """Return the album's live song list.

        Returns:
            The list backing this album, not a copy
        """
        return self.songs

    def add_song(self, song: Song) -> None:
        """Append a song to the end of the album."""
        self.songs.append(song)

    def titles(self) -> List[str]:
        """Return the song titles in album order."""
        return [song.title for song in self.songs]
