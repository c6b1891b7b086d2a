"""Data models for lyrics requests and results."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class LyricsRequest:
    """An artist/title pair to look up."""

    artist: str
    title: str


@dataclass(frozen=True)
class LyricsResult:
    """Resolved lyrics for a song.

    ``lyrics`` is always a string: real lyrics, scraped text, or the
    not-found placeholder. ``source`` names the provider that answered and
    is not part of the wire format.
    """

    artist: str
    title: str
    lyrics: str
    source: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"artist": self.artist, "title": self.title, "lyrics": self.lyrics}
