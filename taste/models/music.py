# taste/models/music.py
"""
Spotify-side models: the transient track/artist records and the genre output.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class Track:
    """A top track, reduced to the artists that performed it"""
    artist_ids: List[str] = field(default_factory=list)


@dataclass
class Artist:
    """An artist, reduced to its genre tags"""
    genres: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class GenreStat:
    """
    One genre in the output.

    count is a percentage of the most frequent surviving genre (0-100).
    """
    value: str
    count: int

    def to_dict(self) -> Dict:
        return {"value": self.value, "count": self.count}
