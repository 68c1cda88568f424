# taste/processors/genre_processor.py
"""
Genre aggregation over the artists behind the user's top tracks.
"""

from collections import Counter
from typing import Iterable, List

from ..config import GENRE_FREQUENCY_FLOOR, MAX_ARTIST_IDS
from ..exceptions import EmptyGenreTallyError
from ..models import Track, Artist, GenreStat


def collect_artist_ids(tracks: Iterable[Track], limit: int = MAX_ARTIST_IDS) -> List[str]:
    """
    Collect artist ids, in track order then artist order.

    Repeats are kept: an artist behind several top tracks fills several
    slots, so its genres are counted once per slot. Stops as soon as
    `limit` ids are collected, even partway through a track's artist list.
    """
    artist_ids: List[str] = []

    for track in tracks:
        for artist_id in track.artist_ids:
            if len(artist_ids) >= limit:
                return artist_ids
            artist_ids.append(artist_id)

    return artist_ids


def tally_genres(artists: Iterable[Artist], floor: int = GENRE_FREQUENCY_FLOOR) -> List[GenreStat]:
    """
    Count genre tags and scale them against the most frequent one.

    Steps:
    1. Flatten every artist's genres into one multiset
    2. Drop genres seen `floor` times or fewer
    3. Express each remaining count as floor(100 * count / max)

    Output follows first-seen order, not frequency order.

    Raises:
        EmptyGenreTallyError: no genre is frequent enough to survive
    """
    counts = Counter(genre for artist in artists for genre in artist.genres)

    weighted = {genre: count for genre, count in counts.items() if count > floor}
    if not weighted:
        raise EmptyGenreTallyError(f"No genre appears more than {floor} times")

    # The most frequent genre is 100%
    top = max(weighted.values())

    return [GenreStat(value=genre, count=(100 * count) // top) for genre, count in weighted.items()]
