"""Static song catalog by genre, the Discover list, and search filtering."""
from typing import Dict, List, Optional

from playdeck.models.song import Song

ALL_GENRES = "All"


def _songs(*pairs: tuple[str, str]) -> List[Song]:
    return [Song(name, image_name) for name, image_name in pairs]


class Catalog:
    """Hardcoded songs; built once per app, never mutated."""

    def __init__(self) -> None:
        self.by_genre: Dict[str, List[Song]] = {
            "Pop": _songs(
                ("Human Nature", "pop1"),
                ("Lost", "pop2"),
                ("Until the End of Time", "pop3"),
                ("Bad Guy", "pop4"),
            ),
            "R&B": _songs(
                ("Blame", "rnb1"),
                ("Who Hurt You?", "rnb2"),
                ("Holding On", "rnb3"),
                ("Blue Dream", "rnb4"),
            ),
            "Jazz": _songs(
                ("Blues March", "jazz1"),
                ("Breezin'", "jazz2"),
                ("Misty", "jazz3"),
                ("All I see in You", "jazz4"),
            ),
            "Gospel": _songs(
                ("Have Me", "gospel1"),
                ("Worth It", "gospel2"),
                ("Forever", "gospel3"),
                ("Listen", "gospel4"),
            ),
            "Hip-Hop": _songs(
                ("Mannequin Challenge", "hiphop1"),
                ("Still Prevail", "hiphop2"),
                ("Bandit", "hiphop3"),
                ("Drive Me Crazy", "hiphop4"),
            ),
        }
        # Static picks; there is no recommendation logic
        self.discover: List[Song] = _songs(
            ("Gospel song of the week", "gospel1"),
            ("5 Star", "trending1"),
            ("Taste", "trending2"),
            ("YOUR WAY'S BETTER", "trending3"),
            ("NEW DROP", "trending4"),
        )
        self._by_id: Dict[str, Song] = {
            s.song_id: s for songs in self.by_genre.values() for s in songs
        }
        self._by_id.update((s.song_id, s) for s in self.discover)

    @property
    def genres(self) -> List[str]:
        return [ALL_GENRES, *self.by_genre]

    def songs_for_genre(self, genre: str = ALL_GENRES) -> List[Song]:
        """All songs in genre order for "All"; [] for an unknown genre."""
        if genre == ALL_GENRES:
            return [s for songs in self.by_genre.values() for s in songs]
        return list(self.by_genre.get(genre, []))

    def library(self, genre: str = ALL_GENRES, query: Optional[str] = None) -> List[Song]:
        return filter_songs(self.songs_for_genre(genre), query)

    def discover_songs(self, query: Optional[str] = None) -> List[Song]:
        return filter_songs(self.discover, query)

    def get(self, song_id: str) -> Optional[Song]:
        return self._by_id.get(song_id)


def filter_songs(songs: List[Song], query: Optional[str]) -> List[Song]:
    """Case-insensitive substring match on name; empty query keeps everything."""
    if not query:
        return list(songs)
    needle = query.casefold()
    return [s for s in songs if needle in s.name.casefold()]
