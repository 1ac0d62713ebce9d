"""Shared application state (injected into routes)."""
import logging
from typing import Optional

from playdeck.config import SEED_PLAYLISTS
from playdeck.core.catalog import Catalog
from playdeck.core.playlist_store import PlaylistStore, seed_playlists
from playdeck.core.preview_player import PreviewPlayer
from playdeck.models.song import Song

logger = logging.getLogger(__name__)


class AppState:
    """Root owner of the one store, catalog and preview player."""

    def __init__(
        self,
        *,
        seed: bool = SEED_PLAYLISTS,
        preview_player: Optional[PreviewPlayer] = None,
    ) -> None:
        self.catalog = Catalog()
        self.store = PlaylistStore(seed_playlists() if seed else None)
        self.preview_player = preview_player or PreviewPlayer()
        self.store.subscribe(self._log_change)

    def find_song(self, song_id: str) -> Optional[Song]:
        """Look up a song in the catalog, then in the playlists."""
        return self.catalog.get(song_id) or self.store.find_song(song_id)

    @staticmethod
    def _log_change(store: PlaylistStore) -> None:
        logger.debug("Playlists changed (revision %d)", store.revision)


_state = AppState()


def get_state() -> AppState:
    return _state
