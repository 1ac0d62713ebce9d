"""Core services: catalog, playlist store, preview playback."""
from playdeck.core.catalog import Catalog
from playdeck.core.playlist_store import CreateResult, PlaylistStore
from playdeck.core.preview_player import PreviewPlayer

__all__ = ["Catalog", "CreateResult", "PlaylistStore", "PreviewPlayer"]
