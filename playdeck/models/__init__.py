"""Data models for songs and preview playback."""
from playdeck.models.song import Song
from playdeck.models.playback import PreviewState

__all__ = [
    "Song",
    "PreviewState",
]
