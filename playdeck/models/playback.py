"""Preview playback state."""
from dataclasses import dataclass
from typing import Optional

from playdeck.models.song import Song


@dataclass
class PreviewState:
    """What the detail view shows: loaded song and play/pause."""
    song: Optional[Song]
    is_playing: bool
