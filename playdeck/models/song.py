"""Song value: catalog entries and user-added tracks."""
import uuid
from dataclasses import dataclass, field


def _new_song_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Song:
    """Immutable track. Equality and hash use song_id only, so two songs
    with the same name are still different songs."""
    name: str = field(compare=False)
    image_name: str = field(compare=False)
    song_id: str = field(default_factory=_new_song_id)
