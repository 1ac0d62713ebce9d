"""In-memory playlists: name -> ordered songs, shared by every view."""
import enum
import logging
import threading
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from playdeck.models.song import Song

logger = logging.getLogger(__name__)

Observer = Callable[["PlaylistStore"], None]


class CreateResult(str, enum.Enum):
    """Outcome of create_playlist."""
    CREATED = "created"
    REPLACED = "replaced"
    REJECTED_EMPTY = "rejected_empty"
    REJECTED_EXISTS = "rejected_exists"

    @property
    def changed(self) -> bool:
        return self in (CreateResult.CREATED, CreateResult.REPLACED)


def seed_playlists() -> Dict[str, List[Song]]:
    """Playlists present at startup, before any user action."""
    return {
        "Workout": [Song("Lying 4 Fun", "workout1"), Song("I Am", "workout2")],
        "Relax": [Song("Eternal Sunshine", "relax1"), Song("Sold Out Dates", "relax2")],
        "Party": [Song("Crushed Up", "party1"), Song("Faneto", "party2")],
    }


class PlaylistStore:
    """Single source of truth for playlists.

    Route handlers run in uvicorn's thread pool, so every read and write
    goes through one lock. Observers are called after the lock is released,
    once per mutation, with the store as the only argument.
    """

    def __init__(self, initial: Optional[Dict[str, Iterable[Song]]] = None) -> None:
        self._lock = threading.Lock()
        self._playlists: Dict[str, List[Song]] = {
            name: list(songs) for name, songs in (initial or {}).items()
        }
        self._observers: List[Observer] = []
        self._revision = 0

    # -- reads ---------------------------------------------------------

    @property
    def playlists(self) -> Dict[str, List[Song]]:
        """Snapshot of the current mapping (copies, safe to mutate)."""
        with self._lock:
            return {name: list(songs) for name, songs in self._playlists.items()}

    @property
    def revision(self) -> int:
        """Bumped on every mutation; lets clients tell when to re-render."""
        with self._lock:
            return self._revision

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._playlists)

    def get(self, name: str) -> Optional[List[Song]]:
        with self._lock:
            songs = self._playlists.get(name)
            return list(songs) if songs is not None else None

    def find_song(self, song_id: str) -> Optional[Song]:
        """Return a song in any playlist by id, or None."""
        with self._lock:
            for songs in self._playlists.values():
                for song in songs:
                    if song.song_id == song_id:
                        return song
        return None

    def snapshot(self) -> Tuple[int, Dict[str, List[Song]]]:
        """Revision and playlists read under one lock."""
        with self._lock:
            return self._revision, {
                name: list(songs) for name, songs in self._playlists.items()
            }

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._playlists

    def __len__(self) -> int:
        with self._lock:
            return len(self._playlists)

    # -- writes --------------------------------------------------------

    def _get_or_create(self, name: str) -> List[Song]:
        # Caller holds the lock
        songs = self._playlists.get(name)
        if songs is None:
            songs = self._playlists[name] = []
            logger.info("Store: created playlist %r on first add", name)
        return songs

    def get_or_create(self, name: str) -> List[Song]:
        """Return the playlist's songs, creating an empty playlist if missing."""
        with self._lock:
            existed = name in self._playlists
            songs = list(self._get_or_create(name))
            if not existed:
                self._revision += 1
        if not existed:
            self._notify()
        return songs

    def add_song(self, playlist_name: str, song: Song) -> None:
        """Append song to playlist_name, creating the playlist if missing.

        No duplicate check: the same song may appear in a playlist more than once.
        """
        with self._lock:
            self._get_or_create(playlist_name).append(song)
            self._revision += 1
        logger.debug("Store: added %r to %r", song.name, playlist_name)
        self._notify()

    def create_playlist(self, name: str, replace: bool = True) -> CreateResult:
        """Set playlist `name` to an empty list.

        An empty name is rejected. An existing playlist is emptied when
        replace is True, otherwise left alone and REJECTED_EXISTS returned.
        """
        if not name:
            logger.info("Store: rejected playlist with empty name")
            return CreateResult.REJECTED_EMPTY
        with self._lock:
            exists = name in self._playlists
            if exists and not replace:
                result = CreateResult.REJECTED_EXISTS
            else:
                self._playlists[name] = []
                self._revision += 1
                result = CreateResult.REPLACED if exists else CreateResult.CREATED
        logger.info("Store: create_playlist %r -> %s", name, result.value)
        if result.changed:
            self._notify()
        return result

    # -- observers -----------------------------------------------------

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register observer; returns a callable that unsubscribes it."""
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        with self._lock:
            observers = list(self._observers)
        for observer in observers:
            try:
                observer(self)
            except Exception:
                logger.exception("Store: observer %r failed", observer)
