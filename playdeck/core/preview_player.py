"""Preview playback state for the song detail view."""
import logging
import threading
from pathlib import Path
from typing import Optional

from playdeck.config import PREVIEW_FILE
from playdeck.models.playback import PreviewState
from playdeck.models.song import Song

logger = logging.getLogger(__name__)


class PreviewUnavailableError(Exception):
    """The bundled preview audio file is missing."""


class PreviewPlayer:
    """Tracks which song is loaded and whether it is playing.

    The audio itself is the bundled preview file, served to the client;
    play/pause/stop never block and never retry.
    """

    def __init__(self, preview_file: Path = PREVIEW_FILE) -> None:
        self._preview_file = Path(preview_file)
        self._lock = threading.Lock()
        self._song: Optional[Song] = None
        self._is_playing = False

    @property
    def preview_file(self) -> Path:
        return self._preview_file

    def get_state(self) -> PreviewState:
        with self._lock:
            return PreviewState(song=self._song, is_playing=self._is_playing)

    def play(self, song: Song) -> PreviewState:
        """Start the preview for song. Raises PreviewUnavailableError if the file is missing."""
        if not self._preview_file.is_file():
            logger.warning("Preview: audio file not found: %s", self._preview_file)
            raise PreviewUnavailableError(f"Audio file not found: {self._preview_file.name}")
        with self._lock:
            self._song = song
            self._is_playing = True
        logger.info("Preview: playing %r", song.name)
        return self.get_state()

    def pause(self) -> PreviewState:
        with self._lock:
            self._is_playing = False
        return self.get_state()

    def stop(self) -> PreviewState:
        """Stop and unload; called when the detail view goes away."""
        with self._lock:
            song, self._song, self._is_playing = self._song, None, False
        if song is not None:
            logger.info("Preview: stopped %r", song.name)
        return self.get_state()
