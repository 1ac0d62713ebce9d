"""Library: browse the catalog by genre, search, and add new songs."""
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from playdeck.api.state import AppState, get_state
from playdeck.core.catalog import ALL_GENRES
from playdeck.models.song import Song

router = APIRouter()

DEFAULT_PLAYLIST = "Workout"


def song_to_dict(s: Song) -> dict:
    return {
        "song_id": s.song_id,
        "name": s.name,
        "image_name": s.image_name,
    }


class AddSongBody(BaseModel):
    name: str = Field(min_length=1)
    image_name: str = Field(min_length=1)
    playlist: str = DEFAULT_PLAYLIST


@router.get("/genres")
def list_genres(state: AppState = Depends(get_state)):
    """Genres for the picker, "All" first."""
    return state.catalog.genres


@router.get("/songs")
def list_songs(
    genre: str = ALL_GENRES,
    q: Optional[str] = None,
    state: AppState = Depends(get_state),
):
    """Catalog songs for a genre, optionally filtered by name (case-insensitive)."""
    return [song_to_dict(s) for s in state.catalog.library(genre, q)]


@router.post("/songs", status_code=201)
def add_song(body: AddSongBody, state: AppState = Depends(get_state)):
    """Add Song form: create a song and append it to the chosen playlist."""
    song = Song(body.name, body.image_name)
    state.store.add_song(body.playlist, song)
    return {"playlist": body.playlist, "song": song_to_dict(song)}
