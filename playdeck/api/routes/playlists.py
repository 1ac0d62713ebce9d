"""Playlists: list, create, and add songs (backed by the shared store)."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel

from playdeck.api.routes.library import song_to_dict
from playdeck.api.state import AppState, get_state
from playdeck.core.playlist_store import CreateResult
from playdeck.models.song import Song

router = APIRouter()


class CreatePlaylistBody(BaseModel):
    name: str
    replace: bool = False


class AddToPlaylistBody(BaseModel):
    song_id: str


def _playlist_to_dict(name: str, songs: List[Song]) -> dict:
    return {"name": name, "songs": [song_to_dict(s) for s in songs]}


@router.get("")
def list_playlists(state: AppState = Depends(get_state)):
    """All playlists sorted by name, with the store revision."""
    revision, playlists = state.store.snapshot()
    return {
        "revision": revision,
        "playlists": [_playlist_to_dict(name, playlists[name]) for name in sorted(playlists)],
    }


@router.post("", status_code=201)
def create_playlist(
    body: CreatePlaylistBody,
    response: Response,
    state: AppState = Depends(get_state),
):
    """Create an empty playlist. An existing name is 409 unless replace=true, which empties it."""
    result = state.store.create_playlist(body.name, replace=body.replace)
    if result is CreateResult.REJECTED_EMPTY:
        raise HTTPException(status_code=400, detail="Playlist name must not be empty")
    if result is CreateResult.REJECTED_EXISTS:
        raise HTTPException(status_code=409, detail="Playlist already exists")
    if result is CreateResult.REPLACED:
        response.status_code = 200
    return {"result": result.value, "playlist": _playlist_to_dict(body.name, [])}


@router.post("/{name:path}/songs", status_code=201)
def add_to_playlist(
    name: str,
    body: AddToPlaylistBody,
    state: AppState = Depends(get_state),
):
    """Append a known song (catalog, Discover, or user-added); creates the playlist if missing."""
    song = state.find_song(body.song_id)
    if song is None:
        raise HTTPException(status_code=404, detail="Song not found")
    state.store.add_song(name, song)
    return _playlist_to_dict(name, state.store.get(name) or [])


# Registered after /songs: names may contain "/"
@router.get("/{name:path}")
def get_playlist(name: str, state: AppState = Depends(get_state)):
    songs = state.store.get(name)
    if songs is None:
        raise HTTPException(status_code=404, detail="Playlist not found")
    return _playlist_to_dict(name, songs)
