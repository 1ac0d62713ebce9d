"""Preview playback: play, pause, stop, and the preview audio itself."""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse
from pydantic import BaseModel

from playdeck.api.routes.library import song_to_dict
from playdeck.api.state import AppState, get_state
from playdeck.core.preview_player import PreviewUnavailableError
from playdeck.models.playback import PreviewState

router = APIRouter()


class PlayBody(BaseModel):
    song_id: str


def _state_to_dict(ps: PreviewState) -> dict:
    return {
        "song": song_to_dict(ps.song) if ps.song else None,
        "is_playing": ps.is_playing,
    }


@router.get("")
def get_playback(state: AppState = Depends(get_state)):
    return _state_to_dict(state.preview_player.get_state())


@router.post("/play")
def play(body: PlayBody, state: AppState = Depends(get_state)):
    """Start the preview for a song."""
    song = state.find_song(body.song_id)
    if song is None:
        raise HTTPException(status_code=404, detail="Song not found")
    try:
        return _state_to_dict(state.preview_player.play(song))
    except PreviewUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.post("/pause")
def pause(state: AppState = Depends(get_state)):
    return _state_to_dict(state.preview_player.pause())


@router.post("/stop")
def stop(state: AppState = Depends(get_state)):
    """Stop and unload the preview (detail view closed)."""
    return _state_to_dict(state.preview_player.stop())


@router.get("/preview")
def preview_audio(state: AppState = Depends(get_state)):
    """Audio for the loaded song; every song shares the bundled clip."""
    player = state.preview_player
    if player.get_state().song is None:
        raise HTTPException(status_code=404, detail="No song loaded")
    if not player.preview_file.is_file():
        raise HTTPException(status_code=404, detail="Preview audio not found")
    return FileResponse(player.preview_file, media_type="audio/mpeg")
