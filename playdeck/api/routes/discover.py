"""Discover: static recommended songs with search."""
from typing import Optional

from fastapi import APIRouter, Depends

from playdeck.api.routes.library import song_to_dict
from playdeck.api.state import AppState, get_state

router = APIRouter()


@router.get("")
def list_discover(q: Optional[str] = None, state: AppState = Depends(get_state)):
    return [song_to_dict(s) for s in state.catalog.discover_songs(q)]
