"""FastAPI app, CORS, and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from playdeck.config import LOG_LEVEL, PLAYDECK_WEB_ORIGIN

# Configure logging in the worker process (visible with uvicorn --reload)
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(levelname)s: %(name)s: %(message)s",
)

from playdeck.api.state import AppState, get_state

# Import routes after state to avoid circular imports
from playdeck.api.routes import discover, library, playback, playlists

__all__ = ["app", "AppState", "get_state"]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    state = get_state()
    if not state.preview_player.preview_file.is_file():
        logger.warning(
            "Preview audio missing at %s; playback will not start",
            state.preview_player.preview_file,
        )
    logger.info("Playlists loaded: %s", ", ".join(state.store.names()) or "(none)")

    yield

    state.preview_player.stop()


app = FastAPI(
    title="Playdeck API",
    description="Local REST API for browsing songs and building playlists",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[PLAYDECK_WEB_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(library.router, prefix="/api/library", tags=["library"])
app.include_router(discover.router, prefix="/api/discover", tags=["discover"])
app.include_router(playlists.router, prefix="/api/playlists", tags=["playlists"])
app.include_router(playback.router, prefix="/api/playback", tags=["playback"])
