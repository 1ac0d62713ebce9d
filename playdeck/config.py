"""Configuration: env, API bind address, preview asset, seed data."""
import os
from pathlib import Path

# Base paths (project root = parent of playdeck package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so PLAYDECK_* overrides are set
from dotenv import load_dotenv

load_dotenv(BASE_DIR / ".env")

ASSETS_DIR = BASE_DIR / "assets"

# API
API_HOST = os.getenv("PLAYDECK_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("PLAYDECK_API_PORT", "8000"))
# CORS origin for the front end (e.g. http://localhost:5173 for Vite dev)
PLAYDECK_WEB_ORIGIN = os.getenv("PLAYDECK_WEB_ORIGIN", "*")

LOG_LEVEL = os.getenv("PLAYDECK_LOG_LEVEL", "INFO").upper()

# Every song previews the same clip; not shipped, supply it at this path
PREVIEW_FILE = Path(os.getenv("PLAYDECK_PREVIEW_FILE", str(ASSETS_DIR / "preview.mp3")))

# Start with Workout / Relax / Party playlists
SEED_PLAYLISTS = os.getenv("PLAYDECK_SEED_PLAYLISTS", "1").lower() in ("1", "true", "yes")
