import pytest
from fastapi.testclient import TestClient

from playdeck.api.app import app
from playdeck.api.state import AppState, get_state
from playdeck.core.preview_player import PreviewPlayer


@pytest.fixture
def preview_file(tmp_path):
    path = tmp_path / "preview.mp3"
    path.write_bytes(b"ID3\x03\x00\x00\x00\x00\x00\x00fake-mp3")
    return path


@pytest.fixture
def state(preview_file):
    return AppState(seed=True, preview_player=PreviewPlayer(preview_file))


@pytest.fixture
def client(state):
    app.dependency_overrides[get_state] = lambda: state
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
