from playdeck.core.preview_player import PreviewPlayer


def _song_id(client):
    return client.get("/api/library/songs", params={"genre": "Pop"}).json()[0]["song_id"]


def test_initial_state(client):
    assert client.get("/api/playback").json() == {"song": None, "is_playing": False}


def test_play_pause_stop(client):
    song_id = _song_id(client)
    resp = client.post("/api/playback/play", json={"song_id": song_id})
    assert resp.status_code == 200
    data = resp.json()
    assert data["is_playing"] is True
    assert data["song"]["song_id"] == song_id

    data = client.post("/api/playback/pause").json()
    assert data["is_playing"] is False
    assert data["song"]["song_id"] == song_id

    data = client.post("/api/playback/stop").json()
    assert data == {"song": None, "is_playing": False}


def test_preview_audio_served_while_loaded(client, preview_file):
    assert client.get("/api/playback/preview").status_code == 404
    client.post("/api/playback/play", json={"song_id": _song_id(client)})
    resp = client.get("/api/playback/preview")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "audio/mpeg"
    assert resp.content == preview_file.read_bytes()


def test_play_unknown_song(client):
    resp = client.post("/api/playback/play", json={"song_id": "missing"})
    assert resp.status_code == 404


def test_missing_audio_file_does_not_start(client, state, tmp_path):
    state.preview_player = PreviewPlayer(tmp_path / "absent.mp3")
    resp = client.post("/api/playback/play", json={"song_id": _song_id(client)})
    assert resp.status_code == 503
    assert client.get("/api/playback").json()["is_playing"] is False
