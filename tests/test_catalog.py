from playdeck.core.catalog import Catalog, filter_songs


def test_genres_start_with_all():
    assert Catalog().genres == ["All", "Pop", "R&B", "Jazz", "Gospel", "Hip-Hop"]


def test_all_returns_every_genre_in_order():
    catalog = Catalog()
    songs = catalog.songs_for_genre("All")
    assert len(songs) == 20
    assert songs[0].name == "Human Nature"
    assert songs[-1].name == "Drive Me Crazy"


def test_single_genre_and_unknown_genre():
    catalog = Catalog()
    assert [s.name for s in catalog.songs_for_genre("Jazz")] == [
        "Blues March", "Breezin'", "Misty", "All I see in You",
    ]
    assert catalog.songs_for_genre("Polka") == []


def test_search_is_case_insensitive():
    catalog = Catalog()
    assert [s.name for s in catalog.library("All", "BLUE")] == ["Blue Dream", "Blues March"]
    assert [s.name for s in catalog.library("R&B", "blue")] == ["Blue Dream"]


def test_empty_query_keeps_everything():
    catalog = Catalog()
    assert filter_songs(catalog.discover, "") == catalog.discover
    assert filter_songs(catalog.discover, None) == catalog.discover


def test_discover_search():
    catalog = Catalog()
    assert len(catalog.discover_songs()) == 5
    assert [s.name for s in catalog.discover_songs("your way")] == ["YOUR WAY'S BETTER"]


def test_lookup_by_id_covers_discover():
    catalog = Catalog()
    song = catalog.discover[1]
    assert catalog.get(song.song_id) is song
    assert catalog.get("nope") is None
