import dataclasses

import pytest

from playdeck.models.song import Song


def test_songs_with_same_name_are_distinct():
    a, b = Song("Misty", "jazz3"), Song("Misty", "jazz3")
    assert a.song_id != b.song_id
    assert a != b
    assert len({a, b}) == 2


def test_song_equality_by_id():
    a = Song("Misty", "jazz3")
    renamed = dataclasses.replace(a, name="Other")
    assert renamed == a


def test_song_is_immutable():
    song = Song("Misty", "jazz3")
    with pytest.raises(dataclasses.FrozenInstanceError):
        song.name = "Changed"
