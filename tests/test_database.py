import datetime

import pytest

from yeatplayer.database import (
    Album,
    Database,
    DatabaseError,
    PlaylistOperation,
)


@pytest.fixture
def db(tmp_path):
    database = Database(tmp_path / "tracks.db")
    database.connect()
    yield database
    database.close()


def test_fresh_database_is_seeded(db):
    assert [a.title for a in db.albums(True)] == ["Afterlyfe", "LyfeStyle"]
    assert [a.title for a in db.albums(False)] == ["Like"]


def test_seeded_tracks(db):
    tracks = db.tracks("Afterlyfe")
    assert [t.title for t in tracks] == ["Shhh", "How it go", "123"]
    assert tracks[0].music_file == ":/files/music/Shhh.mp3"
    assert tracks[0].image == ""
    assert tracks[2].image == ":/files/image/background.jpg"
    assert all(t.album == "Afterlyfe" for t in tracks)


def test_album_details(db):
    album = db.album("Afterlyfe")
    assert album.title == "Afterlyfe"
    assert album.creation_date == "2019-09-18"
    assert album.exist_image is True
    assert album.image == ":/files/image/afterlyfe.jpg"
    assert "\n" in album.description


def test_like_album_has_no_image(db):
    like = db.album("Like")
    assert like.exist_image is False
    assert like.image == ""
    assert like.description == "Here you can see the tracks that you liked"


def test_missing_album_and_track(db):
    assert db.album("Nope") is None
    assert db.track("Afterlyfe", "Nope") is None
    assert db.album_id("Nope") is None
    assert db.tracks("Nope") == []


def test_album_id_matches_listing(db):
    listed = {a.title: a.album_id for a in db.albums(True)}
    assert db.album_id("LyfeStyle") == listed["LyfeStyle"]


def test_track_lookup(db):
    track = db.track("Afterlyfe", "123")
    assert track.title == "123"
    assert track.image == ":/files/image/background.jpg"
    assert track.music_file == ":/files/music/123.mp3"


def test_create_playlist(db):
    playlist = Album(title="Road", description="drive", image="")
    db.modify_playlist(PlaylistOperation.CREATE, playlist)
    created = db.album("Road")
    assert created.description == "drive"
    assert created.exist_image is False
    assert created.yeat_album is False
    assert created.creation_date == datetime.date.today().strftime("%Y-%m-%d")
    assert "Road" in [a.title for a in db.albums(False)]


def test_create_playlist_with_image_sets_flag(db):
    playlist = Album(title="Pics", image=":/files/image/x.jpg")
    db.modify_playlist(PlaylistOperation.CREATE, playlist)
    assert playlist.exist_image is True
    assert db.album("Pics").exist_image is True


def test_edit_playlist_by_id(db):
    db.modify_playlist(PlaylistOperation.CREATE, Album(title="Old", description="a"))
    album_id = db.album_id("Old")
    db.modify_playlist(
        PlaylistOperation.EDIT, Album(album_id=album_id, title="New", description="b")
    )
    assert db.album("Old") is None
    assert db.album("New").description == "b"
    assert db.album_id("New") == album_id


def test_remove_playlist(db):
    db.modify_playlist(PlaylistOperation.CREATE, Album(title="Gone"))
    db.modify_playlist(PlaylistOperation.REMOVE, Album(title="Gone"))
    assert db.album("Gone") is None


def test_add_track_uses_album_image_when_track_has_none(db):
    db.add_track_to_playlist("Like", "Shhh", "Afterlyfe")
    liked = db.track("Like", "Shhh")
    assert liked.image == ":/files/image/afterlyfe.jpg"


def test_add_track_keeps_track_image(db):
    db.add_track_to_playlist("Like", "123", "Afterlyfe")
    assert db.track("Like", "123").image == ":/files/image/background.jpg"


def test_add_unknown_track_has_empty_image(db):
    db.add_track_to_playlist("Like", "Ghost", "Nowhere")
    assert db.track("Like", "Ghost").image == ""


def test_remove_track(db):
    db.add_track_to_playlist("Like", "Lyfe", "LyfeStyle")
    assert [t.title for t in db.tracks("Like")] == ["Lyfe"]
    db.remove_track_from_playlist("Like", "Lyfe")
    assert db.tracks("Like") == []


def test_reopen_keeps_data_without_reseeding(tmp_path):
    path = tmp_path / "tracks.db"
    with Database(path) as first:
        first.modify_playlist(PlaylistOperation.CREATE, Album(title="Kept"))
    with Database(path) as second:
        titles = [a.title for a in second.albums(False)]
    assert titles == ["Like", "Kept"]


def test_unconnected_raises():
    db = Database("unused.db")
    with pytest.raises(DatabaseError):
        db.albums(True)


def test_unopenable_path_raises(tmp_path):
    db = Database(tmp_path / "missing" / "dir" / "tracks.db")
    with pytest.raises(DatabaseError):
        db.connect()


def test_corrupt_file_raises_on_query(tmp_path):
    path = tmp_path / "tracks.db"
    path.write_bytes(b"this is not a database file at all" * 10)
    db = Database(path)
    db.connect()
    try:
        with pytest.raises(DatabaseError):
            db.albums(True)
    finally:
        db.close()