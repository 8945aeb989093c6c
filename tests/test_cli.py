from yeatplayer.cli import main


def _db(tmp_path):
    return str(tmp_path / "tracks.db")


def test_default_lists_both_tabs(tmp_path, capsys):
    assert main(["--db", _db(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Afterlyfe" in out
    assert "LyfeStyle" in out
    assert "Like" in out


def test_albums_command(tmp_path, capsys):
    assert main(["--db", _db(tmp_path), "albums"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Afterlyfe", "LyfeStyle"]


def test_show_album(tmp_path, capsys):
    assert main(["--db", _db(tmp_path), "show", "LyfeStyle"]) == 0
    out = capsys.readouterr().out
    assert ":/files/image/lyfestyle.jpg" in out
    assert "  - Lyfe" in out


def test_track_command(tmp_path, capsys):
    assert main(["--db", _db(tmp_path), "track", "Afterlyfe", "Shhh"]) == 0
    assert ":/files/music/Shhh.mp3" in capsys.readouterr().out


def test_create_and_list_playlist(tmp_path, capsys):
    db = _db(tmp_path)
    assert main(["--db", db, "create", "Mix"]) == 0
    assert main(["--db", db, "playlists"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Like", "Mix"]


def test_like_then_show(tmp_path, capsys):
    db = _db(tmp_path)
    assert main(["--db", db, "like", "Shhh", "Afterlyfe"]) == 0
    assert main(["--db", db, "show", "Like"]) == 0
    assert "  - Shhh" in capsys.readouterr().out


def test_missing_album_is_an_error(tmp_path, capsys):
    assert main(["--db", _db(tmp_path), "show", "Nope"]) == 1
    assert "error:" in capsys.readouterr().err


def test_removing_like_is_an_error(tmp_path, capsys):
    assert main(["--db", _db(tmp_path), "remove-playlist", "Like"]) == 1
    assert "error:" in capsys.readouterr().err