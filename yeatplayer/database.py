"""SQLite-backed storage for albums, playlists and their tracks."""

from __future__ import annotations

import datetime
import logging
import sqlite3
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

MUSIC_PREFIX = ":/files/music/"
MUSIC_SUFFIX = ".mp3"

_RESTORE_SQL = (
    "CREATE TABLE albums("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "title TEXT NOT NULL,"
    "description TEXT,"
    "creation_date TEXT NOT NULL,"
    "yeat_album BOOL DEFAULT 0 NOT NULL,"
    "exist_image BOOL DEFAULT 0 NOT NULL,"
    "image TEXT"
    ");"
    "CREATE TABLE tracks("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "album TEXT NOT NULL,"
    "title TEXT NOT NULL,"
    "image TEXT"
    ");"
    "INSERT INTO albums(title, description, creation_date, exist_image) "
    "VALUES('Like', 'Here you can see the tracks that you liked', '2024-09-09', 0);"
    "INSERT INTO albums(title, description, creation_date, exist_image, image, yeat_album) "
    "VALUES('Afterlyfe', "
    "'Afterlyfe is the third studio album by American rapper Yeat.\n"
    "It was released by Geffen Records, Field Trip Recordings, and Twizzy Rich.\n"
    "The follow-up to his EP Lyfë, it contains a sole guest appearance from "
    "YoungBoy Never Broke Again as well as Yeats alter egos Kranky Kranky & Luh Geeky.',"
    "'2019-09-18', 1, ':/files/image/afterlyfe.jpg', 1);"
    "INSERT INTO tracks(album, title) VALUES('Afterlyfe', 'Shhh');"
    "INSERT INTO tracks(album, title) VALUES('Afterlyfe', 'How it go');"
    "INSERT INTO tracks(album, title, image) "
    "VALUES('Afterlyfe', '123', ':/files/image/background.jpg');"
    "INSERT INTO albums(title, description, creation_date, exist_image, image, yeat_album) "
    "VALUES('LyfeStyle', "
    "'LyfëStyle (originally titled 3093) is Yeats upcoming fifth studio album, "
    "following up February 2024s 2093',"
    "'-', 1, ':/files/image/lyfestyle.jpg', 1);"
    "INSERT INTO tracks(album, title) VALUES('LyfeStyle', 'Lyfe');"
)


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


@dataclass
class Track:
    """A track stored in an album or playlist."""

    id: int = 0
    album: str = ""
    title: str = ""
    image: str = ""
    music_file: str = ""


@dataclass
class Album:
    """An album or a user playlist."""

    album_id: int | None = None
    title: str = ""
    description: str = ""
    creation_date: str = ""
    yeat_album: bool = False
    exist_image: bool = False
    image: str = ""


class PlaylistOperation(Enum):
    """What to do with a playlist record."""

    CREATE = 0
    EDIT = 1
    REMOVE = 2


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _music_file(title: str) -> str:
    return f"{MUSIC_PREFIX}{title}{MUSIC_SUFFIX}"


class Database:
    """Album and track store backed by one SQLite file."""

    def __init__(self, path: str | PathLike[str] = "tracks.db") -> None:
        self.path = Path(path)
        self._conn: sqlite3.Connection | None = None

    def connect(self) -> None:
        """Open the database, creating and seeding it if the file is missing."""
        if self._conn is not None:
            return
        fresh = not self.path.exists()
        if fresh:
            log.debug("%s does not exist, restoring", self.path)
        try:
            conn = sqlite3.connect(self.path, isolation_level=None)
        except sqlite3.Error as exc:
            raise DatabaseError(f"cannot open database {self.path}: {exc}") from exc
        if fresh:
            try:
                conn.executescript(_RESTORE_SQL)
            except sqlite3.Error as exc:
                conn.close()
                raise DatabaseError(f"cannot create database {self.path}: {exc}") from exc
            log.debug("database %s created", self.path)
        self._conn = conn

    def close(self) -> None:
        """Close the connection if it is open."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> Database:
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _run(self, sql: str, params: tuple = ()) -> list[tuple]:
        if self._conn is None:
            raise DatabaseError("the database is not connected")
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def album_id(self, title: str) -> int | None:
        """Return the id of the album with this title, or None."""
        rows = self._run("SELECT id FROM albums WHERE title = ?", (title,))
        return rows[-1][0] if rows else None

    def albums(self, yeat_album: bool) -> list[Album]:
        """Return the artist's albums (True) or the user's playlists (False)."""
        rows = self._run(
            "SELECT id, title, description, creation_date, yeat_album, exist_image, image "
            "FROM albums WHERE yeat_album = ?",
            (int(bool(yeat_album)),),
        )
        return [
            Album(
                album_id=row[0],
                title=_text(row[1]),
                description=_text(row[2]),
                creation_date=_text(row[3]),
                yeat_album=bool(row[4]),
                exist_image=bool(row[5]),
                image=_text(row[6]),
            )
            for row in rows
        ]

    def album(self, title: str) -> Album | None:
        """Return the album with this title, or None."""
        rows = self._run(
            "SELECT id, description, creation_date, yeat_album, exist_image, image "
            "FROM albums WHERE title = ?",
            (title,),
        )
        if not rows:
            return None
        row = rows[-1]
        return Album(
            album_id=row[0],
            title=title,
            description=_text(row[1]),
            creation_date=_text(row[2]),
            yeat_album=bool(row[3]),
            exist_image=bool(row[4]),
            image=_text(row[5]),
        )

    def tracks(self, album: str) -> list[Track]:
        """Return the tracks of an album or playlist."""
        rows = self._run("SELECT id, title, image FROM tracks WHERE album = ?", (album,))
        return [
            Track(
                id=row[0],
                album=album,
                title=_text(row[1]),
                image=_text(row[2]),
                music_file=_music_file(_text(row[1])),
            )
            for row in rows
        ]

    def track(self, album: str, title: str) -> Track | None:
        """Return one track of an album, or None."""
        rows = self._run(
            "SELECT id, image FROM tracks WHERE album = ? AND title = ?", (album, title)
        )
        if not rows:
            return None
        row = rows[-1]
        return Track(
            id=row[0],
            album=album,
            title=title,
            image=_text(row[1]),
            music_file=_music_file(title),
        )

    def modify_playlist(self, operation: PlaylistOperation, playlist: Album) -> None:
        """Create, edit (by id) or remove (by title) a playlist record."""
        operation = PlaylistOperation(operation)
        creation_date = datetime.date.today().strftime("%Y-%m-%d")
        playlist.exist_image = bool(playlist.image)
        exist = int(playlist.exist_image)
        if operation is PlaylistOperation.CREATE:
            self._run(
                "INSERT INTO albums(title, description, creation_date, image, exist_image) "
                "VALUES(?, ?, ?, ?, ?)",
                (playlist.title, playlist.description, creation_date, playlist.image, exist),
            )
        elif operation is PlaylistOperation.EDIT:
            self._run(
                "UPDATE albums SET title = ?, description = ?, creation_date = ?, "
                "image = ?, exist_image = ? WHERE id = ?",
                (
                    playlist.title,
                    playlist.description,
                    creation_date,
                    playlist.image,
                    exist,
                    playlist.album_id,
                ),
            )
        else:
            self._run("DELETE FROM albums WHERE title = ?", (playlist.title,))

    def add_track_to_playlist(self, album: str, title: str, from_album: str) -> None:
        """Copy a track into a playlist, falling back to its album's image."""
        image = ""
        source_album = ""
        for (track_image,) in self._run(
            "SELECT image FROM tracks WHERE title = ? AND album = ?", (title, from_album)
        ):
            image = _text(track_image)
            source_album = from_album
        if image == "":
            for (album_image,) in self._run(
                "SELECT image FROM albums WHERE title = ?", (source_album,)
            ):
                image = _text(album_image)
        self._run(
            "INSERT INTO tracks(album, title, image) VALUES(?, ?, ?)", (album, title, image)
        )

    def remove_track_from_playlist(self, album: str, title: str) -> None:
        """Delete a track from an album or playlist."""
        self._run("DELETE FROM tracks WHERE title = ? AND album = ?", (title, album))