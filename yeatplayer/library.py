"""Application logic for browsing albums, playing tracks and managing playlists."""

from __future__ import annotations

from dataclasses import dataclass, field

from yeatplayer.database import Album, Database, PlaylistOperation

LIKE_PLAYLIST = "Like"
NO_IMAGE = ":/files/image/no_image.jpg"
DEFAULT_VOLUME = 50
_PROJECT_ROOT_LEN = len("E:/QT2/projects/Yeat")


@dataclass
class AlbumView:
    """What is shown when an album or playlist is selected."""

    title: str
    description: str
    creation_date: str
    image: str
    tracks: list[str] = field(default_factory=list)


@dataclass
class TrackView:
    """What is shown and played when a track is selected."""

    album: str
    title: str
    image: str
    music_file: str
    volume: int = DEFAULT_VOLUME


def normalize_image_path(path: str) -> str:
    """Turn a chosen image file under the project root into a resource path."""
    if not path:
        return ""
    return ":" + path[_PROJECT_ROOT_LEN:]


class Library:
    """Album and playlist operations on top of a database."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def tabs(self) -> tuple[list[str], list[str]]:
        """Return the titles of the artist's albums and of the user's playlists."""
        albums = [album.title for album in self.database.albums(True)]
        playlists = [album.title for album in self.database.albums(False)]
        return albums, playlists

    def select_album(self, title: str) -> AlbumView:
        """Return the view of an album or playlist."""
        album = self.database.album(title)
        if album is None:
            raise LookupError(f"no album or playlist named {title!r}")
        return AlbumView(
            title=album.title,
            description=album.description,
            creation_date=album.creation_date,
            image=album.image if album.exist_image else NO_IMAGE,
            tracks=[track.title for track in self.database.tracks(title)],
        )

    def select_track(self, album: str, title: str) -> TrackView:
        """Return the view of a track, with its own image or its album's."""
        track = self.database.track(album, title)
        if track is None:
            raise LookupError(f"no track {title!r} in {album!r}")
        image = track.image
        if not image:
            owner = self.database.album(album)
            image = owner.image if owner is not None else ""
        return TrackView(album=album, title=title, image=image, music_file=track.music_file)

    @staticmethod
    def _require_title(title: str) -> None:
        if not title:
            raise ValueError("Cannot modify the list of playlists without the title")

    def create_playlist(self, title: str, description: str = "", image: str = "") -> None:
        """Create a new playlist."""
        self._require_title(title)
        self.database.modify_playlist(
            PlaylistOperation.CREATE,
            Album(title=title, description=description, image=image),
        )

    def edit_playlist(
        self, current_title: str, title: str, description: str = "", image: str = ""
    ) -> None:
        """Change the title, description and image of a playlist."""
        if not self.can_edit_playlist(current_title):
            raise ValueError(f"the {current_title!r} playlist cannot be edited")
        self._require_title(title)
        album_id = self.database.album_id(current_title)
        if album_id is None:
            raise LookupError(f"no playlist named {current_title!r}")
        self.database.modify_playlist(
            PlaylistOperation.EDIT,
            Album(album_id=album_id, title=title, description=description, image=image),
        )

    def remove_playlist(self, title: str) -> None:
        """Delete a playlist."""
        if not self.can_edit_playlist(title):
            raise ValueError(f"the {title!r} playlist cannot be removed")
        self.database.modify_playlist(PlaylistOperation.REMOVE, Album(title=title))

    def playlist_targets(self) -> list[str]:
        """Return the playlists a track can be added to."""
        return [
            album.title for album in self.database.albums(False) if album.title != LIKE_PLAYLIST
        ]

    def add_to_playlist(self, playlist: str, track: str, from_album: str) -> None:
        """Copy a track from an album into a playlist."""
        self.database.add_track_to_playlist(playlist, track, from_album)

    def like_track(self, track: str, from_album: str) -> None:
        """Add a track to the liked playlist."""
        if not self.can_like(from_album):
            raise ValueError("tracks in the liked playlist cannot be liked again")
        self.database.add_track_to_playlist(LIKE_PLAYLIST, track, from_album)

    def remove_track(self, album: str, track: str) -> None:
        """Remove a track from a playlist; artist albums are read-only."""
        owner = self.database.album(album)
        if owner is not None and owner.yeat_album:
            raise ValueError(f"tracks cannot be removed from the album {album!r}")
        self.database.remove_track_from_playlist(album, track)

    def can_edit_playlist(self, title: str) -> bool:
        """Whether a playlist may be edited or removed."""
        return title != LIKE_PLAYLIST

    def can_like(self, album: str) -> bool:
        """Whether tracks shown from this album may be liked."""
        return album != LIKE_PLAYLIST