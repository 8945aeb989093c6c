"""Command line front end for the music library."""

from __future__ import annotations

import argparse
import sys

from yeatplayer.database import Database, DatabaseError
from yeatplayer.library import Library, normalize_image_path

APPLICATION_NAME = "Yeat"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="yeatplayer", description=f"{APPLICATION_NAME} music library")
    parser.add_argument("--db", default="tracks.db", help="database file (created if missing)")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("albums", help="list the artist's albums")
    sub.add_parser("playlists", help="list your playlists")

    show = sub.add_parser("show", help="show an album or playlist")
    show.add_argument("album")

    track = sub.add_parser("track", help="show a track")
    track.add_argument("album")
    track.add_argument("title")

    create = sub.add_parser("create", help="create a playlist")
    create.add_argument("title")
    create.add_argument("--description", default="")
    create.add_argument("--image", default="")

    edit = sub.add_parser("edit", help="edit a playlist")
    edit.add_argument("current")
    edit.add_argument("title")
    edit.add_argument("--description", default="")
    edit.add_argument("--image", default="")

    remove = sub.add_parser("remove-playlist", help="remove a playlist")
    remove.add_argument("title")

    add = sub.add_parser("add", help="add a track to a playlist")
    add.add_argument("playlist")
    add.add_argument("track")
    add.add_argument("from_album")

    like = sub.add_parser("like", help="like a track")
    like.add_argument("track")
    like.add_argument("from_album")

    remove_track = sub.add_parser("remove-track", help="remove a track from a playlist")
    remove_track.add_argument("album")
    remove_track.add_argument("track")
    return parser


def _print_lines(lines: list[str]) -> None:
    for line in lines:
        print(line)


def _run(library: Library, args: argparse.Namespace) -> None:
    command = args.command
    if command is None:
        albums, playlists = library.tabs()
        print("Albums:")
        _print_lines([f"  {title}" for title in albums])
        print("Playlists:")
        _print_lines([f"  {title}" for title in playlists])
    elif command == "albums":
        _print_lines(library.tabs()[0])
    elif command == "playlists":
        _print_lines(library.tabs()[1])
    elif command == "show":
        view = library.select_album(args.album)
        print(view.title)
        print(view.description)
        print(view.creation_date)
        print(view.image)
        _print_lines([f"  - {title}" for title in view.tracks])
    elif command == "track":
        view = library.select_track(args.album, args.title)
        print(view.title)
        print(view.image)
        print(view.music_file)
    elif command == "create":
        library.create_playlist(args.title, args.description, normalize_image_path(args.image))
    elif command == "edit":
        library.edit_playlist(
            args.current, args.title, args.description, normalize_image_path(args.image)
        )
    elif command == "remove-playlist":
        library.remove_playlist(args.title)
    elif command == "add":
        library.add_to_playlist(args.playlist, args.track, args.from_album)
    elif command == "like":
        library.like_track(args.track, args.from_album)
    elif command == "remove-track":
        library.remove_track(args.album, args.track)


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        with Database(args.db) as database:
            _run(Library(database), args)
    except (DatabaseError, LookupError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())