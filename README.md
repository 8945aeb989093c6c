# yeatplayer

A small music library manager. It keeps albums, playlists and their tracks
in a SQLite database, builds Qt style sheets for a window's title bar and
buttons from JSON theme files, and models how a frameless player window is
resized and moved by its edges.

## Install

    pip install .

## Command line

    yeatplayer [--db FILE] [COMMAND ...]

`--db` names the database file (default `tracks.db`). If the file does not
exist it is created and seeded with the "Like" playlist and the albums
"Afterlyfe" (tracks "Shhh", "How it go", "123") and "LyfeStyle" (track
"Lyfe").

With no command, the artist's albums and your playlists are listed.

| Command | What it does |
| --- | --- |
| `albums` | list the artist's albums |
| `playlists` | list your playlists |
| `show ALBUM` | print title, description, date, image and tracks of an album or playlist |
| `track ALBUM TITLE` | print a track's title, image and music resource path |
| `create TITLE [--description D] [--image PATH]` | create a playlist |
| `edit CURRENT TITLE [--description D] [--image PATH]` | rename and change a playlist |
| `remove-playlist TITLE` | delete a playlist |
| `add PLAYLIST TRACK FROM_ALBUM` | copy a track into a playlist |
| `like TRACK FROM_ALBUM` | add a track to the "Like" playlist |
| `remove-track ALBUM TRACK` | remove a track from a playlist |

The `--image` value goes through `normalize_image_path`, which drops its
first 20 characters (the length of the project image root the program
expects) and prefixes `:` to make a resource path; an empty value stays
empty.

Errors (a missing album or track, a blank playlist title, editing or
removing "Like", liking from "Like", removing a track from an artist album,
database failures) are printed as `error: ...` and the command exits with
status 1.

## Library use

```python
from yeatplayer.database import Database
from yeatplayer.library import Library

with Database("tracks.db") as db:
    library = Library(db)
    albums, playlists = library.tabs()
    library.create_playlist("Road trip", "Songs for the car", "")
    library.add_to_playlist("Road trip", "Shhh", "Afterlyfe")
    library.like_track("Lyfe", "LyfeStyle")
    view = library.select_album("Road trip")
    print(view.tracks)
```

`yeatplayer.database.Database` gives direct access to the store:
`albums(yeat_album)`, `album(title)`, `album_id(title)`, `tracks(album)`,
`track(album, title)`, `modify_playlist(operation, playlist)` with a
`PlaylistOperation`, `add_track_to_playlist(album, title, from_album)` and
`remove_track_from_playlist(album, title)`. Failures raise `DatabaseError`.
A track added to a playlist without its own image takes the image of the
album it came from.

`yeatplayer.library.Library` adds the application rules: `select_album`
returns an `AlbumView` (with a placeholder image when the album has none),
`select_track` returns a `TrackView` with the track's image or its album's,
`playlist_targets` lists playlists other than "Like", and
`can_edit_playlist` / `can_like` report what is allowed.

## Themes

```python
from yeatplayer.stylehelper import StyleHelper

helper = StyleHelper()
theme = helper.load_theme("standart.json")
print(theme.window_title_qss, theme.close_btn_qss)
```

A theme is a JSON object with optional `name`, `windowTitle` (`icon`,
`background-color`), `mainMenu` and `windowButtons` (`minimize-button`,
`maximize-button`, `normal-button`, `close-button`, each with `normal`,
`hover` and `pressed` declarations). `load_theme_data` takes the JSON text
directly; `json_to_qss` and `window_button_qss` build the style sheet
fragments. An unreadable file or a non-object root raises `ThemeError`.

## Window frame

`yeatplayer.window` holds the geometry logic of a frameless window:
`check_collision` finds which edge, corner or title area a point is on,
`cursor_for` gives the matching `CursorShape`, and `WindowFrame` tracks
`press`, `move`, `release` and `toggle_maximized`. `read_geometry` and
`write_geometry` keep the window rectangle in an INI file as
`geometry=@Rect(x y w h)` under `[General]`, defaulting to 200, 200, 300,
300.

## What it does not do

There is no graphical window and no audio output. The package computes the
style sheets, geometry and track resource paths (`:/files/music/<title>.mp3`)
that a player would use, but it does not draw anything or play sound.

## Tests

    pip install .[test]
    pytest