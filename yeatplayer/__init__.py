"""Music library with SQLite playlists, JSON window themes and frameless-window geometry."""

__version__ = "0.1.0"
__all__ = ["__version__"]