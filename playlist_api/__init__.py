"""REST backend for users, songs and playlists with JWT auth."""

__version__ = "0.1.0"
