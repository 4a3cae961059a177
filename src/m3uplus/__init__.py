"""Parse and serialize M3U / M3U Plus playlists."""

from __future__ import annotations

from m3uplus.core import (
    InvalidPlaylistError,
    Playlist,
    PlaylistErrorKind,
    PlaylistFormat,
    Track,
    load_playlist,
    parse_playlist,
    read_playlist,
    save_playlist,
    serialize_playlist,
    write_playlist,
)

__all__ = [
    "InvalidPlaylistError",
    "Playlist",
    "PlaylistErrorKind",
    "PlaylistFormat",
    "Track",
    "load_playlist",
    "parse_playlist",
    "read_playlist",
    "save_playlist",
    "serialize_playlist",
    "write_playlist",
]
