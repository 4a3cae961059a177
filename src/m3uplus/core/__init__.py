"""Playlist codec core: model, decoder, encoder."""

from __future__ import annotations

from .errors import InvalidPlaylistError, PlaylistErrorKind
from .m3u import load_playlist, parse_playlist, read_playlist, save_playlist, serialize_playlist, write_playlist
from .playlist import Playlist, PlaylistFormat, Track

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
