"""Rendering of playlists back to M3U text."""

from __future__ import annotations

import logging
from typing import IO

from m3uplus.core.attributes import HEADER_PREFIX, format_attributes
from m3uplus.core.playlist import Playlist, PlaylistFormat, Track

logger = logging.getLogger(__name__)


class PlaylistEncoder:
    """Write playlists to a text stream; write errors propagate immediately."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream

    def encode(self, playlist: Playlist, playlist_format: PlaylistFormat = PlaylistFormat.PLUS) -> None:
        header = HEADER_PREFIX + format_attributes(playlist.known_attributes())
        header += format_attributes(playlist.extra_attributes.items())
        self._stream.write(header + "\n")
        for track in playlist.tracks:
            self._write_track(track, playlist_format)
        logger.debug("Encoded %d tracks as %s", len(playlist.tracks), playlist_format.value)

    def _write_track(self, track: Track, playlist_format: PlaylistFormat) -> None:
        extinf = f"#EXTINF:{track.length:.0f}"
        if playlist_format is PlaylistFormat.PLUS:
            extinf += format_attributes(track.known_attributes())
            extinf += format_attributes(track.extra_attributes.items())
        self._stream.write(f"{extinf},{track.name}\n")
        for directive in track.extra_directives:
            self._stream.write(directive + "\n")
        if track.url is not None:
            self._stream.write(track.url + "\n")
