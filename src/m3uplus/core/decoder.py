"""Single-pass M3U / M3U Plus decoder."""

from __future__ import annotations

import logging
from enum import Enum
from typing import IO, Optional, Union

from m3uplus.core.attributes import EXTINF_PREFIX, HEADER_PREFIX, parse_extinf_line, parse_header_line
from m3uplus.core.errors import InvalidPlaylistError, PlaylistErrorKind
from m3uplus.core.playlist import PLAYLIST_ATTRIBUTE_KEYS, Playlist, Track
from m3uplus.core.scanner import LineScanner, ScannedLine
from m3uplus.core.urls import parse_url

logger = logging.getLogger(__name__)

_BLOCK_MUST_END_WITH_URL = "`#EXTINF` directive block must end with a URL"


class LineKind(Enum):
    BLANK = "blank"
    EXTINF = "extinf"
    DIRECTIVE = "directive"
    CONTENT = "content"


class DecoderState(Enum):
    EXPECT_HEADER = "expect_header"
    EXPECT_TRACK_START = "expect_track_start"
    IN_TRACK_BLOCK = "in_track_block"
    DONE = "done"


def classify_line(text: str) -> LineKind:
    if not text:
        return LineKind.BLANK
    if text.startswith(EXTINF_PREFIX):
        return LineKind.EXTINF
    if text.startswith("#"):
        return LineKind.DIRECTIVE
    return LineKind.CONTENT


class PlaylistDecoder:
    """Decode one playlist from ``stream``.

    Decoding stops at the first violation with an ``InvalidPlaylistError``;
    errors raised by the stream itself propagate unchanged.
    """

    def __init__(self, stream: IO[Union[str, bytes]], encoding: str = "utf-8") -> None:
        self._scanner = LineScanner(stream, encoding=encoding)

    def decode(self) -> Playlist:
        playlist = Playlist()
        state = DecoderState.EXPECT_HEADER
        current: Optional[Track] = None

        while state is not DecoderState.DONE:
            scanned = self._scanner.read_line()
            if state is DecoderState.EXPECT_HEADER:
                self._read_header(scanned, playlist)
                state = DecoderState.DONE if scanned.at_eof else DecoderState.EXPECT_TRACK_START
                continue

            kind = classify_line(scanned.text)
            if kind is LineKind.BLANK:
                pass
            elif kind is LineKind.EXTINF:
                if current is not None:
                    raise _error(PlaylistErrorKind.TRACK_INCOMPLETE, _BLOCK_MUST_END_WITH_URL, scanned)
                current = self._open_track(scanned)
                state = DecoderState.IN_TRACK_BLOCK
            elif kind is LineKind.DIRECTIVE:
                if current is None:
                    raise _error(
                        PlaylistErrorKind.DIRECTIVE_OUT_OF_ORDER,
                        "`#EXTINF` directive must appear before any other directive",
                        scanned,
                    )
                current.extra_directives.append(scanned.text)
            elif current is not None and current.url is None:
                try:
                    current.url = parse_url(scanned.text)
                except ValueError as exc:
                    raise _error(PlaylistErrorKind.INVALID_URL, f"invalid URL: {exc}", scanned) from exc
                playlist.tracks.append(current)
                current = None
                state = DecoderState.EXPECT_TRACK_START
            else:
                raise _error(PlaylistErrorKind.UNEXPECTED_CONTENT, "unexpected content", scanned)

            if scanned.at_eof:
                if current is not None:
                    raise _error(PlaylistErrorKind.TRACK_INCOMPLETE, _BLOCK_MUST_END_WITH_URL, scanned)
                state = DecoderState.DONE

        logger.debug("Decoded playlist with %d tracks", len(playlist.tracks))
        return playlist

    def _read_header(self, scanned: ScannedLine, playlist: Playlist) -> None:
        if not scanned.text.startswith(HEADER_PREFIX):
            raise InvalidPlaylistError(
                PlaylistErrorKind.HEADER_MISSING,
                f"playlist must start with the `{HEADER_PREFIX}` directive",
                max(scanned.line_number, 1),
                scanned.text,
            )
        try:
            attributes = parse_header_line(scanned.text)
        except ValueError as exc:
            raise _error(PlaylistErrorKind.HEADER_MALFORMED, str(exc), scanned) from exc
        for key, value in attributes:
            if key in PLAYLIST_ATTRIBUTE_KEYS:
                try:
                    parse_url(value)
                except ValueError as exc:
                    raise _error(
                        PlaylistErrorKind.HEADER_MALFORMED,
                        f"invalid URL in `{key}` attribute: {exc}",
                        scanned,
                    ) from exc
            playlist.set_attribute(key, value)

    def _open_track(self, scanned: ScannedLine) -> Track:
        try:
            fields = parse_extinf_line(scanned.text)
        except ValueError as exc:
            raise _error(PlaylistErrorKind.EXTINF_MALFORMED, str(exc), scanned) from exc
        track = Track(length=fields.length, name=fields.name)
        for key, value in fields.attributes:
            if key == "tvg-logo":
                try:
                    parse_url(value)
                except ValueError:
                    # Unparsable logos are dropped, not kept as extra attributes.
                    logger.debug("Dropping tvg-logo %r on line %d", value, scanned.line_number)
                    continue
            track.set_attribute(key, value)
        return track


def _error(kind: PlaylistErrorKind, message: str, scanned: ScannedLine) -> InvalidPlaylistError:
    return InvalidPlaylistError(kind, message, scanned.line_number, scanned.text)
