"""Diagnostics raised while decoding playlists."""

from __future__ import annotations

from enum import Enum


class PlaylistErrorKind(Enum):
    HEADER_MISSING = "header_missing"
    HEADER_MALFORMED = "header_malformed"
    EXTINF_MALFORMED = "extinf_malformed"
    DIRECTIVE_OUT_OF_ORDER = "directive_out_of_order"
    TRACK_INCOMPLETE = "track_incomplete"
    INVALID_URL = "invalid_url"
    UNEXPECTED_CONTENT = "unexpected_content"


class InvalidPlaylistError(ValueError):
    """First structural violation found in a playlist, with its line position."""

    def __init__(self, kind: PlaylistErrorKind, message: str, line_number: int, line: str) -> None:
        self.kind = kind
        self.message = message
        self.line_number = line_number
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        return f'invalid playlist: line {self.line_number}: "{self.line}": {self.message}'

    def __reduce__(self):
        return (self.__class__, (self.kind, self.message, self.line_number, self.line))
