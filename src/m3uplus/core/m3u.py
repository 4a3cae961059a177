"""M3U playlist parsing/serialization helpers."""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Union

from m3uplus.core.decoder import PlaylistDecoder
from m3uplus.core.encoder import PlaylistEncoder
from m3uplus.core.playlist import Playlist, PlaylistFormat


def read_playlist(stream: IO[Union[str, bytes]], encoding: str = "utf-8") -> Playlist:
    return PlaylistDecoder(stream, encoding=encoding).decode()


def parse_playlist(data: Union[str, bytes], encoding: str = "utf-8") -> Playlist:
    if isinstance(data, bytes):
        return read_playlist(io.BytesIO(data), encoding=encoding)
    return read_playlist(io.StringIO(data))


def load_playlist(path: Union[str, Path], encoding: str = "utf-8") -> Playlist:
    with Path(path).open("rb") as file:
        return read_playlist(file, encoding=encoding)


def write_playlist(
    playlist: Playlist,
    stream: IO[str],
    playlist_format: PlaylistFormat = PlaylistFormat.PLUS,
) -> None:
    PlaylistEncoder(stream).encode(playlist, playlist_format)


def serialize_playlist(playlist: Playlist, playlist_format: PlaylistFormat = PlaylistFormat.PLUS) -> str:
    buffer = io.StringIO()
    write_playlist(playlist, buffer, playlist_format)
    return buffer.getvalue()


def save_playlist(
    playlist: Playlist,
    path: Union[str, Path],
    playlist_format: PlaylistFormat = PlaylistFormat.PLUS,
    encoding: str = "utf-8",
) -> Path:
    """Write ``playlist`` to ``path`` atomically (temp file then replace)."""
    target_path = Path(path)
    target_path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = target_path.with_name(f".{target_path.name}.tmp")
    try:
        with temp_path.open("w", encoding=encoding, newline="\n") as file:
            write_playlist(playlist, file, playlist_format)
        temp_path.replace(target_path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
    return target_path
