from __future__ import annotations

import io
from pathlib import Path

import pytest

from m3uplus import (
    Playlist,
    PlaylistFormat,
    Track,
    load_playlist,
    parse_playlist,
    read_playlist,
    save_playlist,
    serialize_playlist,
    write_playlist,
)


def _playlist() -> Playlist:
    return Playlist(
        tvg_url="http://127.0.0.1/epg.xml",
        tracks=[
            Track(length=123, name="Artist - Title", url="C:/music/track.mp3", group_title="Music"),
            Track(length=-1, name="Radio", url="http://127.0.0.1/radio", extra_directives=["#EXTGRP:Live"]),
        ],
    )


def test_parse_playlist_accepts_text_and_bytes() -> None:
    text = "#EXTM3U\n#EXTINF:123,Artist - Title\nC:/music/track.mp3\n"

    assert parse_playlist(text) == parse_playlist(text.encode("utf-8"))
    assert parse_playlist(text).tracks[0].length == 123.0


def test_read_and_write_playlist_streams() -> None:
    buffer = io.StringIO()
    write_playlist(_playlist(), buffer, PlaylistFormat.PLUS)
    buffer.seek(0)

    assert read_playlist(buffer) == _playlist()


def test_serialize_playlist_defaults_to_plus_format() -> None:
    serialized = serialize_playlist(_playlist()).splitlines()

    assert serialized[0] == '#EXTM3U url-tvg="http://127.0.0.1/epg.xml"'
    assert serialized[1] == '#EXTINF:123 group-title="Music",Artist - Title'
    assert serialized[2] == "C:/music/track.mp3"
    assert serialized[3] == "#EXTINF:-1,Radio"
    assert serialized[4] == "#EXTGRP:Live"
    assert serialized[5] == "http://127.0.0.1/radio"


def test_save_and_load_playlist(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "channels.m3u"

    written = save_playlist(_playlist(), target, PlaylistFormat.PLUS)

    assert written == target
    assert not (target.parent / ".channels.m3u.tmp").exists()
    assert target.read_bytes().startswith(b"#EXTM3U")
    assert load_playlist(target) == _playlist()


def test_save_playlist_basic_drops_attributes(tmp_path: Path) -> None:
    target = save_playlist(_playlist(), tmp_path / "basic.m3u", PlaylistFormat.BASIC)

    loaded = load_playlist(target)

    assert loaded.tracks[0].group_title is None
    assert loaded.tracks[1].extra_directives == ["#EXTGRP:Live"]


def test_playlist_format_from_name() -> None:
    assert PlaylistFormat.from_name("m3u") is PlaylistFormat.BASIC
    assert PlaylistFormat.from_name("BASIC") is PlaylistFormat.BASIC
    assert PlaylistFormat.from_name("plus") is PlaylistFormat.PLUS
    assert PlaylistFormat.from_name("m3u-plus") is PlaylistFormat.PLUS
    assert PlaylistFormat.from_name("M3UPlus") is PlaylistFormat.PLUS


def test_group_titles_in_first_seen_order() -> None:
    playlist = Playlist(
        tracks=[
            Track(length=-1, name="a", url="http://x/a", group_title="News"),
            Track(length=-1, name="b", url="http://x/b"),
            Track(length=-1, name="c", url="http://x/c", group_title="Sport"),
            Track(length=-1, name="d", url="http://x/d", group_title="News"),
        ]
    )

    assert playlist.group_titles() == ["News", "Sport"]
    assert playlist.tracks[0].is_live


def test_save_playlist_removes_temp_file_on_failure(tmp_path: Path) -> None:
    playlist = Playlist(tracks=[Track(length=-1, name="TV 🙃", url="http://x/1")])
    target = tmp_path / "out.m3u"

    with pytest.raises(UnicodeEncodeError):
        save_playlist(playlist, target, encoding="latin-1")

    assert list(tmp_path.iterdir()) == []
