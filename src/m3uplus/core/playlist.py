"""Playlist data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

TVG_URL_KEY = "url-tvg"
X_TVG_URL_KEY = "x-tvg-url"

PLAYLIST_ATTRIBUTE_KEYS = (TVG_URL_KEY, X_TVG_URL_KEY)

# Rendering order for M3U Plus output.
TRACK_ATTRIBUTE_KEYS = ("tvg-id", "tvg-name", "tvg-language", "tvg-logo", "group-title")


class PlaylistFormat(Enum):
    BASIC = "m3u"
    PLUS = "m3u_plus"

    @classmethod
    def from_name(cls, name: str) -> "PlaylistFormat":
        """Resolve a format from its value or member name (``plus``, ``m3u_plus``, ``M3UPlus``)."""
        normalized = str(name).strip().lower().replace("-", "_")
        for member in cls:
            if normalized in (member.value, member.name.lower()):
                return member
        if normalized == "m3uplus":
            return cls.PLUS
        raise ValueError(f"Unknown playlist format: {name!r}")


@dataclass
class Track:
    length: float
    name: str
    url: Optional[str] = None
    tvg_id: Optional[str] = None
    tvg_name: Optional[str] = None
    tvg_language: Optional[str] = None
    tvg_logo: Optional[str] = None
    group_title: Optional[str] = None
    extra_attributes: Dict[str, str] = field(default_factory=dict)
    extra_directives: List[str] = field(default_factory=list)

    @property
    def is_live(self) -> bool:
        return self.length < 0

    def set_attribute(self, key: str, value: str) -> None:
        """Route an ``#EXTINF`` attribute to its typed field or to ``extra_attributes``."""
        if key == "tvg-id":
            self.tvg_id = value
        elif key == "tvg-name":
            self.tvg_name = value
        elif key == "tvg-language":
            self.tvg_language = value
        elif key == "tvg-logo":
            self.tvg_logo = value
        elif key == "group-title":
            self.group_title = value
        else:
            self.extra_attributes[key] = value

    def known_attributes(self) -> list[tuple[str, str]]:
        values = (self.tvg_id, self.tvg_name, self.tvg_language, self.tvg_logo, self.group_title)
        return [(key, value) for key, value in zip(TRACK_ATTRIBUTE_KEYS, values) if value is not None]


@dataclass
class Playlist:
    tvg_url: Optional[str] = None
    x_tvg_url: Optional[str] = None
    extra_attributes: Dict[str, str] = field(default_factory=dict)
    tracks: List[Track] = field(default_factory=list)

    def set_attribute(self, key: str, value: str) -> None:
        if key == TVG_URL_KEY:
            self.tvg_url = value
        elif key == X_TVG_URL_KEY:
            self.x_tvg_url = value
        else:
            self.extra_attributes[key] = value

    def known_attributes(self) -> list[tuple[str, str]]:
        values = (self.tvg_url, self.x_tvg_url)
        return [(key, value) for key, value in zip(PLAYLIST_ATTRIBUTE_KEYS, values) if value is not None]

    def group_titles(self) -> list[str]:
        """Return distinct group titles in order of first appearance."""
        seen: Dict[str, None] = {}
        for track in self.tracks:
            if track.group_title is not None:
                seen.setdefault(track.group_title, None)
        return list(seen)
