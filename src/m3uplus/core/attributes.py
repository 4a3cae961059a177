"""Parsing of ``#EXTM3U`` / ``#EXTINF`` lines and their ``key="value"`` attributes."""

from __future__ import annotations

import re
from typing import Iterable, NamedTuple

HEADER_PREFIX = "#EXTM3U"
EXTINF_PREFIX = "#EXTINF:"

# Keys are letters, digits and hyphens; values run to the next quote, no escapes.
_ATTRIBUTE = r'(?P<key>(?:[^\W_]|-)+)="(?P<value>[^"]*)"'

ATTRIBUTE_RE = re.compile(_ATTRIBUTE)
HEADER_ATTRIBUTES_RE = re.compile(r'(?:\s+(?:[^\W_]|-)+="[^"]*")*')
EXTINF_RE = re.compile(
    r"^#EXTINF:(?P<length>[-+]?\d+(?:\.\d*)?)(?P<attributes>.*),(?P<name>.*)$"
)


class ExtinfFields(NamedTuple):
    length: float
    attributes: list[tuple[str, str]]
    name: str


def find_attributes(text: str) -> list[tuple[str, str]]:
    """Return ``(key, value)`` pairs in order of appearance, duplicates included."""
    return [(match.group("key"), match.group("value")) for match in ATTRIBUTE_RE.finditer(text)]


def parse_header_line(line: str) -> list[tuple[str, str]]:
    if not line.startswith(HEADER_PREFIX):
        raise ValueError(f"line does not start with {HEADER_PREFIX}")
    remainder = line[len(HEADER_PREFIX):]
    if not HEADER_ATTRIBUTES_RE.fullmatch(remainder):
        raise ValueError(
            f"malformed `{HEADER_PREFIX}` line: `{HEADER_PREFIX}` line failed to match regex "
            f"{HEADER_ATTRIBUTES_RE.pattern!r}"
        )
    return find_attributes(remainder)


def parse_extinf_line(line: str) -> ExtinfFields:
    """Split an ``#EXTINF`` line into duration, attributes and display name.

    The name is whatever follows the last comma, so attribute values may
    contain commas but names may not.
    """
    match = EXTINF_RE.match(line)
    if match is None:
        raise ValueError(
            f"malformed `#EXTINF` line: `#EXTINF` line failed to match regex {EXTINF_RE.pattern!r}"
        )
    length = float(match.group("length"))
    attributes = find_attributes(match.group("attributes").strip())
    return ExtinfFields(length, attributes, match.group("name").strip())


def format_attributes(pairs: Iterable[tuple[str, str]]) -> str:
    return "".join(f' {key}="{value}"' for key, value in pairs)
