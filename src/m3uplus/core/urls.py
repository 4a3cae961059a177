"""URL syntax checks for playlist locations and logos."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

_CONTROL_CHAR_RE = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*:")
# ASCII characters allowed in a host besides letters and digits; non-ASCII is allowed.
_HOST_PUNCTUATION = set("-_.~!$&'()*+,;=:[]<>\"%")
_PORT_RE = re.compile(r":\d*")


def parse_url(text: str) -> str:
    """Validate ``text`` as an absolute URL or relative reference and return it.

    Only syntax is checked; nothing is fetched. Raises ``ValueError`` with a
    short reason when the text cannot be a URI. Port numbers are not range
    checked.
    """
    if not text:
        raise ValueError("empty URL")
    match = _CONTROL_CHAR_RE.search(text)
    if match:
        raise ValueError(f"invalid control character {match.group()!r} in URL")
    if text.startswith(":"):
        raise ValueError("missing protocol scheme")
    match = _BAD_ESCAPE_RE.search(text)
    if match:
        escape = text[match.start():match.start() + 3]
        raise ValueError(f"invalid URL escape {escape!r}")

    parts = urlsplit(text)
    if not _SCHEME_RE.match(text):
        first_segment = re.split(r"[/?#]", text, maxsplit=1)[0]
        if ":" in first_segment:
            raise ValueError("first path segment in URL cannot contain colon")
    _check_host(parts.netloc)
    return text


def _check_host(netloc: str) -> None:
    hostport = netloc.rpartition("@")[2]
    for char in hostport:
        if char.isascii() and not char.isalnum() and char not in _HOST_PUNCTUATION:
            raise ValueError(f"invalid character {char!r} in host name")
    if hostport.startswith("["):
        port = hostport[hostport.index("]") + 1:]
    else:
        colon = hostport.rfind(":")
        port = hostport[colon:] if colon >= 0 else ""
    if port and not _PORT_RE.fullmatch(port):
        raise ValueError(f"invalid port {port!r} after host")
