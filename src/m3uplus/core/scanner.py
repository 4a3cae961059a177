"""Line-by-line reader feeding the playlist decoder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Union

_BOM = "\ufeff"


@dataclass(frozen=True)
class ScannedLine:
    text: str
    line_number: int
    at_eof: bool


class LineScanner:
    """Read trimmed lines from a text or binary stream.

    ``line_number`` counts the lines returned so far. Reaching the end of the
    stream returns a ``ScannedLine`` with ``at_eof`` set; when the last
    line has no trailing newline, that final line carries its content.
    """

    def __init__(self, stream: IO[Union[str, bytes]], encoding: str = "utf-8") -> None:
        self._stream = stream
        self._encoding = encoding
        self.line_number = 0
        self._finished = False

    def read_line(self) -> ScannedLine:
        if self._finished:
            return ScannedLine("", self.line_number, True)
        raw = self._stream.readline()
        if isinstance(raw, bytes):
            raw = raw.decode(self._encoding)
        if not raw:
            self._finished = True
            return ScannedLine("", self.line_number, True)
        if self.line_number == 0 and raw.startswith(_BOM):
            raw = raw[len(_BOM):]
        self.line_number += 1
        at_eof = not raw.endswith("\n")
        self._finished = at_eof
        return ScannedLine(raw.strip(), self.line_number, at_eof)
