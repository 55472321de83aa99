"""Extended M3U parsing/serialization helpers."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from extm3u.core.errors import MalformedLineError
from extm3u.core.playlist import Entry, Playlist

logger = logging.getLogger(__name__)

EXTM3U = "#EXTM3U"
EXTINF = "#EXTINF"
EXTVLCOPT = "#EXTVLCOPT"

_DURATION_RE = re.compile(r"\s*[+-]?\d+\s*")
_DURATION_MIN = -(2**31)
_DURATION_MAX = 2**31 - 1


def serialize_entry(entry: Entry) -> str:
    options = "".join(f"{EXTVLCOPT}:{key}={value}\n" for key, value in entry.options.items())
    body = f"{options}{entry.url}"

    if entry.title is None:
        if entry.time is None:
            return body
        # duration-only tag: the URL is not written
        return f"{EXTINF}:{entry.time}"

    duration = 0 if entry.time is None else entry.time
    if entry.title:
        return f"{EXTINF}:{duration},{entry.title}\n{body}"
    return f"{EXTINF}:{duration}\n{body}"


def serialize_playlist(playlist: Playlist) -> str:
    blocks = "\n".join(serialize_entry(entry) for entry in playlist.entries)
    return f"{EXTM3U}\n{blocks}"


def split_lines(text: str) -> List[str]:
    """Split ``text`` on line breaks without dropping empty lines.

    A final line break does not produce an extra empty line.
    """

    if not text:
        return []
    lines = text.replace("\r\n", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _parse_duration(raw: str) -> Optional[int]:
    """Return the duration as a signed 32-bit integer, or None if it is not one."""

    if not _DURATION_RE.fullmatch(raw):
        return None
    value = int(raw)
    if value < _DURATION_MIN or value > _DURATION_MAX:
        return None
    return value


def _split_marker(line: str, separator: str) -> Optional[Tuple[str, str]]:
    colon = line.find(":")
    sep = line.find(separator)
    if colon < 0 or sep < 0 or sep < colon:
        return None
    return line[colon + 1 : sep], line[sep + 1 :]


def parse_playlist(text: str, *, strict: bool = False) -> Playlist:
    """Parse an M3U document.

    Documents starting with ``#EXTM3U`` are read in extended mode; anything
    else is a bare playlist with one URL per line. In the default lenient
    mode malformed lines are skipped and bad durations become ``0``; with
    ``strict=True`` they raise :class:`MalformedLineError` instead.

    Lines starting with ``#`` other than ``#EXTINF`` and ``#EXTVLCOPT`` are
    read as URL lines in lenient mode. Titles and option values are kept
    up to the end of the line; only URL lines are trimmed.
    """

    lines = split_lines(text)
    if not lines:
        return Playlist()

    if lines[0] != EXTM3U:
        return Playlist(entries=[Entry(url=line) for line in lines])

    entries: List[Entry] = []
    current = Entry()
    pending_line: Optional[int] = None

    def reject(number: int, raw: str, reason: str) -> None:
        if strict:
            raise MalformedLineError(number, raw, reason)
        logger.debug("Malformed line %d (%s): %r", number, reason, raw)

    for number, raw in enumerate(lines[1:], start=2):
        line = raw.strip()
        if line.startswith(EXTINF):
            parts = _split_marker(raw, ",")
            if parts is None:
                reject(number, raw, "missing duration/title separator")
                continue
            duration = _parse_duration(parts[0])
            if duration is None:
                reject(number, raw, "invalid duration")
                duration = 0
            current.time = duration
            current.title = parts[1]
            pending_line = number
        elif line.startswith(EXTVLCOPT):
            parts = _split_marker(raw, "=")
            if parts is None:
                reject(number, raw, "missing option separator")
                continue
            key, value = parts
            current.options[key] = value
            pending_line = number
        elif line:
            if line.startswith("#"):
                if strict:
                    raise MalformedLineError(number, raw, "unknown tag")
                logger.debug("Reading unknown tag on line %d as a URL: %r", number, raw)
            current.url = line
            entries.append(current)
            current = Entry()
            pending_line = None

    if pending_line is not None:
        reject(pending_line, lines[pending_line - 1], "metadata without a URL line")

    return Playlist(entries=entries)
