"""Extended M3U playlist codec."""

from __future__ import annotations

from extm3u.core.config import DEFAULT_CONFIG, SettingsManager
from extm3u.core.errors import M3UError, MalformedLineError
from extm3u.core.logging_config import configure_logging
from extm3u.core.m3u import parse_playlist, serialize_entry, serialize_playlist
from extm3u.core.playlist import Entry, Playlist, dump_yaml, load_yaml

__all__ = [
    "DEFAULT_CONFIG",
    "Entry",
    "M3UError",
    "MalformedLineError",
    "Playlist",
    "SettingsManager",
    "configure_logging",
    "dump_yaml",
    "load_yaml",
    "parse_playlist",
    "serialize_entry",
    "serialize_playlist",
]
