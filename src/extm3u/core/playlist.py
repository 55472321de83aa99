"""Playlist data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional

import yaml


@dataclass
class Entry:
    """One playable item of a playlist.

    ``title`` is tri-state: ``None`` means no title at all, while ``""`` is a
    present but empty title. The two serialize differently.
    """

    url: str = ""
    title: Optional[str] = None
    time: Optional[int] = None
    options: Dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        from extm3u.core.m3u import serialize_entry

        return serialize_entry(self)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"url": self.url}
        if self.title is not None:
            data["title"] = self.title
        if self.time is not None:
            data["time"] = self.time
        data["options"] = dict(self.options)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Entry":
        if not isinstance(data, Mapping):
            raise TypeError(f"Entry data must be a mapping, got {type(data).__name__}")
        title = data.get("title")
        time = data.get("time")
        options = data.get("options") or {}
        if not isinstance(options, Mapping):
            raise TypeError(f"Entry options must be a mapping, got {type(options).__name__}")
        return cls(
            url=str(data.get("url") or ""),
            title=None if title is None else str(title),
            time=None if time is None else int(time),
            options={str(key): str(value) for key, value in options.items()},
        )


@dataclass
class Playlist:
    entries: List[Entry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __str__(self) -> str:
        from extm3u.core.m3u import serialize_playlist

        return serialize_playlist(self)

    def append(self, entry: Entry) -> None:
        self.entries.append(entry)

    @classmethod
    def from_string(cls, text: str, *, strict: bool = False) -> "Playlist":
        from extm3u.core.m3u import parse_playlist

        return parse_playlist(text, strict=strict)

    def to_dict(self) -> Dict[str, Any]:
        return {"entries": [entry.to_dict() for entry in self.entries]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Playlist":
        if not isinstance(data, Mapping):
            raise TypeError(f"Playlist data must be a mapping, got {type(data).__name__}")
        return cls(entries=[Entry.from_dict(item) for item in data.get("entries") or []])


def dump_yaml(playlist: Playlist) -> str:
    """Return the playlist as a YAML document."""

    return yaml.safe_dump(playlist.to_dict(), allow_unicode=True, sort_keys=False)


def load_yaml(text: str) -> Playlist:
    data = yaml.safe_load(text)
    if data is None:
        return Playlist()
    return Playlist.from_dict(data)
