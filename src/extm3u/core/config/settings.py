"""Codec configuration management module."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from .defaults import DEFAULT_CONFIG, LOG_LEVELS
from .merge import deep_merge
from extm3u.core.env import resolve_config_path
from extm3u.core.logging_config import configure_logging
from extm3u.core.m3u import parse_playlist
from extm3u.core.playlist import Playlist

logger = logging.getLogger(__name__)


@dataclass
class SettingsManager:
    """YAML configuration with default values."""

    config_path: Path = Path("config/extm3u.yaml")

    def __post_init__(self) -> None:
        self.config_path = resolve_config_path(self.config_path)
        self._data: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        if self.config_path.exists():
            with self.config_path.open("r", encoding="utf-8") as file:
                user_config = yaml.safe_load(file) or {}
            if not isinstance(user_config, dict):
                logger.warning("Ignoring settings file %s: top level is not a mapping", self.config_path)
                user_config = {}
            self._data = deep_merge(DEFAULT_CONFIG, user_config)
        else:
            self._data = copy.deepcopy(DEFAULT_CONFIG)

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with self.config_path.open("w", encoding="utf-8") as file:
            yaml.safe_dump(self._data, file, allow_unicode=False, sort_keys=True)

    def get_raw(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    # --- parser ---
    def get_parser_strict(self) -> bool:
        parser = self._data.get("parser", {})
        return bool(parser.get("strict", DEFAULT_CONFIG["parser"]["strict"]))

    def set_parser_strict(self, enabled: bool) -> None:
        parser = self._data.setdefault("parser", {})
        parser["strict"] = bool(enabled)

    def parse_playlist(self, text: str) -> Playlist:
        return parse_playlist(text, strict=self.get_parser_strict())

    # --- diagnostics ---
    def get_diagnostics_log_level(self) -> str:
        diagnostics = self._data.get("diagnostics", {})
        level = str(diagnostics.get("log_level", DEFAULT_CONFIG["diagnostics"]["log_level"])).upper()
        return level if level in LOG_LEVELS else DEFAULT_CONFIG["diagnostics"]["log_level"]

    def set_diagnostics_log_level(self, level: str) -> None:
        diagnostics = self._data.setdefault("diagnostics", {})
        diagnostics["log_level"] = str(level).upper()

    def apply_logging(self) -> int:
        """Configure the package logger from the diagnostics section."""

        return configure_logging(self.get_diagnostics_log_level())
