"""Helpers for environment overrides."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILE_ENV = "EXTM3U_CONFIG_PATH"
CONFIG_DIR_ENV = "EXTM3U_CONFIG_DIR"
CONFIG_FILENAME = "extm3u.yaml"


def resolve_config_path(default_path: Path) -> Path:
    """Return the settings file to use.

    An explicit file in ``EXTM3U_CONFIG_PATH`` wins over a directory in
    ``EXTM3U_CONFIG_DIR``; without either the caller's default is kept.
    """

    for name, to_path in (
        (CONFIG_FILE_ENV, Path),
        (CONFIG_DIR_ENV, lambda value: Path(value) / CONFIG_FILENAME),
    ):
        value = os.environ.get(name, "").strip()
        if value:
            return to_path(value)
    return default_path
