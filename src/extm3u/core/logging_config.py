"""Logging setup for applications embedding the codec."""

from __future__ import annotations

import logging
import os
from typing import Optional

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_HANDLER_NAME = "extm3u-stream"


def configure_logging(level_override: Optional[str] = None) -> int:
    env_level = os.environ.get("LOGLEVEL")
    level_name = (env_level or level_override or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING

    package_logger = logging.getLogger("extm3u")
    package_logger.setLevel(level)
    if not any(handler.get_name() == _HANDLER_NAME for handler in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        package_logger.addHandler(handler)
    return level
