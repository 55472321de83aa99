"""Default configuration values."""

from __future__ import annotations

from typing import Any, Dict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONFIG: Dict[str, Any] = {
    "parser": {
        "strict": False,
    },
    "diagnostics": {
        "log_level": "WARNING",
    },
}
