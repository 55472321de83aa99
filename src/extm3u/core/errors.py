"""Exceptions raised by the M3U codec."""

from __future__ import annotations


class M3UError(ValueError):
    """Base class for playlist codec errors."""


class MalformedLineError(M3UError):
    """Raised by strict parsing when a line cannot be interpreted."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        super().__init__(f"line {line_number}: {reason}: {line!r}")
        self.line_number = line_number
        self.line = line
        self.reason = reason
