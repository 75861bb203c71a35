"""Error taxonomy: fatal conditions that abort a run before any scanning."""

from __future__ import annotations


class BidiScanError(Exception):
    """Base class. `code` is a stable identifier for callers and tests."""

    code = "E_INTERNAL"

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class EnumerationError(BidiScanError):
    """The file-listing provider could not produce a file list."""

    code = "E_ENUMERATION_FAILED"


class ConfigError(BidiScanError):
    code = "E_CONFIG_INVALID"
