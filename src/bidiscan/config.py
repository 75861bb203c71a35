"""Configuration: report location and worker count."""

from __future__ import annotations

import os

from bidiscan.errors import ConfigError

DEFAULT_REPORT_PATH = "docs/ops/reports/_tmp_bidi_scan.json"
DEFAULT_WORKERS = 1


def get_report_path() -> str:
    """Return the JSON report path from BIDISCAN_REPORT_PATH, or the default."""
    return os.environ.get("BIDISCAN_REPORT_PATH", "").strip() or DEFAULT_REPORT_PATH


def get_workers() -> int:
    """Return the worker count from BIDISCAN_WORKERS. Fail closed on bad values."""
    raw = os.environ.get("BIDISCAN_WORKERS", "").strip()
    if not raw:
        return DEFAULT_WORKERS
    try:
        workers = int(raw)
    except ValueError:
        raise ConfigError(
            f"BIDISCAN_WORKERS must be a positive integer, got {raw!r}",
            {"BIDISCAN_WORKERS": raw},
        ) from None
    if workers < 1:
        raise ConfigError(
            f"BIDISCAN_WORKERS must be a positive integer, got {raw!r}",
            {"BIDISCAN_WORKERS": raw},
        )
    return workers
