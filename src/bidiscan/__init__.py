"""Trojan Source scanner: find bidi control and invisible Unicode characters."""

from bidiscan.catalogue import UNSAFE_CHARS, lookup
from bidiscan.errors import BidiScanError, ConfigError, EnumerationError
from bidiscan.models import Finding, ScanReport
from bidiscan.report import emit
from bidiscan.scan import run_scan
from bidiscan.scanner import scan_file, scan_text

__version__ = "0.1.0"

__all__ = [
    "BidiScanError",
    "ConfigError",
    "EnumerationError",
    "Finding",
    "ScanReport",
    "UNSAFE_CHARS",
    "emit",
    "lookup",
    "run_scan",
    "scan_file",
    "scan_text",
]
