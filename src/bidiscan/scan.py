"""Scan orchestration: run the scanner over a file list and aggregate a report."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable

from bidiscan.models import Finding, ScanReport
from bidiscan.scanner import scan_file

_LOGGER = logging.getLogger("bidiscan.scan")


def run_scan(
    paths: Iterable[str],
    workers: int = 1,
    scanner: Callable[[str], list[Finding]] = scan_file,
) -> ScanReport:
    """Scan every path and return the aggregated report.

    Files keep their input order in the report whether or not the scan
    runs in parallel; Executor.map yields results in submission order.
    """
    # git lists an unmerged path once per stage; scan each path once.
    paths = list(dict.fromkeys(paths))
    report = ScanReport()

    if workers > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(scanner, paths))
    else:
        results = [scanner(p) for p in paths]

    for path, findings in zip(paths, results):
        report.add(path, findings)

    _LOGGER.info(
        "scanned %d file(s): %d finding(s) in %d file(s)",
        len(paths), report.total, len(report),
    )
    return report
