"""Report emission: JSON artifact, console summary, exit status."""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import TextIO

from bidiscan.models import Finding, ScanReport

_LOGGER = logging.getLogger("bidiscan.report")

SUCCESS_LINE = "✅ No unsafe Unicode control characters found."


def report_to_json(report: ScanReport) -> str:
    """Serialize the report. Output is stable for identical input."""
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)


def write_report(report: ScanReport, path: str) -> None:
    """Write the JSON report to path. Always written, even when empty."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
        f.write(report_to_json(report))
    _LOGGER.info("wrote JSON report to %s", path)


def count_by_codepoint(findings: list[Finding]) -> dict[str, tuple[str, int]]:
    """Map codepoint label -> (name, occurrences), in first-seen order."""
    counts: dict[str, tuple[str, int]] = {}
    for finding in findings:
        name, n = counts.get(finding.codepoint, (finding.name, 0))
        counts[finding.codepoint] = (name, n + 1)
    return counts


def render_summary(report: ScanReport, report_path: str) -> str:
    """Render the human-readable summary grouped by file and codepoint."""
    if report.total == 0:
        return SUCCESS_LINE + "\n"

    lines = [f"⚠️  Found {report.total} unsafe character(s) in {len(report)} file(s):", ""]
    for path, findings in report:
        lines.append(f"📄 {path}:")
        for codepoint, (name, n) in count_by_codepoint(findings).items():
            lines.append(f"   {codepoint} ({name}): {n}x")
        lines.append("")
    lines.append(f"📊 Summary: {report.total} total findings")
    lines.append(f"📁 JSON report: {report_path}")
    return "\n".join(lines) + "\n"


def exit_status(report: ScanReport) -> int:
    return 0 if report.total == 0 else 1


def emit(report: ScanReport, report_path: str, stream: TextIO | None = None) -> int:
    """Write the JSON report, print the summary, and return the exit status."""
    out = stream if stream is not None else sys.stdout
    write_report(report, report_path)
    out.write(render_summary(report, report_path))
    out.flush()
    return exit_status(report)
