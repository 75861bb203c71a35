"""Per-file detection of catalogued codepoints with line attribution."""

from __future__ import annotations

import logging

from bidiscan.catalogue import codepoint_label, lookup
from bidiscan.models import Finding

_LOGGER = logging.getLogger("bidiscan.scanner")


def scan_text(content: str) -> list[Finding]:
    """Return a Finding for every catalogued character, in offset order.

    Line numbers count "\\n" only; a "\\r" never starts a new line.
    """
    findings: list[Finding] = []
    line = 1
    for position, char in enumerate(content):
        if char == "\n":
            line += 1
            continue
        name = lookup(char)
        if name is None:
            continue
        findings.append(Finding(
            char=char,
            codepoint=codepoint_label(char),
            name=name,
            position=position,
            line=line,
        ))
    return findings


def scan_file(path: str) -> list[Finding]:
    """Scan one file. Never raises: unreadable or non-UTF-8 files yield no findings.

    Content is decoded from raw bytes (no newline translation) so that
    positions match the file as stored. A leading BOM is kept and reported.
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        _LOGGER.debug("skipped %s: %s", path, e)
        return []
    try:
        content = data.decode("utf-8")
    except UnicodeDecodeError as e:
        _LOGGER.debug("skipped %s: not UTF-8 text (%s)", path, e.reason)
        return []
    return scan_text(content)
