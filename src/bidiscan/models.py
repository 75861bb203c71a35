"""Data models: Finding, ScanReport."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Iterator


@dataclass(frozen=True)
class Finding:
    char: str
    codepoint: str  # e.g. "U+202E"
    name: str
    position: int  # character offset in the decoded content
    line: int  # 1-based

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ScanReport:
    """Findings keyed by path, in the order the files were scanned.

    A path is only present when it has at least one finding.
    """

    files: dict[str, list[Finding]] = field(default_factory=dict)
    total: int = 0

    def add(self, path: str, findings: list[Finding]) -> None:
        """Record findings for path. A path already in the report is kept as is."""
        if not findings or path in self.files:
            return
        self.files[path] = list(findings)
        self.total += len(findings)

    def __iter__(self) -> Iterator[tuple[str, list[Finding]]]:
        return iter(self.files.items())

    def __len__(self) -> int:
        return len(self.files)

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {path: [f.to_dict() for f in findings] for path, findings in self.files.items()}
