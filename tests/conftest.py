"""Shared test fixtures for bidiscan tests."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from typing import Callable

import pytest

RLO = chr(0x202E)
ZWSP = chr(0x200B)
BOM = chr(0xFEFF)
LRI = chr(0x2066)
PDI = chr(0x2069)

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


@pytest.fixture
def workdir(tmp_path, monkeypatch) -> str:
    """Temporary directory set as the working directory."""
    monkeypatch.chdir(tmp_path)
    return str(tmp_path)


@pytest.fixture
def write_file(workdir) -> Callable[..., str]:
    """Write text (UTF-8, no newline translation) or bytes under workdir; return the relative path."""

    def _write(rel: str, content: str | bytes) -> str:
        full = os.path.join(workdir, rel)
        os.makedirs(os.path.dirname(full), exist_ok=True)
        data = content.encode("utf-8") if isinstance(content, str) else content
        with open(full, "wb") as f:
            f.write(data)
        return rel

    return _write


@pytest.fixture
def git_repo(workdir) -> Callable[[], None]:
    """Initialize a git repo in workdir. Call the returned function to stage all files."""
    subprocess.run(["git", "init", "-q"], cwd=workdir, check=True)

    def _add_all() -> None:
        subprocess.run(["git", "add", "-A"], cwd=workdir, check=True)

    return _add_all


@pytest.fixture(autouse=True)
def reset_package_log_level():
    """The CLI sets the bidiscan logger level; keep it from leaking between tests."""
    yield
    logging.getLogger("bidiscan").setLevel(logging.NOTSET)
