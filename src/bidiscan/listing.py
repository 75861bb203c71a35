"""File-listing providers: git index or a directory walk."""

from __future__ import annotations

import logging
import os
import subprocess

from bidiscan.errors import EnumerationError

_LOGGER = logging.getLogger("bidiscan.listing")

WALK_EXCLUDE_DIRS: frozenset[str] = frozenset({".git"})


def git_ls_files(cwd: str | None = None) -> list[str]:
    """Return git-tracked paths relative to cwd, in index order.

    Raises EnumerationError if git is missing or cwd is not inside a work tree.
    """
    try:
        proc = subprocess.run(
            ["git", "ls-files", "-z"],
            cwd=cwd,
            capture_output=True,
            check=False,
        )
    except OSError as e:
        raise EnumerationError(f"cannot run git: {e}", {"cwd": cwd}) from e

    if proc.returncode != 0:
        stderr = proc.stderr.decode("utf-8", errors="replace").strip()
        raise EnumerationError(
            stderr or f"git ls-files exited with status {proc.returncode}",
            {"cwd": cwd, "returncode": proc.returncode},
        )

    paths = [p for p in proc.stdout.decode("utf-8", errors="surrogateescape").split("\0") if p.strip()]
    _LOGGER.info("git ls-files listed %d path(s)", len(paths))
    return paths


def walk_files(root: str) -> list[str]:
    """Return all regular files under root, sorted, skipping .git.

    Directory symlinks are not followed. Unreadable directories are skipped.
    """
    if not os.path.isdir(root):
        raise EnumerationError(f"not a directory: {root}", {"root": root})

    paths: list[str] = []

    def walk(current: str) -> None:
        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            _LOGGER.debug("skipped unreadable directory %s: %s", current, e)
            return
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                if entry.name not in WALK_EXCLUDE_DIRS:
                    walk(entry.path)
            elif entry.is_file(follow_symlinks=True):
                paths.append(entry.path)

    walk(root)
    _LOGGER.info("walk of %s listed %d path(s)", root, len(paths))
    return paths
