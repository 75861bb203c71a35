"""Command-line entry point: enumerate, scan, emit."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from bidiscan.config import get_report_path, get_workers
from bidiscan.errors import BidiScanError, EnumerationError
from bidiscan.listing import git_ls_files, walk_files
from bidiscan.report import emit
from bidiscan.scan import run_scan


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bidiscan",
        description="Scan files for bidi control and invisible Unicode characters (Trojan Source).",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Files to scan. Defaults to all git-tracked files.",
    )
    parser.add_argument(
        "--walk",
        metavar="DIR",
        help="Scan every file under DIR instead of the git index.",
    )
    parser.add_argument(
        "--report",
        metavar="PATH",
        help="JSON report location (env: BIDISCAN_REPORT_PATH).",
    )
    parser.add_argument(
        "-j", "--jobs",
        type=int,
        help="Number of files to scan in parallel (env: BIDISCAN_WORKERS).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr; repeat for debug output.",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op when the root logger already has handlers.
    logging.getLogger("bidiscan").setLevel(level)


def _force_utf8_console() -> None:
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding="utf-8", errors="replace")


def _list_files(args: argparse.Namespace) -> tuple[str, list[str]]:
    """Return (description, paths) from the chosen provider."""
    if args.paths:
        return "the given files", list(args.paths)
    if args.walk:
        return f"files under {args.walk}", walk_files(args.walk)
    return "git-tracked files", git_ls_files()


def main(argv: Sequence[str] | None = None) -> int:
    """Run a scan and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.paths and args.walk:
        parser.error("--walk cannot be combined with explicit paths")
    _configure_logging(args.verbose)
    _force_utf8_console()

    try:
        report_path = args.report or get_report_path()
        workers = args.jobs if args.jobs is not None else get_workers()
        if workers < 1:
            print("Error: --jobs must be a positive integer", file=sys.stderr)
            return 1
        source, paths = _list_files(args)
    except EnumerationError as e:
        print(f"Error getting file list: {e.message}", file=sys.stderr)
        return 1
    except BidiScanError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(f"Scanning {source} for unsafe Unicode control characters...\n")
    report = run_scan(paths, workers=workers)
    try:
        return emit(report, report_path)
    except OSError as e:
        print(f"Error writing report {report_path}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
