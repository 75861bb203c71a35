"""End-to-end tests for the command-line entry point."""

from __future__ import annotations

import json
import logging
import os

import pytest

from bidiscan.cli import main
from bidiscan.report import SUCCESS_LINE
from conftest import BOM, RLO, ZWSP, requires_git


@requires_git
def test_clean_repository(write_file, git_repo, capsys):
    """Only clean ASCII files: exit 0, success line, empty JSON report."""
    write_file("README.md", "# hello\n")
    write_file("src/app.py", "print('ok')\n")
    git_repo()
    status = main(["--report", "scan.json"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Scanning git-tracked files" in out
    assert SUCCESS_LINE in out
    with open("scan.json", encoding="utf-8") as f:
        assert json.load(f) == {}


@requires_git
def test_repository_with_findings(write_file, git_repo, capsys):
    write_file("evil.js", f"const a = 1; // {RLO} }} if (admin) {{\n")
    write_file("clean.js", "const b = 2;\n")
    write_file("image.png", b"\x89PNG\r\n\x1a\n\xff")
    git_repo()
    status = main(["--report", "reports/scan.json"])
    out = capsys.readouterr().out
    assert status == 1
    assert "📄 evil.js:" in out
    assert "clean.js" not in out
    with open(os.path.join("reports", "scan.json"), encoding="utf-8") as f:
        data = json.load(f)
    assert list(data) == ["evil.js"]
    assert data["evil.js"][0]["codepoint"] == "U+202E"


def test_not_a_repository_fails_before_scanning(workdir, monkeypatch, capsys):
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", os.path.dirname(workdir))
    status = main(["--report", "scan.json"])
    captured = capsys.readouterr()
    assert status == 1
    assert "Error getting file list" in captured.err
    assert "Scanning" not in captured.out
    assert not os.path.exists("scan.json")


def test_explicit_paths(write_file, capsys):
    a = write_file("a.txt", BOM + "x")
    b = write_file("b.txt", "plain")
    status = main([a, b, "--report", "r.json"])
    assert status == 1
    with open("r.json", encoding="utf-8") as f:
        assert list(json.load(f)) == ["a.txt"]


def test_walk_with_jobs(write_file, capsys):
    for i in range(5):
        write_file(f"tree/f{i}.txt", ZWSP * i)
    status = main(["--walk", "tree", "--jobs", "3", "--report", "r.json"])
    assert status == 1
    with open("r.json", encoding="utf-8") as f:
        data = json.load(f)
    assert list(data) == [os.path.join("tree", f"f{i}.txt") for i in range(1, 5)]
    assert "Summary: 10 total findings" in capsys.readouterr().out


def test_report_path_from_env(write_file, monkeypatch, capsys):
    monkeypatch.setenv("BIDISCAN_REPORT_PATH", "env/report.json")
    write_file("a.txt", "clean")
    assert main(["a.txt"]) == 0
    assert os.path.exists(os.path.join("env", "report.json"))


def test_bad_workers_env_is_fatal(write_file, monkeypatch, capsys):
    monkeypatch.setenv("BIDISCAN_WORKERS", "many")
    write_file("a.txt", "clean")
    assert main(["a.txt", "--report", "r.json"]) == 1
    assert "BIDISCAN_WORKERS" in capsys.readouterr().err


def test_verbose_logging_goes_to_log_not_stdout(write_file, caplog, capsys):
    """-vv emits listing, skip and report records; stdout holds only banner and summary."""
    write_file("tree/clean.txt", "plain\n")
    write_file("tree/blob.bin", b"\xff\xfe\xfd")
    status = main(["-vv", "--walk", "tree", "--report", "r.json"])
    assert status == 0
    assert logging.getLogger("bidiscan").getEffectiveLevel() == logging.DEBUG

    messages = [(r.name, r.levelno, r.getMessage()) for r in caplog.records]
    assert any(name == "bidiscan.listing" and level == logging.INFO and "listed 2 path(s)" in msg
               for name, level, msg in messages)
    assert any(name == "bidiscan.scanner" and level == logging.DEBUG and "blob.bin" in msg
               for name, level, msg in messages)
    assert any(name == "bidiscan.report" and "r.json" in msg for name, _, msg in messages)

    out = capsys.readouterr().out
    assert out == (
        "Scanning files under tree for unsafe Unicode control characters...\n\n"
        + SUCCESS_LINE + "\n"
    )


def test_default_verbosity_hides_info(write_file, caplog, capsys):
    write_file("a.txt", "clean")
    main(["a.txt", "--report", "r.json"])
    assert logging.getLogger("bidiscan").getEffectiveLevel() == logging.WARNING
    assert not [r for r in caplog.records if r.name.startswith("bidiscan")]


def test_zero_jobs_is_rejected(write_file, capsys):
    write_file("a.txt", RLO)
    assert main(["a.txt", "--jobs", "0", "--report", "r.json"]) == 1
    captured = capsys.readouterr()
    assert "--jobs must be a positive integer" in captured.err
    assert not os.path.exists("r.json")


def test_unwritable_report_path_is_reported(write_file, capsys):
    write_file("a.txt", RLO)
    write_file("blocker", "not a directory")
    status = main(["a.txt", "--report", os.path.join("blocker", "r.json")])
    assert status == 1
    assert "Error writing report" in capsys.readouterr().err


def test_walk_and_paths_are_exclusive(write_file, capsys):
    write_file("a.txt", "clean")
    with pytest.raises(SystemExit) as exc_info:
        main(["a.txt", "--walk", "."])
    assert exc_info.value.code == 2
    assert "--walk cannot be combined" in capsys.readouterr().err
