"""Unit tests for CLI command handling."""

from __future__ import annotations

import json

import pytest

from cli.main import main
from core.logging_config import configure_logging


def _build_project(tmp_path, dispatch: str = "advent! {\n    day 1\n}\n") -> None:
    source_dir = tmp_path / "src"
    source_dir.mkdir()
    (source_dir / "main.rs").write_text(dispatch, encoding="utf-8")
    (source_dir / "template.rs").write_text("// template\n", encoding="utf-8")


def test_cli_scaffolds_day_and_prints_paths(tmp_path, capsys) -> None:
    """CLI should scaffold the day and print key=value result lines."""
    _build_project(tmp_path)

    exit_code = main(["--root", str(tmp_path), "2"])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0
    assert output[0] == "day=2" and output[-1] == "anchor_line=2"
    assert f"source_path={tmp_path / 'src' / 'day_2.rs'}" in output


def test_cli_returns_one_for_missing_anchor(tmp_path, capsys) -> None:
    """CLI should exit one with a readable message when the anchor is missing."""
    _build_project(tmp_path)

    exit_code = main(["--root", str(tmp_path), "5"])
    captured = capsys.readouterr()

    assert exit_code == 1 and "error=No line in" in captured.err
    assert captured.out == ""


def test_cli_returns_one_for_invalid_day(tmp_path, capsys) -> None:
    """CLI should reject non-numeric day tokens without a traceback."""
    _build_project(tmp_path)

    exit_code = main(["--root", str(tmp_path), "tomorrow"])
    captured = capsys.readouterr()

    assert exit_code == 1 and "error=Invalid day token" in captured.err


def test_cli_uses_project_root_from_env(tmp_path, capsys, monkeypatch) -> None:
    """CLI should fall back to DAYKIT_PROJECT_ROOT without --root."""
    _build_project(tmp_path)
    monkeypatch.setenv("DAYKIT_PROJECT_ROOT", str(tmp_path))

    exit_code = main(["2"])
    _ = capsys.readouterr()

    assert exit_code == 0 and (tmp_path / "input" / "day_2_example.txt").exists()


def test_cli_requires_day_argument(capsys) -> None:
    """CLI should exit with argparse usage errors when day is missing."""
    with pytest.raises(SystemExit) as exit_info:
        main([])
    _ = capsys.readouterr()

    assert exit_info.value.code == 2


def test_cli_verbose_emits_debug_events(tmp_path, capsys) -> None:
    """Verbose runs should log debug-level splice events on stderr."""
    _build_project(tmp_path)

    exit_code = main(["--verbose", "--root", str(tmp_path), "2"])
    captured = capsys.readouterr()
    configure_logging()

    assert exit_code == 0 and '"anchor_spliced"' in captured.err
    assert "anchor_spliced" not in captured.out


def test_cli_default_run_filters_debug_events(tmp_path, capsys) -> None:
    """Runs without --verbose should keep debug events out of stderr."""
    _build_project(tmp_path)

    exit_code = main(["--root", str(tmp_path), "2"])
    captured = capsys.readouterr()

    assert exit_code == 0 and "anchor_spliced" not in captured.err
    assert '"scaffold_completed"' in captured.err


def test_cli_logs_scaffold_failed_event(tmp_path, capsys) -> None:
    """Failed runs should log a scaffold_failed event with the error type."""
    _build_project(tmp_path)

    exit_code = main(["--root", str(tmp_path), "5"])
    failure_events = [
        json.loads(line)
        for line in capsys.readouterr().err.splitlines()
        if line.startswith("{") and '"scaffold_failed"' in line
    ]

    assert exit_code == 1
    assert [(event["error_type"], event["level"]) for event in failure_events] == [
        ("AnchorNotFoundError", "error")
    ]
    assert not (tmp_path / "src" / "day_5.rs").exists()


def test_cli_returns_one_for_oversized_day(tmp_path, capsys) -> None:
    """Day tokens too long to convert should exit one without a traceback."""
    _build_project(tmp_path)

    exit_code = main(["--root", str(tmp_path), "1" * 5000])
    captured = capsys.readouterr()

    assert exit_code == 1 and "error=Invalid day token" in captured.err
