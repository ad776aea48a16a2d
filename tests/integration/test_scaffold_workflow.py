"""Integration tests for scaffolding a day in a puzzle repository."""

from __future__ import annotations

from cli.main import main


def test_scaffold_day_seven_in_puzzle_repo(puzzle_repo, capsys) -> None:
    """Day 7 should be registered after day 6 inside the advent! block."""
    dispatch_path = puzzle_repo / "src" / "main.rs"
    original_lines = dispatch_path.read_text(encoding="utf-8").splitlines()

    exit_code = main(["--root", str(puzzle_repo), "7"])
    _ = capsys.readouterr()

    lines = dispatch_path.read_text(encoding="utf-8").splitlines()
    anchor_index = original_lines.index("    day 6")
    assert exit_code == 0
    assert lines == original_lines[: anchor_index + 1] + ["    day 7"] + original_lines[
        anchor_index + 1 :
    ]
    assert (puzzle_repo / "src" / "day_7.rs").read_bytes() == (
        puzzle_repo / "src" / "template.rs"
    ).read_bytes()
    assert (puzzle_repo / "input" / "day_7.txt").read_bytes() == b""


def test_scaffold_keeps_existing_input(puzzle_repo, capsys) -> None:
    """Re-scaffolding a day keeps its input and registers it a second time."""
    input_path = puzzle_repo / "input" / "day_6.txt"
    original_input = input_path.read_text(encoding="utf-8")

    exit_code = main(["--root", str(puzzle_repo), "6"])
    _ = capsys.readouterr()

    dispatch = (puzzle_repo / "src" / "main.rs").read_text(encoding="utf-8")
    assert exit_code == 0 and input_path.read_text(encoding="utf-8") == original_input
    assert dispatch.count("    day 6\n") == 2
