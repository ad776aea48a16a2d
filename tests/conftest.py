"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add repository root and src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    for import_root in (project_root, project_root / "src"):
        if str(import_root) not in sys.path:
            sys.path.insert(0, str(import_root))


@pytest.fixture
def puzzle_repo(tmp_path: Path) -> Path:
    """Writable copy of the sample puzzle repository registering days 1-6."""
    from tests.fixture_paths import copy_fixture_tree

    return copy_fixture_tree("puzzle_repo", tmp_path / "puzzle_repo")
