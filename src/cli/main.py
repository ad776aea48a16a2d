"""Daykit CLI entry points.
This module exposes the single scaffold command for a new puzzle day.
It maps argparse arguments onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from core.config import DaykitConfig
from core.errors import DaykitError
from core.logging_config import configure_logging, get_logger
from core.types import DayScaffoldResult
from scaffold.day_scaffold import scaffold_day

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="daykit",
        description="Scaffold input files, source, and dispatch entry for a puzzle day",
    )
    parser.add_argument("day", help="Day number to scaffold, e.g. 7")
    parser.add_argument("--root", help="Override DAYKIT_PROJECT_ROOT for this command")
    parser.add_argument("--verbose", action="store_true", help="Emit debug log events")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the daykit CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    try:
        config = _build_config(args.root)
        result = scaffold_day(config, args.day)
    except DaykitError as error:
        _LOGGER.error("scaffold_failed", day=args.day, error_type=type(error).__name__)
        print(f"error={error}", file=sys.stderr)
        return 1
    _print_result(result)
    return 0


def _build_config(project_root: str | None) -> DaykitConfig:
    """Build config with optional project-root override.

    Args:
        project_root: Optional override path.

    Returns:
        Runtime configuration.
    """
    config = DaykitConfig.from_env()
    if project_root:
        config = replace(config, project_root=Path(project_root).expanduser().resolve())
    return config


def _print_result(result: DayScaffoldResult) -> None:
    plan = result.plan
    print(f"day={plan.day}")
    print(f"input_path={plan.input_path}")
    print(f"example_input_path={plan.example_input_path}")
    print(f"source_path={plan.source_path}")
    print(f"dispatch_path={plan.dispatch_path}")
    print(f"anchor_line={result.splice.anchor_line_number}")
