"""Day scaffold orchestration.

This module turns a day token into a scaffold plan, checks that the
repository can take the new day, then runs the input, template, and
dispatch steps in order, stopping at the first error.
Re-running a day registers it again; callers own idempotence.
"""

from __future__ import annotations

import re
from pathlib import Path

from core.config import DaykitConfig
from core.constants import (
    DAY_FILE_PREFIX,
    DAY_MARKER_PREFIX,
    EXAMPLE_INPUT_SUFFIX,
    INPUT_FILE_EXTENSION,
    REGISTRATION_INDENT,
)
from core.errors import DaykitFileNotFoundError, DayTokenError
from core.logging_config import get_logger
from core.types import DayScaffoldPlan, DayScaffoldResult
from scaffold.day_files import copy_template, touch_input_files
from scaffold.line_splicer import locate_anchor, splice_after_anchor

_LOGGER = get_logger(__name__)

_DAY_TOKEN_PATTERN = re.compile(r"[0-9]+")


def parse_day_token(token: str | int) -> int:
    """Parse a day token into a positive integer.

    Args:
        token: Raw token from the command line or an integer.

    Returns:
        Day number.

    Raises:
        DayTokenError: If token is not a positive decimal integer.
    """
    if isinstance(token, bool):
        raise DayTokenError(f"Invalid day token: expected a positive integer, got {token!r}.")
    if isinstance(token, int):
        day = token
    else:
        text = token.strip()
        if not _DAY_TOKEN_PATTERN.fullmatch(text):
            raise DayTokenError(
                f"Invalid day token: expected a positive integer, got '{token}'. "
                "Pass the day number, e.g. 'daykit 7'."
            )
        try:
            day = int(text)
        except ValueError as error:
            raise DayTokenError(
                f"Invalid day token: {len(text)} digits is too long for a day number."
            ) from error
    if day < 1:
        raise DayTokenError(f"Invalid day token: day must be at least 1, got {day}.")
    return day


def build_scaffold_plan(config: DaykitConfig, day: int) -> DayScaffoldPlan:
    """Resolve every path and text used to scaffold a day.

    Args:
        config: Runtime configuration.
        day: Parsed day number.

    Returns:
        Scaffold plan.
    """
    day_stem = f"{DAY_FILE_PREFIX}{day}"
    return DayScaffoldPlan(
        day=day,
        input_path=config.input_dir / f"{day_stem}{INPUT_FILE_EXTENSION}",
        example_input_path=config.input_dir
        / f"{day_stem}{EXAMPLE_INPUT_SUFFIX}{INPUT_FILE_EXTENSION}",
        template_path=config.source_dir / config.template_file_name,
        source_path=config.source_dir / f"{day_stem}{config.source_extension}",
        dispatch_path=config.source_dir / config.dispatch_file_name,
        anchor=f"{DAY_MARKER_PREFIX}{day - 1}",
        registration_line=f"{REGISTRATION_INDENT}{DAY_MARKER_PREFIX}{day}",
    )


def scaffold_day(config: DaykitConfig, day_token: str | int) -> DayScaffoldResult:
    """Create input files, copy the template, and register the day.

    Args:
        config: Runtime configuration.
        day_token: Raw day token.

    Returns:
        Scaffold outcome.

    Raises:
        DayTokenError: If the day token is invalid.
        DaykitFileNotFoundError: If the template or dispatch file is missing.
        AnchorNotFoundError: If the previous day is not registered; nothing
            is written in that case.
        DaykitIOError: If any write fails.
    """
    day = parse_day_token(day_token)
    plan = build_scaffold_plan(config, day)
    _require_file(plan.dispatch_path, "Dispatch file", "DAYKIT_DISPATCH_FILE")
    _require_file(plan.template_path, "Template", "DAYKIT_TEMPLATE_FILE")
    locate_anchor(plan.dispatch_path, plan.anchor)
    _LOGGER.info("scaffold_started", day=day, project_root=str(config.project_root))
    created_inputs = touch_input_files(plan)
    template_overwritten = copy_template(plan)
    splice = splice_after_anchor(plan.dispatch_path, plan.anchor, plan.registration_line)
    _LOGGER.info(
        "dispatch_spliced",
        path=str(plan.dispatch_path),
        anchor_line=splice.anchor_line_number,
        line_count=splice.line_count_after,
    )
    _LOGGER.info("scaffold_completed", day=day)
    return DayScaffoldResult(
        plan=plan,
        created_inputs=created_inputs,
        template_overwritten=template_overwritten,
        splice=splice,
    )


def _require_file(path: Path, label: str, env_name: str) -> None:
    if not path.is_file():
        raise DaykitFileNotFoundError(
            f"{label} not found at {path}. "
            f"Run daykit from the puzzle repository root or set {env_name}."
        )
