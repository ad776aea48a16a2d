"""Input file and template source creation for a new day."""

from __future__ import annotations

import shutil
from pathlib import Path

from core.errors import DaykitFileNotFoundError, DaykitIOError
from core.logging_config import get_logger
from core.types import DayScaffoldPlan

_LOGGER = get_logger(__name__)


def touch_input_files(plan: DayScaffoldPlan) -> tuple[Path, ...]:
    """Create the day's input files when absent.

    Existing files are left unchanged, contents and timestamps included.

    Args:
        plan: Day scaffold plan.

    Returns:
        Paths that were newly created.

    Raises:
        DaykitIOError: If a directory or file cannot be created.
    """
    created: list[Path] = []
    for input_path in (plan.input_path, plan.example_input_path):
        if input_path.exists():
            _LOGGER.info("input_file_exists", path=str(input_path))
            continue
        try:
            input_path.parent.mkdir(parents=True, exist_ok=True)
            input_path.touch(exist_ok=True)
        except OSError as error:
            raise DaykitIOError(f"Failed to create input file {input_path}: {error}") from error
        _LOGGER.info("input_file_created", path=str(input_path))
        created.append(input_path)
    return tuple(created)


def copy_template(plan: DayScaffoldPlan) -> bool:
    """Copy the template source to the day source, overwriting silently.

    Args:
        plan: Day scaffold plan.

    Returns:
        True when an existing day source was overwritten.

    Raises:
        DaykitFileNotFoundError: If the template is missing.
        DaykitIOError: If the copy fails.
    """
    if not plan.template_path.is_file():
        raise DaykitFileNotFoundError(
            f"Template not found at {plan.template_path}. "
            "Create it or set DAYKIT_TEMPLATE_FILE."
        )
    overwritten = plan.source_path.exists()
    try:
        shutil.copyfile(plan.template_path, plan.source_path)
    except OSError as error:
        raise DaykitIOError(
            f"Failed to copy {plan.template_path} to {plan.source_path}: {error}"
        ) from error
    _LOGGER.info(
        "template_copied",
        template=str(plan.template_path),
        path=str(plan.source_path),
        overwritten=overwritten,
    )
    return overwritten
