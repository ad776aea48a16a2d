"""Shared typed models.

This module defines immutable data models passed between the
scaffold steps, the SDK surface, and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DayScaffoldPlan:
    """Every path and text a single day scaffold touches.

    Attributes:
        day: Parsed day number.
        input_path: Puzzle input file for the day.
        example_input_path: Example input file for the day.
        template_path: Template source copied for the day.
        source_path: Day-specific source file.
        dispatch_path: Dispatch file receiving the registration line.
        anchor: Previous day's marker text searched for in the dispatch file.
        registration_line: Line inserted after the anchor line.
    """

    day: int
    input_path: Path
    example_input_path: Path
    template_path: Path
    source_path: Path
    dispatch_path: Path
    anchor: str
    registration_line: str


@dataclass(frozen=True)
class SpliceResult:
    """Outcome of a line-anchor splice.

    Attributes:
        path: Rewritten file.
        anchor_line_number: 1-based number of the anchor line.
        line_count_before: Line count before the splice.
        line_count_after: Line count after the splice.
    """

    path: Path
    anchor_line_number: int
    line_count_before: int
    line_count_after: int


@dataclass(frozen=True)
class DayScaffoldResult:
    """Outcome of scaffolding one day.

    Attributes:
        plan: Plan that was executed.
        created_inputs: Input files that did not exist before the run.
        template_overwritten: Whether the day source already existed.
        splice: Dispatch file splice outcome.
    """

    plan: DayScaffoldPlan
    created_inputs: tuple[Path, ...]
    template_overwritten: bool
    splice: SpliceResult
