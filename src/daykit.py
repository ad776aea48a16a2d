"""Public SDK surface for daykit.

This module provides a stable import path for scripted use.
It re-exports the scaffold entry points and typed models.
"""

from __future__ import annotations

from core.config import DaykitConfig
from core.errors import (
    AnchorNotFoundError,
    DaykitConfigError,
    DaykitError,
    DaykitFileNotFoundError,
    DaykitIOError,
    DayTokenError,
)
from core.types import DayScaffoldPlan, DayScaffoldResult, SpliceResult
from scaffold.day_scaffold import build_scaffold_plan, parse_day_token, scaffold_day
from scaffold.line_splicer import insert_after_anchor, locate_anchor, splice_after_anchor

__all__ = [
    "AnchorNotFoundError",
    "DayScaffoldPlan",
    "DayScaffoldResult",
    "DayTokenError",
    "DaykitConfig",
    "DaykitConfigError",
    "DaykitError",
    "DaykitFileNotFoundError",
    "DaykitIOError",
    "SpliceResult",
    "build_scaffold_plan",
    "insert_after_anchor",
    "locate_anchor",
    "parse_day_token",
    "scaffold_day",
    "splice_after_anchor",
]
