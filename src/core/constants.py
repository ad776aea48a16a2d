"""Core constants used across daykit modules.

This module centralizes repository layout names and marker text.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_PROJECT_ROOT = Path(".")
DEFAULT_INPUT_DIR_NAME = "input"
DEFAULT_SOURCE_DIR_NAME = "src"
DEFAULT_TEMPLATE_FILE_NAME = "template.rs"
DEFAULT_DISPATCH_FILE_NAME = "main.rs"
DAY_FILE_PREFIX = "day_"
INPUT_FILE_EXTENSION = ".txt"
EXAMPLE_INPUT_SUFFIX = "_example"
DAY_MARKER_PREFIX = "day "
REGISTRATION_INDENT = "    "
SPLICE_TEMP_SUFFIX = ".tmp"
DEFAULT_LINE_TERMINATOR = "\n"
