"""Line-anchor splicing for text files.

This module inserts a line right after the first line containing an
anchor substring and replaces the file atomically through a temp file.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import Sequence

from core.constants import DEFAULT_LINE_TERMINATOR, SPLICE_TEMP_SUFFIX
from core.errors import AnchorNotFoundError, DaykitFileNotFoundError, DaykitIOError
from core.logging_config import get_logger
from core.types import SpliceResult

_LOGGER = get_logger(__name__)


def find_anchor_line(lines: Sequence[str], anchor: str) -> int | None:
    """Find the first line containing the anchor.

    Args:
        lines: File lines, with or without terminators.
        anchor: Literal substring to match.

    Returns:
        1-based line number of the first match, or None.
    """
    for line_number, line in enumerate(lines, start=1):
        if anchor in line:
            return line_number
    return None


def insert_after_anchor(lines: Sequence[str], anchor: str, new_line: str) -> list[str]:
    """Return lines with new_line inserted after the first anchor line.

    Args:
        lines: File lines keeping their terminators.
        anchor: Literal substring to match.
        new_line: Line text without terminator.

    Returns:
        New list of lines; the input is not modified.

    Raises:
        AnchorNotFoundError: If no line contains the anchor.
    """
    anchor_line_number = find_anchor_line(lines, anchor)
    if anchor_line_number is None:
        raise AnchorNotFoundError(f"No line contains '{anchor}'.")
    return _insert_at(lines, anchor_line_number, new_line)


def locate_anchor(path: Path, anchor: str) -> int:
    """Find the anchor line of a file without modifying it.

    Args:
        path: Existing text file.
        anchor: Literal substring to match.

    Returns:
        1-based number of the first line containing the anchor.

    Raises:
        DaykitFileNotFoundError: If the file does not exist.
        AnchorNotFoundError: If no line contains the anchor.
        DaykitIOError: If the file cannot be read.
    """
    return _require_anchor_line(path, _read_lines(path), anchor)


def splice_after_anchor(path: Path, anchor: str, new_line: str) -> SpliceResult:
    """Insert new_line after the first anchor line of a file, in place.

    The original file is left untouched when the anchor is missing or
    the rewrite fails.

    Args:
        path: Existing text file.
        anchor: Literal substring to match.
        new_line: Line text without terminator.

    Returns:
        Splice outcome with anchor position and line counts.

    Raises:
        DaykitFileNotFoundError: If the file does not exist.
        AnchorNotFoundError: If no line contains the anchor.
        DaykitIOError: If the file cannot be read or replaced.
    """
    lines = _read_lines(path)
    anchor_line_number = _require_anchor_line(path, lines, anchor)
    updated_lines = _insert_at(lines, anchor_line_number, new_line)
    _replace_file(path, "".join(updated_lines))
    _LOGGER.debug(
        "anchor_spliced",
        path=str(path),
        anchor=anchor,
        anchor_line=anchor_line_number,
    )
    return SpliceResult(
        path=path,
        anchor_line_number=anchor_line_number,
        line_count_before=len(lines),
        line_count_after=len(updated_lines),
    )


def _require_anchor_line(path: Path, lines: Sequence[str], anchor: str) -> int:
    anchor_line_number = find_anchor_line(lines, anchor)
    if anchor_line_number is None:
        raise AnchorNotFoundError(
            f"No line in {path} contains '{anchor}'. "
            "Register the previous day first or pass the correct day."
        )
    return anchor_line_number


def _insert_at(lines: Sequence[str], anchor_line_number: int, new_line: str) -> list[str]:
    head = list(lines[:anchor_line_number])
    tail = list(lines[anchor_line_number:])
    anchor_line = head[-1]
    terminator = _line_terminator(anchor_line)
    if not terminator:
        # Anchor was the last line and had no terminator.
        terminator = DEFAULT_LINE_TERMINATOR
        head[-1] = anchor_line + terminator
    return head + [new_line + terminator] + tail


def _line_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return "\r\n"
    if line.endswith(("\n", "\r")):
        return line[-1]
    return ""


def _read_lines(path: Path) -> list[str]:
    """Read file lines keeping their original terminators.

    Args:
        path: File to read.

    Returns:
        Lines including terminators.

    Raises:
        DaykitFileNotFoundError: If the file does not exist.
        DaykitIOError: If the file cannot be read as UTF-8 text.
    """
    if not path.is_file():
        raise DaykitFileNotFoundError(
            f"File not found at {path}. Run daykit from the puzzle repository root."
        )
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.readlines()
    except (OSError, UnicodeDecodeError) as error:
        raise DaykitIOError(f"Failed to read {path}: {error}") from error


def _replace_file(path: Path, content: str) -> None:
    """Write content to a sibling temp file and rename it over path.

    Args:
        path: File to replace.
        content: Full new file content.

    Raises:
        DaykitIOError: If the temp file cannot be written or renamed.
    """
    try:
        fd, temp_name = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=SPLICE_TEMP_SUFFIX,
        )
    except OSError as error:
        raise DaykitIOError(f"Failed to create temp file next to {path}: {error}") from error
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        shutil.copymode(path, temp_path)
        os.replace(temp_path, path)
    except OSError as error:
        temp_path.unlink(missing_ok=True)
        raise DaykitIOError(f"Failed to rewrite {path}: {error}") from error
