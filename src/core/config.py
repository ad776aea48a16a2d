"""Runtime configuration model for daykit.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_DISPATCH_FILE_NAME,
    DEFAULT_INPUT_DIR_NAME,
    DEFAULT_PROJECT_ROOT,
    DEFAULT_SOURCE_DIR_NAME,
    DEFAULT_TEMPLATE_FILE_NAME,
)
from core.errors import DaykitConfigError


@dataclass(frozen=True)
class DaykitConfig:
    """Validated runtime configuration.

    Attributes:
        project_root: Root of the puzzle repository being scaffolded.
        input_dir_name: Directory under the root holding puzzle inputs.
        source_dir_name: Directory under the root holding day sources.
        template_file_name: Template source file inside the source directory.
        dispatch_file_name: Dispatch file inside the source directory.
    """

    project_root: Path
    input_dir_name: str
    source_dir_name: str
    template_file_name: str
    dispatch_file_name: str

    @classmethod
    def from_env(cls) -> "DaykitConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            DaykitConfigError: If environment values are invalid.
        """
        project_root_value = os.getenv("DAYKIT_PROJECT_ROOT", str(DEFAULT_PROJECT_ROOT))
        if not project_root_value.strip():
            raise DaykitConfigError(
                "Invalid DAYKIT_PROJECT_ROOT value: expected a directory path, got ''. "
                "Unset DAYKIT_PROJECT_ROOT or point it at the puzzle repository."
            )
        return cls(
            project_root=Path(project_root_value).expanduser().resolve(),
            input_dir_name=_read_name("DAYKIT_INPUT_DIR", DEFAULT_INPUT_DIR_NAME),
            source_dir_name=_read_name("DAYKIT_SOURCE_DIR", DEFAULT_SOURCE_DIR_NAME),
            template_file_name=_read_name("DAYKIT_TEMPLATE_FILE", DEFAULT_TEMPLATE_FILE_NAME),
            dispatch_file_name=_read_name("DAYKIT_DISPATCH_FILE", DEFAULT_DISPATCH_FILE_NAME),
        )

    @property
    def input_dir(self) -> Path:
        return self.project_root / self.input_dir_name

    @property
    def source_dir(self) -> Path:
        return self.project_root / self.source_dir_name

    @property
    def source_extension(self) -> str:
        """File extension shared by the template and generated day sources."""
        return Path(self.template_file_name).suffix


def _read_name(env_name: str, default: str) -> str:
    """Read a plain file or directory name from the environment.

    Args:
        env_name: Environment variable name.
        default: Value used when the variable is unset.

    Returns:
        Validated name.

    Raises:
        DaykitConfigError: If value is empty or contains a path separator.
    """
    raw_value = os.getenv(env_name, default).strip()
    if not raw_value:
        raise DaykitConfigError(
            f"Invalid {env_name} value: expected a name, got ''. "
            f"Unset {env_name} to use the default '{default}'."
        )
    if "/" in raw_value or "\\" in raw_value or raw_value in (".", ".."):
        raise DaykitConfigError(
            f"Invalid {env_name} value: expected a plain name, got '{raw_value}'. "
            "Use DAYKIT_PROJECT_ROOT to change the base directory."
        )
    return raw_value
