# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

TOOL_SECTION = "version-guard"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class GuardConfig:
    """Configuration for the version-guard CLI.

    Attributes:
        project_dir: Directory containing pyproject.toml
        name: Project name from [project].name
        version: Project version from [project].version
        minimum: Default inclusive lower bound for ``check``
        maximum: Default inclusive upper bound for ``check``
    """

    project_dir: Path
    name: str = ""
    version: str = ""
    minimum: str = ""
    maximum: str = ""

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "GuardConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            GuardConfig instance

        Raises:
            ConfigError: If the file is not valid TOML
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "GuardConfig":
        """Create GuardConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If [tool.version-guard] is not a table or a bound
                is neither a string nor an integer
        """
        project = pyproject.get("project", {})
        tool_guard = pyproject.get("tool", {}).get(TOOL_SECTION, {})

        if not isinstance(tool_guard, dict):
            raise ConfigError(f"[tool.{TOOL_SECTION}] must be a table")

        return cls(
            project_dir=project_dir,
            name=project.get("name", ""),
            version=str(project.get("version", "")),
            minimum=_read_bound(tool_guard, "minimum"),
            maximum=_read_bound(tool_guard, "maximum"),
        )

    def has_pyproject(self) -> bool:
        """Check if pyproject.toml exists in the project directory."""
        return (self.project_dir / "pyproject.toml").exists()


def _read_bound(tool_guard: dict[str, Any], key: str) -> str:
    """Read a bound from [tool.version-guard] as text.

    Floats are rejected: TOML reads 1.10 as 1.1, which is a different version.
    """
    value = tool_guard.get(key, "")
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ConfigError(
            f"[tool.{TOOL_SECTION}].{key} must be a string, e.g. \"1.10\""
        )
    return str(value)


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> GuardConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        GuardConfig instance

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        project_dir = find_project_root()

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return GuardConfig.from_pyproject(project_path)

    return GuardConfig(project_dir=project_path)
