# SPDX-License-Identifier: MIT
"""Tests for CLI configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from version_guard.cli.config import (
    ConfigError,
    GuardConfig,
    find_project_root,
    load_config,
)


class TestGuardConfig:
    """Tests for GuardConfig."""

    def test_from_pyproject(self, temp_project: Path) -> None:
        """Test loading a complete pyproject.toml."""
        config = GuardConfig.from_pyproject(temp_project)

        assert config.project_dir == temp_project
        assert config.name == "test-project"
        assert config.version == "1.4.2"
        assert config.minimum == "1.2"
        assert config.maximum == "2"
        assert config.has_pyproject()

    def test_missing_pyproject(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            GuardConfig.from_pyproject(tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[project\nname = ")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            GuardConfig.from_pyproject(tmp_path)

    def test_no_tool_section(self, tmp_path: Path) -> None:
        """Test that bounds default to empty strings."""
        config = GuardConfig.from_pyproject_dict(
            {"project": {"name": "demo", "version": "0.3"}}, tmp_path
        )

        assert config.version == "0.3"
        assert config.minimum == ""
        assert config.maximum == ""

    def test_integer_bounds(self, tmp_path: Path) -> None:
        """Test that bare TOML integers are accepted as bounds."""
        config = GuardConfig.from_pyproject_dict(
            {"tool": {"version-guard": {"minimum": 2, "maximum": 3}}}, tmp_path
        )

        assert config.minimum == "2"
        assert config.maximum == "3"

    def test_float_bound_rejected(self, tmp_path: Path) -> None:
        """Test that a float bound raises instead of losing digits (1.10 reads as 1.1)."""
        with pytest.raises(ConfigError, match=r"maximum must be a string"):
            GuardConfig.from_pyproject_dict(
                {"tool": {"version-guard": {"maximum": 1.10}}}, tmp_path
            )

    def test_float_bound_in_file_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            "[project]\nversion = \"1.5\"\n\n[tool.version-guard]\nmaximum = 1.10\n"
        )

        with pytest.raises(ConfigError, match=r"\[tool\.version-guard\]\.maximum"):
            GuardConfig.from_pyproject(tmp_path)

    @pytest.mark.parametrize("value", [True, ["1"], {"v": 1}])
    def test_non_string_bound_rejected(self, tmp_path: Path, value: object) -> None:
        with pytest.raises(ConfigError, match="minimum must be a string"):
            GuardConfig.from_pyproject_dict(
                {"tool": {"version-guard": {"minimum": value}}}, tmp_path
            )

    def test_tool_section_must_be_table(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="must be a table"):
            GuardConfig.from_pyproject_dict({"tool": {"version-guard": "1.0"}}, tmp_path)


class TestFindProjectRoot:
    """Tests for find_project_root and load_config."""

    def test_finds_parent(self, temp_project: Path) -> None:
        nested = temp_project / "src" / "pkg"
        nested.mkdir(parents=True)

        assert find_project_root(nested) == temp_project.resolve()

    def test_load_config_from_directory(self, temp_project: Path) -> None:
        config = load_config(temp_project)

        assert config.version == "1.4.2"

    def test_load_config_without_pyproject(self, tmp_path: Path) -> None:
        """Test that a directory without pyproject.toml gives an empty config."""
        config = load_config(tmp_path)

        assert config.project_dir == tmp_path
        assert config.version == ""
        assert not config.has_pyproject()

    def test_load_config_discovers_root(
        self, temp_project: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(temp_project)

        config = load_config()

        assert config.name == "test-project"
