"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from workspace_fs.config import (
    CONFIG_ENV_VAR,
    Settings,
    default_config_path,
    load_settings,
)


class TestSettings:
    """Tests for Settings models."""

    def test_defaults(self) -> None:
        """Test defaults without a config file."""
        settings = Settings()

        assert settings.workspace.remote is None
        assert settings.workspace.local.name == "workspace"
        assert settings.backup_clean.max_backup_num == 5

    def test_from_file(self, config_file: Path, tmp_path: Path) -> None:
        """Test hyphenated YAML keys are read."""
        settings = Settings.from_file(config_file)

        assert settings.workspace.local == tmp_path / "workspace"
        assert settings.workspace.remote == "hdfs://hdfscluster/streampark"
        assert settings.backup_clean.max_backup_num == 3

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        """Test an empty YAML document yields defaults."""
        config = tmp_path / "empty.yaml"
        config.write_text("")

        assert Settings.from_file(config).backup_clean.max_backup_num == 5

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            Settings.from_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML raises ValueError."""
        config = tmp_path / "bad.yaml"
        config.write_text("workspace: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            Settings.from_file(config)

    def test_non_mapping(self, tmp_path: Path) -> None:
        """Test a YAML list is rejected."""
        config = tmp_path / "list.yaml"
        config.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="mapping"):
            Settings.from_file(config)

    def test_retention_must_be_positive(self, tmp_path: Path) -> None:
        """Test max-backup-num below 1 is rejected."""
        config = tmp_path / "zero.yaml"
        config.write_text("backup-clean:\n  max-backup-num: 0\n")

        with pytest.raises(ValueError, match="Invalid config"):
            Settings.from_file(config)


class TestConfigLocation:
    """Tests for config file discovery."""

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test WORKSPACE_FS_CONFIG names the config file."""
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "custom.yaml"))

        assert default_config_path() == tmp_path / "custom.yaml"

    def test_load_from_env(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test load_settings reads the env-selected file."""
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        assert load_settings().backup_clean.max_backup_num == 3

    def test_load_defaults_when_absent(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test defaults are used when no config file exists."""
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "absent.yaml"))

        assert load_settings() == Settings()

    def test_explicit_missing_path_raises(self, tmp_path: Path) -> None:
        """Test an explicit config path must exist."""
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "absent.yaml")
