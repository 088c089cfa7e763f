"""Configuration models loaded from YAML."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Default configuration home
CONFIG_DIR = Path.home() / ".workspace-fs"

# Environment variable naming an alternative config file
CONFIG_ENV_VAR = "WORKSPACE_FS_CONFIG"


class WorkspaceSettings(BaseModel):
    """Workspace roots for the local and remote backends."""

    local: Path = Field(default_factory=lambda: CONFIG_DIR / "workspace")
    remote: str | None = None


class BackupCleanSettings(BaseModel):
    """Backup retention policy."""

    model_config = ConfigDict(populate_by_name=True)

    max_backup_num: int = Field(default=5, ge=1, alias="max-backup-num")


class Settings(BaseModel):
    """Top-level settings document."""

    model_config = ConfigDict(populate_by_name=True)

    workspace: WorkspaceSettings = Field(default_factory=WorkspaceSettings)
    backup_clean: BackupCleanSettings = Field(
        default_factory=BackupCleanSettings, alias="backup-clean"
    )

    @classmethod
    def from_file(cls, path: Path) -> Settings:
        """Load settings from a YAML file.

        Args:
            path: Path to the YAML file.

        Returns:
            Parsed Settings.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If YAML is invalid or has the wrong shape.
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e


def default_config_path() -> Path:
    """Get the config file location, honoring WORKSPACE_FS_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "config.yaml"


def load_settings(path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults when no file exists.

    Args:
        path: Explicit config file. Must exist when given.

    Returns:
        Settings from the file, or default Settings.
    """
    if path is not None:
        return Settings.from_file(path)
    candidate = default_config_path()
    if candidate.exists():
        return Settings.from_file(candidate)
    return Settings()
