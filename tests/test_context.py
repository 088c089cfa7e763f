"""Tests for context module."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

from workspace_fs.config import Settings
from workspace_fs.context import AppContext, create_context
from workspace_fs.operators import LocalOperator


class TestAppContext:
    """Tests for AppContext dataclass."""

    def test_create_with_all_dependencies(self) -> None:
        """Test creating context with explicit dependencies."""
        settings = Settings()
        operator = MagicMock()

        ctx = AppContext(settings=settings, operator=operator)

        assert ctx.settings is settings
        assert ctx.operator is operator

    def test_default_operator(self) -> None:
        """Test context creates the local operator if not provided."""
        ctx = AppContext(settings=Settings())

        assert isinstance(ctx.operator, LocalOperator)


class TestCreateContext:
    """Tests for create_context factory function."""

    def test_with_config_file(self, config_file: Path, tmp_path: Path) -> None:
        """Test settings are loaded from the given file."""
        ctx = create_context(config_file)

        assert ctx.settings.workspace.local == tmp_path / "workspace"
        assert isinstance(ctx.operator, LocalOperator)
