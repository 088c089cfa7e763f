"""Application context for dependency injection.

This module separates object creation from object use. CLI commands
receive an AppContext instead of building operators themselves, so tests
can inject test doubles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from workspace_fs.config import Settings, load_settings
from workspace_fs.protocols import FsOperator


def _default_operator() -> FsOperator:
    """Create the default local operator."""
    from workspace_fs.operators import LocalOperator

    return LocalOperator()


@dataclass
class AppContext:
    """Container for application dependencies.

    The operator is typed with the FsOperator protocol, so any backend or
    test double can be injected.
    """

    settings: Settings
    operator: FsOperator = field(default_factory=_default_operator)


def create_context(config_path: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Args:
        config_path: Override config file location.

    Returns:
        Configured AppContext with the local operator.
    """
    from workspace_fs.operators import get_operator

    settings = load_settings(config_path)
    return AppContext(settings=settings, operator=get_operator(settings.workspace.local))
