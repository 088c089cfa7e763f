"""Workspace directory management on top of a filesystem operator."""

from __future__ import annotations

import logging
from pathlib import Path

from workspace_fs.config import Settings
from workspace_fs.operators import InvalidArgumentError, LocalOperator
from workspace_fs.paths import is_within
from workspace_fs.protocols import FsOperator
from workspace_fs.types import NodeKind

logger = logging.getLogger(__name__)


class Workspace:
    """A root directory whose layout is managed through an operator.

    Follows Separate Use from Creation: use ``from_settings`` in
    production code and the constructor in tests.
    """

    def __init__(self, root: Path, operator: FsOperator, max_backups: int = 5) -> None:
        """Initialize a workspace.

        Args:
            root: Workspace root directory.
            operator: Operator used for every filesystem call.
            max_backups: Number of backups kept by ``prune_backups``.
        """
        if max_backups < 1:
            raise ValueError("max_backups must be at least 1")
        self.root = root
        self.operator = operator
        self.max_backups = max_backups

    @classmethod
    def from_settings(cls, settings: Settings, operator: FsOperator | None = None) -> Workspace:
        """Create the local workspace described by settings."""
        return cls(
            root=settings.workspace.local,
            operator=operator or LocalOperator.create(),
            max_backups=settings.backup_clean.max_backup_num,
        )

    def path(self, *parts: str) -> Path:
        """Get a path inside the workspace.

        Raises:
            InvalidArgumentError: If the parts lead outside the root, through
                an absolute part, ".." segments or a symlink.
        """
        target = self.root.joinpath(*parts)
        if parts and not is_within(target, self.root):
            raise InvalidArgumentError(f"{target} is not inside workspace {self.root}")
        return target

    def ensure(self) -> Path:
        """Create the workspace root if missing."""
        self.operator.mkdirs(self.root)
        return self.root

    def reset(self, *parts: str) -> Path:
        """Replace a workspace sub-directory with an empty one."""
        target = self.path(*parts)
        self.operator.mk_clean_dirs(target)
        return target

    def prune_backups(self, *parts: str) -> list[Path]:
        """Delete the oldest entries of a backup directory.

        Entries are ordered by modification time, then name; the newest
        ``max_backups`` are kept.

        Args:
            parts: Backup directory relative to the root.

        Returns:
            Deleted paths, oldest first.

        Raises:
            InvalidArgumentError: If the parts lead outside the root.
        """
        backup_dir = self.path(*parts)
        if self.operator.node_info(backup_dir).kind is not NodeKind.DIRECTORY:
            return []

        # Absent entries (dangling symlinks) sort as oldest
        entries = sorted(
            self.operator.list_directory(backup_dir),
            key=lambda p: (self.operator.node_info(p).modified, p.name),
        )
        excess = entries[: max(len(entries) - self.max_backups, 0)]
        for entry in excess:
            self.operator.delete(entry)
        if excess:
            logger.info("Pruned %d backup(s) from %s", len(excess), backup_dir)
        return excess
