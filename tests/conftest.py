"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from workspace_fs.operators import LocalOperator


@pytest.fixture
def operator() -> LocalOperator:
    """Create a local operator."""
    return LocalOperator()


@pytest.fixture
def report(tmp_path: Path) -> Path:
    """Create a single source file."""
    report = tmp_path / "report.txt"
    report.write_text("quarterly numbers")
    return report


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create a nested source directory.

    Layout::

        src/
            a.txt
            b.txt
            subdir/
                c.txt
                deeper/
                    d.txt
    """
    root = tmp_path / "src"
    (root / "subdir" / "deeper").mkdir(parents=True)
    (root / "a.txt").write_text("alpha")
    (root / "b.txt").write_text("bravo")
    (root / "subdir" / "c.txt").write_text("charlie")
    (root / "subdir" / "deeper" / "d.txt").write_text("delta")
    return root


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a config file pointing at a temporary workspace."""
    config = tmp_path / "config.yaml"
    config.write_text(
        "workspace:\n"
        f"  local: {tmp_path / 'workspace'}\n"
        "  remote: hdfs://hdfscluster/streampark\n"
        "backup-clean:\n"
        "  max-backup-num: 3\n"
    )
    return config


def _snapshot(root: Path) -> dict[str, str | None]:
    """Map every path under root to its text content (None for directories)."""
    return {
        str(p.relative_to(root)): (None if p.is_dir() else p.read_text())
        for p in sorted(root.rglob("*"))
    }


@pytest.fixture
def snapshot():
    """Provide a function capturing a directory tree for comparison."""
    return _snapshot
