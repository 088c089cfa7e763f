"""Shared data types for workspace-fs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

__all__ = ["NodeInfo", "NodeKind"]


class NodeKind(str, Enum):
    """Kind of node found at a path."""

    FILE = "file"
    DIRECTORY = "directory"
    ABSENT = "absent"


@dataclass
class NodeInfo:
    """Snapshot of a filesystem node.

    Attributes:
        path: Path that was queried.
        kind: File, directory or absent.
        size: Size in bytes for files, 0 otherwise.
        modified: Modification time as a POSIX timestamp, 0 when absent.
    """

    path: Path
    kind: NodeKind
    size: int = 0
    modified: float = 0.0

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.size < 0:
            raise ValueError("size cannot be negative")
        if self.kind is not NodeKind.FILE and self.size:
            raise ValueError(f"{self.kind.value} node cannot have a size")

    @property
    def exists(self) -> bool:
        """True unless the node is absent."""
        return self.kind is not NodeKind.ABSENT
