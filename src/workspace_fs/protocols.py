"""Protocol definitions for filesystem operators.

Application code is written once against ``FsOperator``; the local disk
backend and any distributed backend satisfy it structurally.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from workspace_fs.paths import PathLike
from workspace_fs.types import NodeInfo


@runtime_checkable
class FsOperator(Protocol):
    """Backend-agnostic capability set for file operations.

    Blank path arguments make mutating operations a silent no-op. Copy and
    move between two paths with the same canonical form are no-ops too.
    Backend I/O failures propagate unchanged.
    """

    def exists(self, path: PathLike | None) -> bool:
        """Check whether a node exists at path (False for blank paths)."""
        ...

    def mkdirs(self, path: PathLike | None) -> None:
        """Create a directory and all missing ancestors."""
        ...

    def delete(self, path: PathLike | None) -> None:
        """Remove the node at path, recursively for directories."""
        ...

    def move(self, src: PathLike | None, dst: PathLike | None) -> None:
        """Rename src to dst, replacing dst if present."""
        ...

    def copy(
        self,
        src: PathLike | None,
        dst: PathLike | None,
        delete_source: bool = False,
        overwrite: bool = True,
    ) -> None:
        """Copy a single file to a file path or into a directory.

        Raises:
            InvalidArgumentError: If src is a directory.
        """
        ...

    def copy_directory(
        self,
        src: PathLike | None,
        dst: PathLike | None,
        delete_source: bool = False,
        overwrite: bool = True,
    ) -> None:
        """Copy a whole directory tree onto dst.

        Raises:
            InvalidArgumentError: If src is a file.
        """
        ...

    def upload(
        self,
        src: PathLike | None,
        dst: PathLike | None,
        delete_source: bool = False,
        overwrite: bool = True,
    ) -> None:
        """Copy a file or a directory, whichever src is."""
        ...

    def content_hash(self, path: PathLike) -> str:
        """Get a deterministic fingerprint of a file's bytes."""
        ...

    def list_directory(self, path: PathLike | None) -> list[Path]:
        """List one level: [] if absent, [path] for a file, children otherwise."""
        ...

    def node_info(self, path: PathLike | None) -> NodeInfo:
        """Describe the kind and size of the node at path."""
        ...

    def mk_clean_dirs(self, path: PathLike | None) -> None:
        """Reset path to an empty directory."""
        ...
