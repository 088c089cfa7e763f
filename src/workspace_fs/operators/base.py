"""Base operator implementation with behavior shared by every backend.

Backends implement the primitive operations; ``upload`` and
``mk_clean_dirs`` are composed from them here.

Pattern: Template Method - base class defines composite operations,
subclasses provide the backend primitives.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from workspace_fs.paths import PathLike
from workspace_fs.types import NodeInfo

logger = logging.getLogger(__name__)


class FsOperatorError(Exception):
    """Error raised by a filesystem operator."""

    pass


class InvalidArgumentError(FsOperatorError, ValueError):
    """An argument has the wrong node kind or is otherwise unusable."""

    pass


class UnsupportedSchemeError(FsOperatorError, ValueError):
    """No operator backend is registered for an address scheme."""

    pass


class BaseOperator(ABC):
    """Base class for operator backends.

    Subclasses must be stateless: every call re-queries the backend.
    """

    scheme: str

    @abstractmethod
    def exists(self, path: PathLike | None) -> bool:
        """Check whether a node exists at path."""
        ...

    @abstractmethod
    def is_directory(self, path: PathLike | None) -> bool:
        """Check whether path is an existing directory."""
        ...

    @abstractmethod
    def node_info(self, path: PathLike | None) -> NodeInfo:
        """Describe the node at path."""
        ...

    @abstractmethod
    def mkdirs(self, path: PathLike | None) -> None:
        """Create a directory and all missing ancestors."""
        ...

    @abstractmethod
    def delete(self, path: PathLike | None) -> None:
        """Remove the node at path."""
        ...

    @abstractmethod
    def move(self, src: PathLike | None, dst: PathLike | None) -> None:
        """Rename src to dst."""
        ...

    @abstractmethod
    def copy(
        self,
        src: PathLike | None,
        dst: PathLike | None,
        delete_source: bool = False,
        overwrite: bool = True,
    ) -> None:
        """Copy a single file."""
        ...

    @abstractmethod
    def copy_directory(
        self,
        src: PathLike | None,
        dst: PathLike | None,
        delete_source: bool = False,
        overwrite: bool = True,
    ) -> None:
        """Copy a directory tree."""
        ...

    @abstractmethod
    def content_hash(self, path: PathLike) -> str:
        """Fingerprint a file's content."""
        ...

    @abstractmethod
    def list_directory(self, path: PathLike | None) -> list[Path]:
        """List one level of a directory."""
        ...

    def upload(
        self,
        src: PathLike | None,
        dst: PathLike | None,
        delete_source: bool = False,
        overwrite: bool = True,
    ) -> None:
        """Copy src to dst using the directory or file algorithm as needed.

        Args:
            src: Source file or directory.
            dst: Destination path.
            delete_source: Remove src after a successful copy.
            overwrite: Copy even when dst already exists.
        """
        if self.is_directory(src):
            self.copy_directory(src, dst, delete_source, overwrite)
        else:
            self.copy(src, dst, delete_source, overwrite)

    def mk_clean_dirs(self, path: PathLike | None) -> None:
        """Force delete path and recreate it as an empty directory."""
        logger.debug("Resetting %s to an empty directory", path)
        self.delete(path)
        self.mkdirs(path)
