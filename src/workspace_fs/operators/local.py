"""Local disk operator backend."""

from __future__ import annotations

import hashlib
import logging
import shutil
from pathlib import Path

from workspace_fs.operators.base import BaseOperator, InvalidArgumentError
from workspace_fs.paths import (
    PathLike,
    canonical_path,
    file_name,
    is_any_blank,
    is_blank,
    is_copy_to_name,
    is_within,
    same_path,
)
from workspace_fs.types import NodeInfo, NodeKind

logger = logging.getLogger(__name__)

# Read size used when hashing file content
HASH_CHUNK_SIZE = 64 * 1024


class LocalOperator(BaseOperator):
    """Operator backed by the local filesystem.

    Holds no state, so a single instance can be shared between threads.
    Concurrent writers to the same destination are not serialized.
    """

    scheme = "file"

    @classmethod
    def create(cls) -> LocalOperator:
        """Create a local operator."""
        return cls()

    def exists(self, path: PathLike | None) -> bool:
        """Check whether a file or directory exists at path.

        Args:
            path: Path to check.

        Returns:
            False for blank paths, otherwise whether a node exists.
        """
        return not is_blank(path) and Path(path).exists()

    def is_directory(self, path: PathLike | None) -> bool:
        """Check whether path is an existing directory."""
        return not is_blank(path) and Path(path).is_dir()

    def node_info(self, path: PathLike | None) -> NodeInfo:
        """Describe the node at path.

        Args:
            path: Path to inspect.

        Returns:
            NodeInfo with kind, size (files only) and modification time.
        """
        if is_blank(path):
            return NodeInfo(path=Path(), kind=NodeKind.ABSENT)
        target = Path(path)
        if not target.exists():
            return NodeInfo(path=target, kind=NodeKind.ABSENT)
        stat = target.stat()
        if target.is_dir():
            return NodeInfo(path=target, kind=NodeKind.DIRECTORY, modified=stat.st_mtime)
        return NodeInfo(
            path=target, kind=NodeKind.FILE, size=stat.st_size, modified=stat.st_mtime
        )

    def mkdirs(self, path: PathLike | None) -> None:
        """Create a directory including missing ancestors.

        Args:
            path: Directory to create. Blank paths are ignored.

        Raises:
            FileExistsError: If path exists and is not a directory.
        """
        if is_blank(path):
            logger.debug("Skipping mkdirs: blank path")
            return
        Path(path).mkdir(parents=True, exist_ok=True)

    def delete(self, path: PathLike | None) -> None:
        """Remove a file, symlink or directory tree.

        Symlinks are removed without touching their target. Blank and
        absent paths are ignored.
        """
        if is_blank(path):
            logger.debug("Skipping delete: blank path")
            return
        target = Path(path)
        if target.is_symlink():
            target.unlink(missing_ok=True)
        elif target.is_dir():
            shutil.rmtree(target)
        elif target.exists():
            target.unlink(missing_ok=True)
        else:
            logger.debug("Skipping delete: %s does not exist", target)
            return
        logger.info("Deleted %s", target)

    def move(self, src: PathLike | None, dst: PathLike | None) -> None:
        """Move a file or directory so that src becomes dst.

        An existing dst is replaced. A file replacing a file is renamed over
        it, so dst survives a failed move. When a directory is involved dst
        is removed first. Missing ancestors of dst are created.

        Args:
            src: Path to move.
            dst: New location.

        Raises:
            InvalidArgumentError: If dst lies inside src or src inside dst.
        """
        if is_any_blank(src, dst):
            logger.debug("Skipping move: blank path argument")
            return
        src_path = Path(src)
        dst_path = Path(dst)
        if not src_path.exists():
            logger.debug("Skipping move: %s does not exist", src_path)
            return
        if same_path(src_path, dst_path):
            logger.debug("Skipping move: %s and %s are the same path", src_path, dst_path)
            return
        if is_within(dst_path, src_path):
            raise InvalidArgumentError(f"Cannot move {src_path} into itself ({dst_path})")
        if is_within(src_path, dst_path):
            raise InvalidArgumentError(f"Cannot move {src_path} onto its ancestor {dst_path}")

        if dst_path.is_dir() or (src_path.is_dir() and dst_path.exists()):
            self.delete(dst_path)
        self.mkdirs(dst_path.parent)
        shutil.move(str(src_path), str(dst_path))
        logger.info("Moved %s to %s", src_path, dst_path)

    def copy(
        self,
        src: PathLike | None,
        dst: PathLike | None,
        delete_source: bool = False,
        overwrite: bool = True,
    ) -> None:
        """Copy a single file.

        The destination is either the target file path or a directory to
        copy into. An existing directory always receives the file under its
        own name. Otherwise dst names the file when its last segment equals
        the source name or shares its extension, and is a directory to copy
        into in every other case.

        Args:
            src: File to copy.
            dst: Target file path or directory.
            delete_source: Remove src after copying.
            overwrite: Copy even when the target already exists.

        Raises:
            InvalidArgumentError: If src is a directory.
        """
        if is_any_blank(src, dst):
            logger.debug("Skipping copy: blank path argument")
            return
        src_file = Path(src)
        if not src_file.exists():
            logger.debug("Skipping copy: %s does not exist", src_file)
            return
        if not src_file.is_file():
            raise InvalidArgumentError(f"{src_file} must be a file")

        target = self._resolve_copy_target(src_file, Path(dst))
        if not self._should_copy(src_file, target, overwrite):
            return

        self.mkdirs(target.parent)
        shutil.copy2(src_file, target)
        logger.info("Copied %s to %s", src_file, target)
        if delete_source:
            src_file.unlink()
            logger.info("Deleted source %s", src_file)

    def copy_directory(
        self,
        src: PathLike | None,
        dst: PathLike | None,
        delete_source: bool = False,
        overwrite: bool = True,
    ) -> None:
        """Copy a directory tree onto dst, merging with existing content.

        Args:
            src: Directory to copy.
            dst: Destination directory, created if missing.
            delete_source: Remove src after copying.
            overwrite: Copy even when dst already exists.

        Raises:
            InvalidArgumentError: If src is a file, or if delete_source is
                requested for a dst nested inside src.
        """
        if is_any_blank(src, dst):
            logger.debug("Skipping directory copy: blank path argument")
            return
        src_dir = Path(src)
        dst_dir = Path(dst)
        if not src_dir.exists():
            logger.debug("Skipping directory copy: %s does not exist", src_dir)
            return
        if not src_dir.is_dir():
            raise InvalidArgumentError(f"{src_dir} must be a directory")
        if not self._should_copy(src_dir, dst_dir, overwrite):
            return

        nested = is_within(dst_dir, src_dir)
        if nested and delete_source:
            raise InvalidArgumentError(
                f"Cannot delete {src_dir} after copying into its own subdirectory {dst_dir}"
            )
        excluded = canonical_path(dst_dir) if nested else None

        def _skip_destination(directory: str, names: list[str]) -> list[str]:
            if excluded is None:
                return []
            return [n for n in names if canonical_path(Path(directory) / n) == excluded]

        shutil.copytree(src_dir, dst_dir, ignore=_skip_destination, dirs_exist_ok=True)
        logger.info("Copied directory %s to %s", src_dir, dst_dir)
        if delete_source:
            shutil.rmtree(src_dir)
            logger.info("Deleted source directory %s", src_dir)

    def content_hash(self, path: PathLike) -> str:
        """Get the MD5 hex digest of a file's content.

        Args:
            path: File to hash.

        Returns:
            32-character lowercase hex digest.

        Raises:
            InvalidArgumentError: If path is blank.
            FileNotFoundError: If the file does not exist.
            IsADirectoryError: If path is a directory.
        """
        if is_blank(path):
            raise InvalidArgumentError("content_hash: file must not be blank")
        digest = hashlib.md5(usedforsecurity=False)
        with open(path, "rb") as stream:
            for chunk in iter(lambda: stream.read(HASH_CHUNK_SIZE), b""):
                digest.update(chunk)
        return digest.hexdigest()

    def list_directory(self, path: PathLike | None) -> list[Path]:
        """List a directory one level deep.

        Returns:
            Empty list for blank or missing paths, ``[path]`` for a file,
            otherwise the immediate children sorted by name.
        """
        if is_blank(path):
            return []
        target = Path(path)
        if not target.exists():
            return []
        if not target.is_dir():
            return [target]
        return sorted(target.iterdir())

    def _resolve_copy_target(self, src_file: Path, dst: Path) -> Path:
        """Get the file path a copy of src_file to dst should write."""
        if dst.is_dir():
            return dst / src_file.name
        if is_copy_to_name(src_file.name, file_name(dst)):
            return dst
        return dst / src_file.name

    def _should_copy(self, src: Path, target: Path, overwrite: bool) -> bool:
        """Decide whether a copy of src onto target goes ahead.

        Only a copy onto the same canonical path is skipped. overwrite=False
        does not block copying onto a distinct target that already exists.
        """
        if same_path(src, target):
            logger.debug("Skipping copy: %s and %s are the same path", src, target)
            return False
        if not overwrite and target.exists():
            logger.debug("Copying onto existing %s although overwrite is off", target)
        return True
