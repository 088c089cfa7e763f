"""Path helpers shared by every operator backend.

Blank checks, canonical comparison and the file-name suffix heuristic used
to tell a copy-into-directory target from a copy-to-name target.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, os.PathLike]

# Matches "scheme://..." but not Windows drive letters such as "C:\\"
_SCHEME_SEPARATOR = "://"


def is_blank(path: PathLike | None) -> bool:
    """Check whether a path argument is missing or whitespace only."""
    if path is None:
        return True
    return not os.fspath(path).strip()


def is_any_blank(*paths: PathLike | None) -> bool:
    """Check whether any of the given path arguments is blank."""
    return any(is_blank(p) for p in paths)


def canonical_path(path: PathLike) -> Path:
    """Get the fully resolved form of a path for equality checks.

    Symlinks and relative segments are resolved. Paths that do not exist
    yet resolve as far as possible; if resolution fails the normalized
    absolute form is returned instead.

    Args:
        path: Path to canonicalize.

    Returns:
        Absolute, alias-free path.
    """
    try:
        return Path(path).resolve()
    except (OSError, RuntimeError):
        return Path(os.path.abspath(os.path.normpath(os.fspath(path))))


def same_path(first: PathLike, second: PathLike) -> bool:
    """Check whether two paths name the same canonical location."""
    return canonical_path(first) == canonical_path(second)


def is_within(path: PathLike, ancestor: PathLike) -> bool:
    """Check whether path is strictly inside ancestor (canonical forms)."""
    child = canonical_path(path)
    parent = canonical_path(ancestor)
    return child != parent and parent in child.parents


def file_name(path: PathLike) -> str:
    """Get the final segment of a path, ignoring trailing separators."""
    return Path(os.fspath(path)).name


def get_suffix(name: str) -> str:
    """Get the lower-cased extension of a file name, dot included.

    A name without any dot is its own suffix, so two extension-less names
    only match when they are identical.

    Example:
        >>> get_suffix("Report.TXT")
        '.txt'
        >>> get_suffix("archive")
        'archive'
    """
    if "." in name:
        return name[name.rindex(".") :].lower()
    return name


def is_copy_to_name(src_name: str, dst_name: str) -> bool:
    """Decide whether a destination segment names the target file itself.

    Same name or same extension means the destination is the file path
    to write; anything else is treated as a directory to copy into.
    """
    if src_name == dst_name:
        return True
    return get_suffix(src_name) == get_suffix(dst_name)


@dataclass(frozen=True)
class FsUri:
    """A backend address: scheme, optional host and a path.

    Attributes:
        scheme: Lower-cased scheme, empty for plain filesystem paths.
        host: Authority part (cluster name or host:port), may be empty.
        path: Path within the backend namespace.
    """

    scheme: str
    host: str
    path: str

    @classmethod
    def parse(cls, text: PathLike) -> FsUri:
        """Parse a plain path or a ``scheme://host/path`` address.

        Accepts ``hdfs://cluster/data``, ``hdfs:///data/``, ``/data`` and
        ``file:///tmp/x``.

        Raises:
            ValueError: If the address is blank.
        """
        if is_blank(text):
            raise ValueError("Address must not be blank")
        raw = os.fspath(text).strip()
        if _SCHEME_SEPARATOR not in raw:
            return cls(scheme="", host="", path=raw)

        scheme, rest = raw.split(_SCHEME_SEPARATOR, 1)
        if "/" in rest:
            host, path = rest.split("/", 1)
            path = "/" + path
        else:
            host, path = rest, "/"
        return cls(scheme=scheme.lower(), host=host, path=path)

    @property
    def is_local(self) -> bool:
        """True when the address targets the local filesystem."""
        return self.scheme in ("", "file")

    def __str__(self) -> str:
        if not self.scheme:
            return self.path
        return f"{self.scheme}://{self.host}{self.path}"
