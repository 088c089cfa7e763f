"""Operator backends and the scheme registry."""

from __future__ import annotations

from typing import Callable

from workspace_fs.paths import FsUri, PathLike, is_blank
from workspace_fs.protocols import FsOperator

from .base import BaseOperator, FsOperatorError, InvalidArgumentError, UnsupportedSchemeError
from .local import LocalOperator

__all__ = [
    "BaseOperator",
    "FsOperatorError",
    "InvalidArgumentError",
    "LocalOperator",
    "UnsupportedSchemeError",
    "get_operator",
    "register_operator",
    "supported_schemes",
]


OPERATORS: dict[str, Callable[[], FsOperator]] = {
    "": LocalOperator.create,
    "file": LocalOperator.create,
}


def register_operator(scheme: str, factory: Callable[[], FsOperator]) -> None:
    """Register a backend factory for an address scheme.

    Args:
        scheme: URI scheme such as "hdfs" (case-insensitive).
        factory: Zero-argument callable returning an operator.
    """
    OPERATORS[scheme.lower()] = factory


def supported_schemes() -> list[str]:
    """Get the registered schemes, excluding the plain-path entry."""
    return sorted(s for s in OPERATORS if s)


def get_operator(address: PathLike | None = None) -> FsOperator:
    """Get the operator for a path or URI.

    Args:
        address: Plain path or ``scheme://host/path`` URI. None or blank
            selects the local backend.

    Returns:
        Operator instance for the address's scheme.

    Raises:
        UnsupportedSchemeError: If no backend is registered for the scheme.
    """
    scheme = "" if is_blank(address) else FsUri.parse(address).scheme
    if scheme not in OPERATORS:
        raise UnsupportedSchemeError(
            f"No operator registered for scheme '{scheme}'. Supported: {supported_schemes()}"
        )
    return OPERATORS[scheme]()
