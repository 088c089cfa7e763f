"""Unified file-system operator for local and distributed workspaces."""

__version__ = "0.1.0"

# Export the operator interface and backend lookup
from workspace_fs.operators import (
    FsOperatorError,
    InvalidArgumentError,
    LocalOperator,
    get_operator,
    register_operator,
)
from workspace_fs.protocols import FsOperator

__all__ = [
    "__version__",
    "FsOperator",
    "FsOperatorError",
    "InvalidArgumentError",
    "LocalOperator",
    "get_operator",
    "register_operator",
]
