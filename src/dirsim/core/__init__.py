"""
Core dirsim components.

This package provides the directory tree model, path helpers and shared
type definitions.
"""

from dirsim.core.path_utils import (
    NAME_PATTERN,
    format_path,
    is_valid_name,
    is_valid_segment,
    split_destination,
)
from dirsim.core.tree_node import (
    DirectoryNode,
    DirectoryTree,
    Found,
    LookupResult,
    NotFound,
)
from dirsim.core.types import OutputBlock, PathStack

__all__ = [
    "DirectoryNode",
    "DirectoryTree",
    "Found",
    "NotFound",
    "LookupResult",
    "NAME_PATTERN",
    "format_path",
    "is_valid_name",
    "is_valid_segment",
    "split_destination",
    "OutputBlock",
    "PathStack",
]
