"""
Interpreter session state.

A Session owns one directory tree and the path stack identifying the
active directory. Every operation receives the session explicitly, so
several sessions can live side by side in one process.
"""

from dirsim.core.path_utils import format_path
from dirsim.core.tree_node import DirectoryTree, Found, NotFound
from dirsim.core.types import PathStack


class Session:
    """Directory tree plus the current position within it."""

    def __init__(self, tree: DirectoryTree | None = None):
        self.tree = tree if tree is not None else DirectoryTree()
        self.path_stack: PathStack = []

    @property
    def path(self) -> str:
        """Display path of the active directory."""
        return format_path(self.path_stack)

    def active(self) -> Found:
        """
        Look up the active directory.

        Raises:
            RuntimeError: If the path stack no longer resolves, which means a
                previous operation broke the stack invariant
        """
        result = self.tree.resolve(self.path_stack)
        if isinstance(result, NotFound):
            raise RuntimeError(
                f"Path stack {self.path_stack!r} does not resolve: "
                f"'{result.missing}' missing under {result.path}"
            )
        return result
