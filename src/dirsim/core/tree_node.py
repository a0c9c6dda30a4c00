"""
Directory tree model for dirsim.

A directory is a mapping from child name to child directory. Nodes carry no
name of their own; the name lives in the parent's mapping entry. The tree
owns its nodes outright and never holds a node under two parents.
"""

from attrs import frozen
from pydantic import BaseModel, Field

from dirsim.core.path_utils import format_path, is_valid_name
from dirsim.core.types import PathStack
from dirsim.exceptions import DirectoryNameError


class DirectoryNode(BaseModel):
    """
    A single directory and its subdirectories.

    Insertion order of children is irrelevant; callers that display children
    use sorted_names().
    """

    children: dict[str, "DirectoryNode"] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.children)

    def __contains__(self, name: object) -> bool:
        return name in self.children

    def get(self, name: str) -> "DirectoryNode | None":
        """Return the child directory called name, or None."""
        return self.children.get(name)

    def sorted_names(self) -> list[str]:
        """Return child names in code point order."""
        return sorted(self.children)

    def insert(self, name: str, subtree: "DirectoryNode | None" = None) -> bool:
        """
        Attach a subdirectory under this directory.

        Params:
            name: Key for the new entry
            subtree: Existing subtree to attach; a fresh empty directory if omitted

        Returns:
            False without mutating when name is already present, True otherwise

        Raises:
            DirectoryNameError: When name is not a valid directory name
        """
        if not is_valid_name(name):
            raise DirectoryNameError(
                name, "names are 1-6 characters of letters, digits or '_'"
            )
        if name in self.children:
            return False
        self.children[name] = subtree if subtree is not None else DirectoryNode()
        return True

    def remove(self, name: str) -> "DirectoryNode":
        """
        Detach and return the subtree stored under name.

        Raises:
            KeyError: When name is not a child of this directory
        """
        return self.children.pop(name)


@frozen
class Found:
    """Successful lookup of a path stack."""

    path: str
    node: DirectoryNode


@frozen
class NotFound:
    """Failed lookup; missing is the first name that did not resolve."""

    path: str
    missing: str


LookupResult = Found | NotFound


class DirectoryTree:
    """Owner of the root directory and entry point for stack lookups."""

    def __init__(self, root: DirectoryNode | None = None):
        self.root = root if root is not None else DirectoryNode()

    def resolve(self, stack: PathStack) -> LookupResult:
        """
        Walk from the root through each name in stack.

        Params:
            stack: Names from the root down to the wanted directory

        Returns:
            Found with the display path and node, or NotFound naming the
            first missing entry
        """
        node = self.root
        for depth, name in enumerate(stack):
            child = node.get(name)
            if child is None:
                return NotFound(path=format_path(stack[:depth]), missing=name)
            node = child
        return Found(path=format_path(stack), node=node)
