"""
Destination resolution for the mv command.

The destination of a move is interpreted relative to the active directory.
Resolution works on a copy of the path stack so that a failed move leaves
the session exactly as it was.
"""

from attrs import frozen

from dirsim.core.path_utils import format_path, split_destination
from dirsim.core.tree_node import DirectoryTree, Found
from dirsim.core.types import CURRENT_SEGMENT, PARENT_SEGMENT, PathStack
from dirsim.exceptions import (
    IllegalMoveError,
    RootAscentError,
    SubdirectoryExistsError,
    SubdirectoryNotFoundError,
)


@frozen
class MoveTarget:
    """Where a moved subtree is attached: the parent's path stack and the new key."""

    stack: tuple[str, ...]
    key: str

    @property
    def path(self) -> str:
        return format_path(self.stack)


class MoveResolver:
    """
    Resolves mv destinations against a directory tree.

    Segment rules, applied left to right on a copy of the active stack:

    - '.' leaves the position unchanged
    - '..' ascends one level and fails at the root
    - an existing name descends into it; as the final segment the subtree is
      moved into that directory under its own name
    - a missing final name renames the subtree in the current position
    - a missing intermediate name fails
    """

    def __init__(self, tree: DirectoryTree):
        self.tree = tree

    def _lookup(self, stack: PathStack) -> Found:
        result = self.tree.resolve(stack)
        if not isinstance(result, Found):
            raise SubdirectoryNotFoundError()
        return result

    def resolve(
        self, destination: str, active_stack: PathStack, source: str
    ) -> MoveTarget:
        """
        Resolve a destination path for moving source out of the active directory.

        Params:
            destination: Validated backslash-separated destination
            active_stack: Path stack of the active directory (not mutated)
            source: Name of the subdirectory being moved

        Returns:
            MoveTarget naming the new parent and the key to attach under

        Raises:
            RootAscentError: When '..' would leave the root
            IllegalMoveError: When the destination is the source or lies inside it
            SubdirectoryExistsError: When the target key is already taken
            SubdirectoryNotFoundError: When an intermediate segment is missing
        """
        stack = list(active_stack)
        active_path = format_path(active_stack)
        segments = split_destination(destination)
        key = source

        for index, segment in enumerate(segments):
            is_last = index == len(segments) - 1

            if segment == CURRENT_SEGMENT:
                continue

            if segment == PARENT_SEGMENT:
                if not stack:
                    raise RootAscentError()
                stack.pop()
                continue

            current = self._lookup(stack)

            # Passing through the source itself would attach it inside its own subtree
            if current.path == active_path and segment == source:
                raise IllegalMoveError()

            child = current.node.get(segment)
            if child is not None:
                if is_last and source in child:
                    raise SubdirectoryExistsError()
                stack.append(segment)
            elif is_last:
                key = segment
            else:
                raise SubdirectoryNotFoundError()

        parent = self._lookup(stack)
        if parent.path == active_path and key == source:
            raise IllegalMoveError()
        if key in parent.node:
            raise SubdirectoryExistsError()

        return MoveTarget(stack=tuple(stack), key=key)


def resolve_move_destination(
    tree: DirectoryTree, destination: str, active_stack: PathStack, source: str
) -> MoveTarget:
    """Convenience wrapper around MoveResolver.resolve."""
    return MoveResolver(tree).resolve(destination, active_stack, source)
