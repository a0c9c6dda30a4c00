"""
Command execution for dirsim.

The executor applies validated commands to a Session and returns the output
blocks each command produces. The first block is always the command echo;
state errors become a single trailing block and leave the session untouched.
"""

import logging
from collections.abc import Callable

from dirsim.commands.parser import Action, ParsedCommand
from dirsim.commands.path_resolver import MoveResolver
from dirsim.core.tree_node import Found
from dirsim.core.types import OutputBlock
from dirsim.exceptions import (
    DirectoryStateError,
    RootAscentError,
    SubdirectoryExistsError,
    SubdirectoryNotFoundError,
)
from dirsim.execution.session import Session
from dirsim.rendering.renderer import format_listing, render_tree

logger = logging.getLogger(__name__)

NO_SUBDIRECTORIES = "No subdirectories"
TREE_ROOT_MARKER = "."


class CommandExecutor:
    """Dispatches parsed commands to directory tree operations."""

    def __init__(self, session: Session):
        self.session = session
        self.resolver = MoveResolver(session.tree)
        self._handlers: dict[Action, Callable[[ParsedCommand], list[OutputBlock]]] = {
            Action.DIR: self._execute_dir,
            Action.MKDIR: self._execute_mkdir,
            Action.CD: self._execute_cd,
            Action.UP: self._execute_up,
            Action.MV: self._execute_mv,
            Action.TREE: self._execute_tree,
        }

    def execute(self, command: ParsedCommand) -> list[OutputBlock]:
        """
        Execute one command against the session.

        Params:
            command: A command produced by the parser

        Returns:
            The echo block followed by any result blocks
        """
        logger.debug("Executing %s in %s", command.echo, self.session.path)
        blocks = [command.echo]
        try:
            blocks.extend(self._handlers[command.action](command))
        except DirectoryStateError as e:
            logger.debug("State error for %r: %s", command.line, e.message)
            blocks.append(e.message)
        return blocks

    def _execute_dir(self, command: ParsedCommand) -> list[OutputBlock]:
        active = self.session.active()
        names = active.node.sorted_names()
        listing = format_listing(names) if names else NO_SUBDIRECTORIES
        return [f"Directory of {active.path}:", listing]

    def _execute_mkdir(self, command: ParsedCommand) -> list[OutputBlock]:
        if not self.session.active().node.insert(command.source):
            raise SubdirectoryExistsError()
        return []

    def _execute_cd(self, command: ParsedCommand) -> list[OutputBlock]:
        if command.source not in self.session.active().node:
            raise SubdirectoryNotFoundError()
        self.session.path_stack.append(command.source)
        return []

    def _execute_up(self, command: ParsedCommand) -> list[OutputBlock]:
        if not self.session.path_stack:
            raise RootAscentError()
        self.session.path_stack.pop()
        return []

    def _execute_mv(self, command: ParsedCommand) -> list[OutputBlock]:
        active = self.session.active()
        if command.source not in active.node:
            raise SubdirectoryNotFoundError()

        target = self.resolver.resolve(
            command.destination, self.session.path_stack, command.source
        )

        subtree = active.node.remove(command.source)
        parent = self.session.tree.resolve(list(target.stack))
        if not isinstance(parent, Found):
            raise RuntimeError(
                f"Move target {target.path} did not survive detaching '{command.source}'"
            )
        parent.node.insert(target.key, subtree)
        logger.debug(
            "Moved %s\\%s to %s\\%s", active.path, command.source, parent.path, target.key
        )
        return []

    def _execute_tree(self, command: ParsedCommand) -> list[OutputBlock]:
        active = self.session.active()
        blocks = [f"Tree of {active.path}:", TREE_ROOT_MARKER]
        lines = render_tree(active.node)
        if lines:
            blocks.append("\n".join(lines))
        return blocks
