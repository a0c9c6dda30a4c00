"""
dirsim command processing.

This package contains the fixed-width line parser, field validation and
move destination resolution.
"""

from dirsim.commands.parser import (
    Action,
    CommandParser,
    ParsedCommand,
    parse_command,
)
from dirsim.commands.path_resolver import (
    MoveResolver,
    MoveTarget,
    resolve_move_destination,
)

__all__ = [
    "Action",
    "CommandParser",
    "ParsedCommand",
    "parse_command",
    "MoveResolver",
    "MoveTarget",
    "resolve_move_destination",
]
