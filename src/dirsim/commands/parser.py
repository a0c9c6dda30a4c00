"""
Parser for dirsim script lines.

Script lines use fixed-width fields rather than whitespace separation:

    characters 1-8    action
    characters 9-16   source directory name
    characters 17+    destination path (mv only)

Each field is stripped after extraction. The widths are part of the script
format and are mirrored when a command is echoed back to the output.
"""

from dataclasses import dataclass
from enum import Enum

from dirsim.commands.validation import validate_destination, validate_source
from dirsim.exceptions import CommandParseError, ParseReason

ACTION_WIDTH = 8
SOURCE_WIDTH = 8
DESTINATION_OFFSET = ACTION_WIDTH + SOURCE_WIDTH

ECHO_PREFIX = "Command: "


class Action(Enum):
    """Supported script actions."""

    DIR = "dir"
    MKDIR = "mkdir"
    CD = "cd"
    UP = "up"
    MV = "mv"
    TREE = "tree"

    @property
    def requires_source(self) -> bool:
        return self in (Action.MKDIR, Action.CD, Action.MV)

    @property
    def requires_destination(self) -> bool:
        return self is Action.MV


@dataclass(frozen=True)
class ParsedCommand:
    """A validated script line split into its fixed-width fields."""

    action: Action
    source: str = ""
    destination: str = ""
    line: str = ""

    @property
    def echo(self) -> str:
        """
        Reconstruct the command for the output echo.

        The action is padded to its field width only when a source follows,
        and the source only when a destination follows.
        """
        action = self.action.value.ljust(ACTION_WIDTH if self.source else 0)
        source = self.source.ljust(SOURCE_WIDTH if self.destination else 0)
        return f"{ECHO_PREFIX}{action}{source}{self.destination}"


@dataclass(frozen=True)
class RawFields:
    """The three stripped fields of a line before validation."""

    action: str
    source: str
    destination: str

    @classmethod
    def split_line(cls, line: str) -> "RawFields":
        """
        Cut a line into its fixed-width fields.

        Examples:
            "mkdir   sub1" -> RawFields("mkdir", "sub1", "")
            "mv      sub1    ..\\sub2" -> RawFields("mv", "sub1", "..\\sub2")
        """
        return cls(
            action=line[:ACTION_WIDTH].strip(),
            source=line[ACTION_WIDTH:DESTINATION_OFFSET].strip(),
            destination=line[DESTINATION_OFFSET:].strip(),
        )


class CommandParser:
    """Parser for fixed-width dirsim commands."""

    VALID_ACTIONS = {action.value: action for action in Action}

    def parse(self, line: str) -> ParsedCommand:
        """
        Parse one script line into a command.

        Validation runs in a fixed order and the first failure wins:
        unknown action, missing source, invalid source, missing destination,
        invalid destination.

        Params:
            line: Script line, already stripped of surrounding whitespace

        Returns:
            ParsedCommand with validated fields

        Raises:
            CommandParseError: If the line is not a valid command
        """
        fields = RawFields.split_line(line)

        action = self.VALID_ACTIONS.get(fields.action)
        if action is None:
            raise CommandParseError(line, ParseReason.INVALID_COMMAND)

        if action.requires_source:
            reason = validate_source(fields.source)
            if reason is not None:
                raise CommandParseError(line, reason)

        if action.requires_destination and not fields.destination:
            raise CommandParseError(line, ParseReason.MISSING_PARAMETERS)

        if fields.destination:
            reason = validate_destination(fields.destination)
            if reason is not None:
                raise CommandParseError(line, reason)

        return ParsedCommand(
            action=action,
            source=fields.source,
            destination=fields.destination,
            line=line,
        )


def parse_command(line: str) -> ParsedCommand:
    """
    Convenience function to parse a script line.

    Params:
        line: The script line to parse

    Returns:
        ParsedCommand for the line

    Raises:
        CommandParseError: If the line is malformed or invalid
    """
    parser = CommandParser()
    return parser.parse(line)
