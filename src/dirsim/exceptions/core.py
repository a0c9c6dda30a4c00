"""
Exception classes for the dirsim interpreter.

This module defines specific exception types for the error conditions that
can occur while parsing a script line, executing a command against the
directory tree, or loading the script itself.
"""

from enum import Enum


class ParseReason(Enum):
    """User-facing reasons a script line is rejected by the parser."""

    INVALID_COMMAND = "Invalid Command"
    MISSING_PARAMETERS = "Invalid additional parameters"
    INVALID_SOURCE = "Invalid source"
    INVALID_DESTINATION = "Invalid destination"


class DirSimError(Exception):
    """Base exception for all dirsim errors."""

    pass


class CommandParseError(DirSimError):
    """Raised when a script line cannot be turned into a command."""

    def __init__(self, line: str, reason: ParseReason):
        """
        Initialize the exception.

        Params:
            line: The original (stripped) script line
            reason: Why the line was rejected
        """
        self.line = line
        self.reason = reason
        super().__init__(f"Invalid input: {line}. Reason: {reason.value}")


class DirectoryStateError(DirSimError):
    """
    Raised when a well-formed command cannot be satisfied by the current tree.

    Subclasses carry a fixed message which is written to the output verbatim.
    No state is mutated when one of these is raised.
    """

    message = "Invalid directory state"

    def __init__(self, message: str | None = None):
        """
        Initialize the exception.

        Params:
            message: Override for the class-level message
        """
        if message is not None:
            self.message = message
        super().__init__(self.message)


class SubdirectoryExistsError(DirectoryStateError):
    """Raised when the target name is already taken in a directory."""

    message = "Subdirectory already exists"


class SubdirectoryNotFoundError(DirectoryStateError):
    """Raised when a named subdirectory is missing."""

    message = "Subdirectory does not exist"


class RootAscentError(DirectoryStateError):
    """Raised when a command tries to go above the root directory."""

    message = "Cannot move up from root directory"


class IllegalMoveError(DirectoryStateError):
    """Raised when a directory would be moved onto itself or into its own subtree."""

    message = "Illegal action attempted"


class DirectoryNameError(DirSimError):
    """Raised when a key that is not a valid directory name reaches the tree."""

    def __init__(self, name: str, reason: str):
        """
        Initialize the exception.

        Params:
            name: The rejected name
            reason: Why the name is invalid
        """
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid directory name '{name}': {reason}")


class ScriptReadError(DirSimError):
    """Raised when the input script is missing or cannot be read."""

    def __init__(self, path: str, reason: str = "Input file does not exist"):
        """
        Initialize the exception.

        Params:
            path: Location of the script that failed to load
            reason: Human-readable cause
        """
        self.path = path
        self.reason = reason
        super().__init__(reason)
