"""
dirsim exception classes.

This package provides all exception types used throughout the interpreter
for consistent error handling and reporting.
"""

from dirsim.exceptions.core import (
    CommandParseError,
    DirectoryNameError,
    DirectoryStateError,
    DirSimError,
    IllegalMoveError,
    ParseReason,
    RootAscentError,
    ScriptReadError,
    SubdirectoryExistsError,
    SubdirectoryNotFoundError,
)

__all__ = [
    "DirSimError",
    "ParseReason",
    "CommandParseError",
    "DirectoryStateError",
    "SubdirectoryExistsError",
    "SubdirectoryNotFoundError",
    "RootAscentError",
    "IllegalMoveError",
    "DirectoryNameError",
    "ScriptReadError",
]
