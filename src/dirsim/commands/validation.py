"""
Field validation for script command parsing.

This module contains the checks applied to the source and destination
fields once the action has been recognised.
"""

from dirsim.core.path_utils import is_valid_name, is_valid_segment, split_destination
from dirsim.core.types import PATH_SEPARATOR
from dirsim.exceptions import ParseReason


def validate_source(source: str) -> ParseReason | None:
    """
    Validate the source field of a command that requires one.

    Params:
        source: Stripped source field

    Returns:
        The rejection reason, or None when the source is acceptable
    """
    if not source:
        return ParseReason.MISSING_PARAMETERS
    if not is_valid_name(source):
        return ParseReason.INVALID_SOURCE
    return None


def validate_destination(destination: str) -> ParseReason | None:
    """
    Validate a backslash-separated destination path.

    The path may not begin or end with a separator, and every segment must be
    '.', '..' or a valid directory name. Empty segments (doubled separators)
    are rejected by the same rule.

    Params:
        destination: Stripped, non-empty destination field

    Returns:
        ParseReason.INVALID_DESTINATION or None
    """
    if destination.startswith(PATH_SEPARATOR) or destination.endswith(PATH_SEPARATOR):
        return ParseReason.INVALID_DESTINATION
    if not all(is_valid_segment(segment) for segment in split_destination(destination)):
        return ParseReason.INVALID_DESTINATION
    return None
