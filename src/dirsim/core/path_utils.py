"""
Common path utilities for dirsim.

This module holds the directory name rule and the helpers that split and
format backslash-separated paths, shared by the parser, the tree and the
move resolver.
"""

import re
from collections.abc import Iterable

from dirsim.core.types import (
    CURRENT_SEGMENT,
    PARENT_SEGMENT,
    PATH_SEPARATOR,
    ROOT_NAME,
)

NAME_PATTERN = re.compile(r"[a-zA-Z0-9_]{1,6}")


def is_valid_name(name: str) -> bool:
    """
    Check whether a string may be used as a directory name.

    Params:
        name: Candidate name

    Returns:
        True for 1-6 characters drawn from letters, digits and underscore
    """
    return NAME_PATTERN.fullmatch(name) is not None


def is_valid_segment(segment: str) -> bool:
    """Check a single destination segment: '.', '..' or a valid name."""
    return segment in (CURRENT_SEGMENT, PARENT_SEGMENT) or is_valid_name(segment)


def split_destination(destination: str) -> list[str]:
    """
    Split a destination path into its segments.

    Params:
        destination: Backslash-separated path (e.g. "..\\sub1\\sub2")

    Returns:
        List of raw segments in order

    Examples:
        "..\\sub1" -> ["..", "sub1"]
        "sub1" -> ["sub1"]
    """
    return destination.split(PATH_SEPARATOR)


def format_path(stack: Iterable[str]) -> str:
    """
    Build the display path for a path stack.

    Params:
        stack: Names from the root down to a directory

    Returns:
        "root" followed by each name, joined with backslashes
    """
    return PATH_SEPARATOR.join([ROOT_NAME, *stack])
