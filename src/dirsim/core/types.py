"""
Core type definitions for dirsim.

This module contains the type aliases and fixed constants shared by the
parser, the tree and the renderer.
"""

PathStack = list[str]

OutputBlock = str

ROOT_NAME = "root"

PATH_SEPARATOR = "\\"

CURRENT_SEGMENT = "."

PARENT_SEGMENT = ".."
