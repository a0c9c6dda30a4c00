"""
dirsim - a scripted virtual directory interpreter

dirsim reads fixed-width directory commands (dir, mkdir, cd, up, mv, tree),
applies them to an in-memory directory tree and reports the result of each.
"""

from importlib.metadata import version

from dirsim.commands.parser import parse_command
from dirsim.execution.executor import CommandExecutor
from dirsim.execution.session import Session
from dirsim.runner import ScriptRunner, run_script

__version__ = version("dirsim")

__all__ = [
    "__version__",
    "Session",
    "CommandExecutor",
    "ScriptRunner",
    "parse_command",
    "run_script",
]
