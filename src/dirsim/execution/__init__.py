"""
Command execution for dirsim.

This package holds the session state and the executor that applies parsed
commands to it.
"""

from dirsim.execution.executor import CommandExecutor
from dirsim.execution.session import Session

__all__ = ["CommandExecutor", "Session"]
