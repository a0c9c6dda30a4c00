"""
Shared test fixtures and utilities for the dirsim test suite.
"""

import pytest

from dirsim.core.tree_node import DirectoryNode, DirectoryTree
from dirsim.execution.executor import CommandExecutor
from dirsim.execution.session import Session
from dirsim.runner import ScriptRunner


def make_line(action: str, source: str = "", destination: str = "") -> str:
    """Build a fixed-width script line from its fields."""
    if destination:
        return f"{action:<8}{source:<8}{destination}"
    if source:
        return f"{action:<8}{source}"
    return action


def build_tree(structure: dict) -> DirectoryTree:
    """Build a tree from nested dicts, e.g. {"a": {"b": {}}}."""

    def build_node(children: dict) -> DirectoryNode:
        node = DirectoryNode()
        for name, grandchildren in children.items():
            node.insert(name, build_node(grandchildren))
        return node

    return DirectoryTree(build_node(structure))


def as_structure(node: DirectoryNode) -> dict:
    """Inverse of build_tree for a single node."""
    return {name: as_structure(child) for name, child in node.children.items()}


@pytest.fixture
def session():
    """A fresh session with an empty root directory."""
    return Session()


@pytest.fixture
def executor(session):
    """Executor bound to the session fixture."""
    return CommandExecutor(session)


@pytest.fixture
def runner(session):
    """Script runner bound to the session fixture.

    Usage:
        def test_something(runner):
            blocks = runner.run_lines([make_line("mkdir", "sub1"), "dir"])
    """
    return ScriptRunner(session)
