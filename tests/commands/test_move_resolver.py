"""
Tests for mv destination resolution.

The fixture tree used throughout:

    root
    ├── a
    │   └── x
    ├── b
    └── c
        └── a
"""

import pytest

from dirsim.commands.path_resolver import MoveResolver, MoveTarget, resolve_move_destination
from dirsim.exceptions import (
    IllegalMoveError,
    RootAscentError,
    SubdirectoryExistsError,
    SubdirectoryNotFoundError,
)

from conftest import build_tree

STRUCTURE = {"a": {"x": {}}, "b": {}, "c": {"a": {}}}


@pytest.fixture
def resolver():
    return MoveResolver(build_tree(STRUCTURE))


class TestSuccessfulResolution:
    """Destinations that resolve to a parent and key."""

    @pytest.mark.parametrize(
        "destination,active,source,expected",
        [
            ("b", [], "a", MoveTarget(("b",), "a")),
            ("new", [], "a", MoveTarget((), "new")),
            ("b\\new", [], "a", MoveTarget(("b",), "new")),
            ("b\\..\\b", [], "a", MoveTarget(("b",), "a")),
            (".\\b", [], "a", MoveTarget(("b",), "a")),
            ("b\\.", [], "a", MoveTarget(("b",), "a")),
            ("..\\b", ["c"], "a", MoveTarget(("b",), "a")),
            ("..\\new", ["c"], "a", MoveTarget((), "new")),
        ],
    )
    def test_resolves(self, resolver, destination, active, source, expected):
        assert resolver.resolve(destination, active, source) == expected

    def test_live_stack_is_not_mutated(self, resolver):
        active = ["c"]
        resolver.resolve("..\\b", active, "a")
        assert active == ["c"]

    def test_target_path(self):
        assert MoveTarget(("b", "y"), "a").path == "root\\b\\y"

    def test_convenience_function(self):
        tree = build_tree(STRUCTURE)
        assert resolve_move_destination(tree, "b", [], "a") == MoveTarget(("b",), "a")


class TestFailedResolution:
    """Destinations that are rejected with a state error."""

    @pytest.mark.parametrize(
        "destination,active,source,error",
        [
            ("a", [], "a", IllegalMoveError),
            (".\\a", [], "a", IllegalMoveError),
            ("a\\x", [], "a", IllegalMoveError),
            (".", [], "a", IllegalMoveError),
            ("..\\c\\a", ["c"], "a", IllegalMoveError),
            ("c", [], "a", SubdirectoryExistsError),
            ("..", ["c"], "a", SubdirectoryExistsError),
            ("..\\a", ["a"], "x", SubdirectoryExistsError),
            ("nope\\x", [], "a", SubdirectoryNotFoundError),
            ("b\\nope\\x", [], "a", SubdirectoryNotFoundError),
            ("..", [], "a", RootAscentError),
            ("b\\..\\..", [], "a", RootAscentError),
        ],
    )
    def test_rejects(self, resolver, destination, active, source, error):
        with pytest.raises(error) as exc_info:
            resolver.resolve(destination, active, source)
        assert str(exc_info.value) == error.message
