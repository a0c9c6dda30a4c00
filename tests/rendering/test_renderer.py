"""
Tests for the listing and tree views.
"""

from dirsim.core.tree_node import DirectoryNode
from dirsim.rendering import format_listing, render_tree

from conftest import build_tree


class TestFormatListing:
    """Test the column listing used by dir."""

    def test_single_name_is_padded(self):
        assert format_listing(["sub1"]) == "sub1    "

    def test_ten_names_fit_one_row(self):
        names = [f"d{i}" for i in range(10)]
        listing = format_listing(names)
        assert "\n" not in listing
        assert len(listing) == 80

    def test_eleventh_name_starts_new_row(self):
        names = [f"d{i:02d}" for i in range(12)]
        rows = format_listing(names).split("\n")
        assert len(rows) == 2
        assert rows[0] == "".join(name.ljust(8) for name in names[:10])
        assert rows[1] == "d10     d11     "

    def test_long_names_are_truncated(self):
        assert format_listing(["abcdefghijk"]) == "abcdefgh"


class TestRenderTree:
    """Test the guide-line tree used by tree."""

    def test_empty_directory_renders_nothing(self):
        assert render_tree(DirectoryNode()) == []

    def test_nested_structure(self):
        tree = build_tree({"b": {"z": {}}, "a": {"y": {}, "x": {}}})
        assert render_tree(tree.root) == [
            "├── a",
            "│   ├── x",
            "│   └── y",
            "└── b",
            "    └── z",
        ]

    def test_deep_guides_follow_last_sibling_state(self):
        tree = build_tree({"a": {"b": {"c": {}}}, "d": {}})
        assert render_tree(tree.root) == [
            "├── a",
            "│   └── b",
            "│       └── c",
            "└── d",
        ]

    def test_only_last_sibling_uses_corner(self):
        """Every sibling list has exactly one corner, on the last name."""
        tree = build_tree({name: {} for name in ["q", "a", "Z", "m", "_"]})
        lines = render_tree(tree.root)
        corners = [line for line in lines if line.startswith("└── ")]
        assert corners == ["└── q"]
        assert len([line for line in lines if line.startswith("├── ")]) == 4
