"""
Text rendering of directory contents.

Two views are produced: the column listing used by `dir` and the
depth-first guide-line tree used by `tree`. Both order children by code
point.
"""

from dirsim.core.tree_node import DirectoryNode

LISTING_COLUMN_WIDTH = 8
LISTING_COLUMNS = 10

BRANCH = "├── "
LAST_BRANCH = "└── "
GUIDE = "│   "
BLANK = "    "


def format_listing(names: list[str]) -> str:
    """
    Lay out names in fixed-width columns.

    Each name is truncated or padded to the column width; a new row starts
    after every LISTING_COLUMNS entries. Rows keep their trailing padding.

    Params:
        names: Names in display order

    Returns:
        The rows joined with newlines
    """
    cells = [name[:LISTING_COLUMN_WIDTH].ljust(LISTING_COLUMN_WIDTH) for name in names]
    rows = [
        "".join(cells[start : start + LISTING_COLUMNS])
        for start in range(0, len(cells), LISTING_COLUMNS)
    ]
    return "\n".join(rows)


def render_tree(node: DirectoryNode, indent: str = "") -> list[str]:
    """
    Render the subtree below node, one line per descendant.

    Params:
        node: Directory whose children are drawn
        indent: Guide prefix inherited from the ancestors

    Returns:
        Lines in depth-first order; empty when node has no children
    """
    lines = []
    names = node.sorted_names()
    for position, name in enumerate(names):
        is_last = position == len(names) - 1
        lines.append(f"{indent}{LAST_BRANCH if is_last else BRANCH}{name}")
        lines.extend(render_tree(node.children[name], indent + (BLANK if is_last else GUIDE)))
    return lines
