"""Listing and tree views of directory contents."""

from dirsim.rendering.renderer import format_listing, render_tree

__all__ = ["format_listing", "render_tree"]
