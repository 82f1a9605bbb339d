"""Search package exports.

Recursive filename search plus the traversal primitive it is built on.
"""

from __future__ import annotations

from .tree import TraversalPolicy, compile_pattern, name_matches, search_tree, walk_tree

__all__ = [
    "TraversalPolicy",
    "compile_pattern",
    "name_matches",
    "search_tree",
    "walk_tree",
]
