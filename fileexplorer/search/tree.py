"""Recursive filename search over a directory subtree.

Traversal is depth-first pre-order and never follows directory symlinks.
Subdirectories that cannot be opened are handled according to a
``TraversalPolicy``; the search engine skips them and keeps going.
"""

from __future__ import annotations

import enum
import logging
import os
import re
from collections.abc import Callable
from pathlib import Path

from ..errors import DirectoryUnreadable, InvalidPattern

logger = logging.getLogger(__name__)


class TraversalPolicy(enum.Enum):
    """What to do when a subdirectory cannot be opened or read."""

    CONTINUE_ON_ERROR = "continue"
    ABORT_ON_ERROR = "abort"


def _is_directory(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _branch_failed(path: str, exc: OSError, policy: TraversalPolicy) -> None:
    """Raise for ``ABORT_ON_ERROR``; otherwise record the skipped branch."""
    if policy is TraversalPolicy.ABORT_ON_ERROR:
        raise DirectoryUnreadable.from_os_error(exc, prefix=f"{path}: ") from exc
    logger.debug("skipping unreadable branch %s: %s", path, exc)


def walk_tree(
    root: Path,
    visit: Callable[[os.DirEntry], None],
    policy: TraversalPolicy = TraversalPolicy.CONTINUE_ON_ERROR,
) -> None:
    """Call ``visit`` for every entry below ``root`` in pre-order.

    A directory is visited only once it has been opened, so a skipped
    branch contributes nothing, not even its own entry. Failure to open
    ``root`` always raises ``DirectoryUnreadable``.
    """
    try:
        root_iterator = os.scandir(root)
    except OSError as exc:
        raise DirectoryUnreadable.from_os_error(exc) from exc

    stack = [(os.fspath(root), root_iterator)]
    try:
        while stack:
            directory, iterator = stack[-1]
            try:
                entry = next(iterator, None)
            except OSError as exc:
                _branch_failed(directory, exc, policy)
                entry = None
            if entry is None:
                stack.pop()
                iterator.close()
                continue

            if not _is_directory(entry):
                visit(entry)
                continue

            try:
                children = os.scandir(entry.path)
            except OSError as exc:
                _branch_failed(entry.path, exc, policy)
                continue
            stack.append((entry.path, children))
            visit(entry)
    finally:
        for _directory, iterator in stack:
            iterator.close()


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile ``pattern`` case-insensitively, raising ``InvalidPattern`` on error."""
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        raise InvalidPattern(f"invalid regex: {exc}") from exc


def name_matches(regex: re.Pattern[str], name: str) -> bool:
    """Search ``name`` for ``regex``; an evaluation failure counts as no match."""
    try:
        return regex.search(name) is not None
    except Exception:
        return False


def search_tree(root: Path, pattern: str) -> list[str]:
    """Return paths below ``root`` whose filename matches ``pattern``.

    The pattern is compiled before any traversal. Results keep visitation
    order and are built by joining ``root`` with the observed names.
    """
    regex = compile_pattern(pattern)
    matches: list[str] = []

    def collect(entry: os.DirEntry) -> None:
        if name_matches(regex, entry.name):
            matches.append(entry.path)

    walk_tree(root, collect, TraversalPolicy.CONTINUE_ON_ERROR)
    return matches


__all__ = [
    "TraversalPolicy",
    "walk_tree",
    "compile_pattern",
    "name_matches",
    "search_tree",
]
