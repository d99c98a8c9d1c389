"""Repository root detection and path shortening.

A repository root is the nearest ancestor directory that directly contains a
version-control metadata directory. Resolved source paths under a root are
rewritten relative to it so lcov consumers see repository-relative names.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from gocov2lcov.config.models import DEFAULT_VCS_MARKERS


def find_repository_root(
    start_dir: str | Path,
    markers: Sequence[str] = DEFAULT_VCS_MARKERS,
) -> Path | None:
    """Walk up from start_dir looking for a VCS metadata directory.

    Args:
        start_dir: Directory to start from. It is checked itself.
        markers: Directory names that mark a repository root.

    Returns:
        The innermost directory containing a marker, or None when the
        filesystem root is reached without a match.
    """
    current = Path(start_dir)
    while True:
        if any((current / marker).is_dir() for marker in markers):
            return current
        parent = current.parent
        if parent == current:
            return None
        current = parent


def shorten_path(path: str, markers: Sequence[str] = DEFAULT_VCS_MARKERS) -> str:
    """Make path relative to its repository root, or return it unchanged."""
    root = find_repository_root(Path(path).parent, markers)
    if root is None:
        return path
    return path.removeprefix(str(root) + os.sep)


class RepositoryRootLocator:
    """Per-run root locator that remembers answers per starting directory."""

    def __init__(self, markers: Sequence[str] = DEFAULT_VCS_MARKERS) -> None:
        self._markers = tuple(markers)
        self._roots: dict[str, Path | None] = {}

    @property
    def markers(self) -> tuple[str, ...]:
        return self._markers

    def find_root(self, start_dir: str | Path) -> Path | None:
        key = str(start_dir)
        if key not in self._roots:
            self._roots[key] = find_repository_root(start_dir, self._markers)
        return self._roots[key]

    def shorten(self, path: str) -> str:
        root = self.find_root(Path(path).parent)
        if root is None:
            return path
        return path.removeprefix(str(root) + os.sep)
