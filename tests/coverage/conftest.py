"""Shared fixtures for coverage pipeline tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from gocov2lcov.core.errors import PackageNotFoundError
from gocov2lcov.coverage.repo import RepositoryRootLocator

NO_MARKERS = (".gocov2lcov-test-no-such-marker",)


class FakeLocator:
    """PackageLocator backed by a dict, counting every lookup."""

    def __init__(self, packages: dict[str, str] | None = None) -> None:
        self.packages = dict(packages or {})
        self.calls: list[str] = []

    def locate(self, import_path: str) -> str:
        self.calls.append(import_path)
        try:
            return self.packages[import_path]
        except KeyError:
            raise PackageNotFoundError.for_reference(
                import_path, "cannot find package"
            ) from None


@pytest.fixture
def fake_locator() -> FakeLocator:
    return FakeLocator()


@pytest.fixture
def go_repo(tmp_path: Path) -> Path:
    """A repository root with one Go package directory ``pkg``."""
    repo = tmp_path / "repo"
    (repo / ".git").mkdir(parents=True)
    pkg = repo / "pkg"
    pkg.mkdir()
    (pkg / "file.go").write_text("package pkg\n")
    return repo


@pytest.fixture
def no_repo_roots() -> RepositoryRootLocator:
    """Root locator that never finds a repository."""
    return RepositoryRootLocator(NO_MARKERS)
