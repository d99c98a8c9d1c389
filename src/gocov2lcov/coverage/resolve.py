"""Package-relative file reference resolution.

Go coverage profiles name files by import path, e.g.
``github.com/user/pkg/main.go``. The directory part is looked up once per
run through a PackageLocator and the answer, success or failure, is reused
for every later reference in the same directory.
"""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from gocov2lcov.config.models import ResolverConfig
from gocov2lcov.core.errors import PackageNotFoundError
from gocov2lcov.core.logging import get_logger

log = get_logger(__name__)


class PackageLocator(Protocol):
    """Finds the on-disk directory of a Go package without building it."""

    def locate(self, import_path: str) -> str:
        """Return the package directory.

        Raises:
            PackageNotFoundError: If the package cannot be found.
        """
        ...


class GoListLocator:
    """Locator backed by ``go list -find``.

    ``-find`` identifies the package without resolving dependencies, so no
    compilation or code generation happens.
    """

    def __init__(
        self,
        *,
        go_binary: str = "go",
        working_dir: Path | None = None,
        timeout_sec: float = 60.0,
    ) -> None:
        self._go_binary = go_binary
        self._working_dir = working_dir
        self._timeout_sec = timeout_sec

    @classmethod
    def from_config(cls, config: ResolverConfig) -> GoListLocator:
        return cls(
            go_binary=config.go_binary,
            working_dir=Path(config.working_dir) if config.working_dir else None,
            timeout_sec=config.timeout_sec,
        )

    def locate(self, import_path: str) -> str:
        if not import_path or import_path.startswith("-"):
            raise PackageNotFoundError.for_reference(import_path, "invalid import path")

        try:
            result = subprocess.run(
                [self._go_binary, "list", "-find", "-f", "{{.Dir}}", import_path],
                capture_output=True,
                text=True,
                timeout=self._timeout_sec,
                cwd=self._working_dir,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise PackageNotFoundError.for_reference(
                import_path, f"go list timed out after {self._timeout_sec}s"
            ) from e
        except OSError as e:
            raise PackageNotFoundError.for_reference(import_path, str(e)) from e

        if result.returncode != 0:
            reason = result.stderr.strip() or f"go list exited with {result.returncode}"
            raise PackageNotFoundError.for_reference(import_path, reason)

        directory = result.stdout.strip()
        if not directory:
            raise PackageNotFoundError.for_reference(import_path, "no directory for package")
        return directory


@dataclass(frozen=True, slots=True)
class PackageLookup:
    """Cached outcome of looking up one directory fragment."""

    directory: str | None = None
    error: PackageNotFoundError | None = None


def split_reference(reference: str) -> tuple[str, str]:
    """Split a reference after its last separator.

    The directory fragment keeps its trailing separator and is empty when
    the reference has none.
    """
    head, sep, filename = reference.rpartition("/")
    return head + sep, filename


class PathResolver:
    """Maps package-qualified file references to on-disk paths.

    One instance per run. Lookups are memoized by directory fragment and the
    first answer wins, including failures.
    """

    def __init__(self, locator: PackageLocator) -> None:
        self._locator = locator
        self._cache: dict[str, PackageLookup] = {}

    def resolve(self, reference: str) -> str:
        """Resolve a reference like ``example.com/pkg/file.go`` to a path.

        Raises:
            PackageNotFoundError: If the package directory cannot be located.
                A repeated failure re-raises the cached error.
        """
        fragment, filename = split_reference(reference)
        lookup = self._cache.get(fragment)
        if lookup is None:
            lookup = self._lookup(fragment, reference)
            self._cache[fragment] = lookup

        if lookup.error is not None:
            raise lookup.error.with_traceback(None)
        assert lookup.directory is not None
        return os.path.join(lookup.directory, filename)

    def resolve_or_none(self, reference: str) -> str | None:
        """Like resolve(), but an unresolvable reference yields None."""
        try:
            return self.resolve(reference)
        except PackageNotFoundError:
            return None

    def _lookup(self, fragment: str, reference: str) -> PackageLookup:
        import_path = fragment.rstrip("/")
        log.debug("resolver.lookup", import_path=import_path)
        try:
            directory = self._locator.locate(import_path)
        except PackageNotFoundError as e:
            log.debug("resolver.not_found", reference=reference, reason=e.message)
            return PackageLookup(error=PackageNotFoundError.for_reference(reference, e.message))
        return PackageLookup(directory=directory)
