"""Go coverage profile to LCOV conversion."""

from __future__ import annotations

from typing import BinaryIO

from gocov2lcov.config.models import Gocov2LcovConfig
from gocov2lcov.core.logging import get_logger
from gocov2lcov.coverage.aggregate import aggregate
from gocov2lcov.coverage.lcov import emit
from gocov2lcov.coverage.models import CoverageGrouping
from gocov2lcov.coverage.parser import RecordParser
from gocov2lcov.coverage.repo import RepositoryRootLocator
from gocov2lcov.coverage.resolve import GoListLocator, PackageLocator, PathResolver

log = get_logger(__name__)


def build_parser(
    config: Gocov2LcovConfig,
    locator: PackageLocator | None = None,
) -> RecordParser:
    """Create a parser with a fresh resolver cache and root locator."""
    if locator is None:
        locator = GoListLocator.from_config(config.resolver)
    return RecordParser(
        PathResolver(locator),
        RepositoryRootLocator(config.resolver.vcs_markers),
    )


def read_profile(
    source: BinaryIO,
    *,
    config: Gocov2LcovConfig | None = None,
    locator: PackageLocator | None = None,
) -> CoverageGrouping:
    """Parse and group a whole profile without writing anything."""
    config = config or Gocov2LcovConfig()
    parser = build_parser(config, locator)
    return aggregate(source, parser, max_line_bytes=config.profile.max_line_bytes)


def convert(
    source: BinaryIO,
    sink: BinaryIO,
    *,
    config: Gocov2LcovConfig | None = None,
    locator: PackageLocator | None = None,
) -> CoverageGrouping:
    """Convert a Go coverage profile read from source into LCOV written to sink.

    Args:
        source: Binary stream holding the profile.
        sink: Binary stream the report is written to.
        config: Run configuration. Defaults apply when omitted.
        locator: Package locator override. Defaults to ``go list -find``.

    Returns:
        The grouping that was emitted.

    Raises:
        ProfileReadError: If the profile cannot be read. Nothing is written.
    """
    grouping = read_profile(source, config=config, locator=locator)
    emit(grouping, sink)
    log.info("convert.done", files=len(grouping), lines_found=grouping.lines_found)
    return grouping
