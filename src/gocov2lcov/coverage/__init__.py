"""Go coverage profile parsing, path resolution, and LCOV output.

Usage:
    from gocov2lcov.coverage import convert

    with open("cover.out", "rb") as src, open("lcov.info", "wb") as dst:
        convert(src, dst)

Pipeline:
    - parser: one profile line -> (file reference, CoverageBlock)
    - resolve: file reference -> on-disk path (memoized per package)
    - repo: on-disk path -> repository-relative path
    - aggregate: profile stream -> CoverageGrouping
    - lcov: CoverageGrouping -> LCOV tracefile
"""

from gocov2lcov.coverage.aggregate import aggregate, iter_lines
from gocov2lcov.coverage.convert import build_parser, convert, read_profile
from gocov2lcov.coverage.lcov import emit, render
from gocov2lcov.coverage.models import CoverageBlock, CoverageGrouping, FileRecord
from gocov2lcov.coverage.parser import RecordParser, parse_block
from gocov2lcov.coverage.repo import (
    RepositoryRootLocator,
    find_repository_root,
    shorten_path,
)
from gocov2lcov.coverage.report import build_text_summary, compute_file_stats
from gocov2lcov.coverage.resolve import (
    GoListLocator,
    PackageLocator,
    PathResolver,
    split_reference,
)

__all__ = [
    # Models
    "CoverageBlock",
    "CoverageGrouping",
    "FileRecord",
    # Parsing
    "RecordParser",
    "parse_block",
    # Resolution
    "GoListLocator",
    "PackageLocator",
    "PathResolver",
    "RepositoryRootLocator",
    "find_repository_root",
    "shorten_path",
    "split_reference",
    # Pipeline
    "aggregate",
    "iter_lines",
    "emit",
    "render",
    "build_parser",
    "convert",
    "read_profile",
    # Report
    "build_text_summary",
    "compute_file_stats",
]
