"""Human-readable coverage summaries.

Counts follow the emitted LF/LH values, so lines covered by several blocks
are counted once per block.
"""

from typing import Any

from gocov2lcov.coverage.models import CoverageGrouping


def compute_file_stats(grouping: CoverageGrouping) -> list[dict[str, Any]]:
    """Per-file found/hit counts, sorted by path."""
    stats = []
    for record in sorted(grouping.records(), key=lambda r: r.path):
        found = record.lines_found
        hit = record.lines_hit
        percent = (hit / found * 100.0) if found > 0 else 100.0
        stats.append(
            {
                "path": record.path,
                "lines_found": found,
                "lines_hit": hit,
                "coverage_percent": round(percent, 2),
            }
        )
    return stats


def build_text_summary(grouping: CoverageGrouping) -> str:
    """Build a one-line summary for display on stderr."""
    found = grouping.lines_found
    if found == 0:
        return "No coverage data"

    hit = grouping.lines_hit
    percent = hit / found * 100.0
    return f"Coverage: {percent:.1f}% ({hit}/{found} lines)"
