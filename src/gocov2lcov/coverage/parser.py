"""Go coverage profile record parser.

Go test produces coverage profiles with format:
mode: set|count|atomic
<package>/<file>:<startline>.<startcol>,<endline>.<endcol> <numstmt> <count>

Example:
mode: set
github.com/user/pkg/main.go:10.2,12.16 3 1
github.com/user/pkg/main.go:15.2,20.16 5 0

Lines that do not match the grammar are not errors; they are skipped.
Numeric fields that are not integers are read as 0.
"""

import re

from gocov2lcov.coverage.models import CoverageBlock
from gocov2lcov.coverage.repo import RepositoryRootLocator
from gocov2lcov.coverage.resolve import PathResolver

MODE_PREFIX = "mode:"

# Same shape strconv.Atoi accepts: optional sign, ASCII digits only.
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    if _INT_RE.fullmatch(text) is None:
        return 0
    return int(text)


def _split_exact(text: str, sep: str, count: int) -> list[str] | None:
    parts = text.split(sep)
    return parts if len(parts) == count else None


def parse_block(line: str) -> tuple[str, CoverageBlock] | None:
    """Parse one profile line into (file reference, block).

    No path resolution happens here.

    Returns:
        None for the mode header and for any line with the wrong number of
        segments at any split step.
    """
    if line.startswith(MODE_PREFIX):
        return None

    path_parts = _split_exact(line, ":", 2)
    if path_parts is None:
        return None
    reference, rest = path_parts

    fields = _split_exact(rest, " ", 3)
    if fields is None:
        return None
    range_part, statements, hits = fields

    sections = _split_exact(range_part, ",", 2)
    if sections is None:
        return None

    start = _split_exact(sections[0], ".", 2)
    end = _split_exact(sections[1], ".", 2)
    if start is None or end is None:
        return None

    block = CoverageBlock(
        start_line=_atoi(start[0]),
        start_column=_atoi(start[1]),
        end_line=_atoi(end[0]),
        end_column=_atoi(end[1]),
        statements=_atoi(statements),
        hits=_atoi(hits),
    )
    return reference, block


class RecordParser:
    """Parses profile lines and resolves their files to report paths."""

    def __init__(self, resolver: PathResolver, roots: RepositoryRootLocator) -> None:
        self._resolver = resolver
        self._roots = roots

    def parse_line(self, line: str) -> tuple[str, CoverageBlock] | None:
        """Parse a line and resolve its file.

        Returns:
            (report path, block), where the report path is relative to the
            repository root when one encloses the file. None when the line is
            malformed, is the mode header, or names an unresolvable package.
        """
        parsed = parse_block(line)
        if parsed is None:
            return None
        reference, block = parsed

        resolved = self._resolver.resolve_or_none(reference)
        if resolved is None:
            return None
        return self._roots.shorten(resolved), block
