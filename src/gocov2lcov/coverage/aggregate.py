"""Coverage aggregation: scan a profile stream and group blocks by file."""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO

from gocov2lcov.coverage.models import CoverageGrouping
from gocov2lcov.coverage.parser import RecordParser
from gocov2lcov.core.errors import ProfileReadError
from gocov2lcov.core.logging import get_logger

log = get_logger(__name__)

DEFAULT_MAX_LINE_BYTES = 64 * 1024


def iter_lines(stream: BinaryIO, *, max_line_bytes: int = DEFAULT_MAX_LINE_BYTES) -> Iterator[str]:
    """Yield newline-delimited lines from a binary stream.

    The terminator and one trailing carriage return are removed. The last
    line does not need a terminator. Undecodable bytes are carried through
    as surrogate escapes.

    Raises:
        ProfileReadError: On a read failure or a line longer than max_line_bytes.
    """
    line_number = 0
    while True:
        try:
            chunk = stream.readline(max_line_bytes + 2)
        except OSError as e:
            raise ProfileReadError.read_failed(str(e)) from e
        if not chunk:
            return

        line_number += 1
        body = chunk.removesuffix(b"\n").removesuffix(b"\r")
        if len(body) > max_line_bytes:
            raise ProfileReadError.line_too_long(line_number, max_line_bytes)
        yield body.decode("utf-8", "surrogateescape")


def aggregate(
    stream: BinaryIO,
    parser: RecordParser,
    *,
    max_line_bytes: int = DEFAULT_MAX_LINE_BYTES,
) -> CoverageGrouping:
    """Parse every line of a Go coverage profile and group blocks by file.

    Lines the parser rejects are dropped without being counted or reported.

    Raises:
        ProfileReadError: If the stream cannot be read. Nothing is returned
            in that case.
    """
    grouping = CoverageGrouping()
    for line_number, line in enumerate(iter_lines(stream, max_line_bytes=max_line_bytes), 1):
        parsed = parser.parse_line(line)
        if parsed is None:
            log.debug("profile.line_skipped", line=line_number)
            continue
        path, block = parsed
        grouping.add(path, block)

    log.debug("profile.aggregated", files=len(grouping))
    return grouping
