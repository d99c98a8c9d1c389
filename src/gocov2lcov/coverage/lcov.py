"""LCOV tracefile emitter.

Each file becomes one record:
- TN:                       (test name, always empty)
- SF:<source file path>
- DA:<line>,<hit count>     (one per expanded block line, in block order)
- LF:<lines found>
- LH:<lines hit>
- end_of_record

Only line data is written. The function (FN, FNDA, FNF, FNH) and branch
(BRDA, BRF, BRH) sections are left out.
"""

from __future__ import annotations

import io
from typing import BinaryIO

from gocov2lcov.coverage.models import CoverageGrouping, FileRecord


def _write_record(record: FileRecord, out: io.StringIO) -> None:
    out.write("TN:\n")
    out.write(f"SF:{record.path}\n")

    found = 0
    hit = 0
    for line, hits in record.line_data():
        found += 1
        if hits > 0:
            hit += 1
        out.write(f"DA:{line},{hits}\n")

    out.write(f"LF:{found}\n")
    out.write(f"LH:{hit}\n")
    out.write("end_of_record\n")


def render(grouping: CoverageGrouping) -> str:
    """Render the whole grouping as LCOV text."""
    out = io.StringIO()
    for record in grouping.records():
        _write_record(record, out)
    return out.getvalue()


def emit(grouping: CoverageGrouping, sink: BinaryIO) -> None:
    """Write the grouping to sink as LCOV.

    The report is built in memory first and handed to the sink in a single
    write followed by a flush.
    """
    sink.write(render(grouping).encode("utf-8", "surrogateescape"))
    sink.flush()
