"""Tests for LCOV emission."""

from __future__ import annotations

import io

from gocov2lcov.coverage.lcov import emit, render
from gocov2lcov.coverage.models import CoverageBlock, CoverageGrouping


def _grouping(*entries: tuple[str, CoverageBlock]) -> CoverageGrouping:
    grouping = CoverageGrouping()
    for path, block in entries:
        grouping.add(path, block)
    return grouping


class _RecordingSink(io.BytesIO):
    """BytesIO that counts write and flush calls."""

    def __init__(self) -> None:
        super().__init__()
        self.writes = 0
        self.flushes = 0

    def write(self, data: bytes) -> int:  # type: ignore[override]
        self.writes += 1
        return super().write(data)

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


class TestRender:
    """render() tests."""

    def test_single_file_record(self) -> None:
        grouping = _grouping(
            ("pkg/file.go", CoverageBlock(3, 10, 5, 2, 2, 1)),
            ("pkg/file.go", CoverageBlock(7, 1, 7, 1, 1, 0)),
        )

        assert render(grouping) == (
            "TN:\n"
            "SF:pkg/file.go\n"
            "DA:3,1\n"
            "DA:4,1\n"
            "DA:5,1\n"
            "DA:7,0\n"
            "LF:4\n"
            "LH:3\n"
            "end_of_record\n"
        )

    def test_block_line_count_and_hits(self) -> None:
        grouping = _grouping(("a.go", CoverageBlock(10, 1, 14, 3, 4, 9)))

        lines = render(grouping).splitlines()
        da = [line for line in lines if line.startswith("DA:")]

        assert da == [f"DA:{n},9" for n in range(10, 15)]

    def test_overlapping_blocks_are_double_counted(self) -> None:
        grouping = _grouping(
            ("a.go", CoverageBlock(1, 1, 3, 1, 2, 1)),
            ("a.go", CoverageBlock(2, 1, 4, 1, 2, 0)),
        )

        lines = render(grouping).splitlines()

        assert [line for line in lines if line.startswith("DA:")] == [
            "DA:1,1",
            "DA:2,1",
            "DA:3,1",
            "DA:2,0",
            "DA:3,0",
            "DA:4,0",
        ]
        assert "LF:6" in lines
        assert "LH:3" in lines

    def test_inverted_range_emits_no_lines(self) -> None:
        grouping = _grouping(("a.go", CoverageBlock(5, 1, 4, 1, 1, 1)))

        assert render(grouping) == "TN:\nSF:a.go\nLF:0\nLH:0\nend_of_record\n"

    def test_one_record_per_file_in_grouping_order(self) -> None:
        grouping = _grouping(
            ("b.go", CoverageBlock(1, 1, 1, 2, 1, 1)),
            ("a.go", CoverageBlock(1, 1, 1, 2, 1, 1)),
        )

        lines = render(grouping).splitlines()

        assert [line for line in lines if line.startswith("SF:")] == ["SF:b.go", "SF:a.go"]
        assert lines.count("end_of_record") == 2
        assert lines.count("TN:") == 2

    def test_no_function_or_branch_sections(self) -> None:
        grouping = _grouping(("a.go", CoverageBlock(1, 1, 2, 2, 1, 1)))

        text = render(grouping)

        for prefix in ("FN:", "FNDA:", "FNF:", "FNH:", "BRDA:", "BRF:", "BRH:"):
            assert prefix not in text

    def test_empty_grouping(self) -> None:
        assert render(CoverageGrouping()) == ""


class TestEmit:
    """emit() tests."""

    def test_writes_once_and_flushes_once(self) -> None:
        grouping = _grouping(
            ("a.go", CoverageBlock(1, 1, 2, 2, 1, 1)),
            ("b.go", CoverageBlock(1, 1, 2, 2, 1, 0)),
        )
        sink = _RecordingSink()

        emit(grouping, sink)

        assert sink.writes == 1
        assert sink.flushes == 1
        assert sink.getvalue().decode() == render(grouping)

    def test_surrogate_escaped_paths_round_trip(self) -> None:
        path = b"pkg/\xff.go".decode("utf-8", "surrogateescape")
        sink = io.BytesIO()

        emit(_grouping((path, CoverageBlock(1, 1, 1, 2, 1, 1))), sink)

        assert b"SF:pkg/\xff.go\n" in sink.getvalue()
