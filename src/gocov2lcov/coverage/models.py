"""Coverage data model.

Blocks are kept exactly as they appear in the profile: one block per
instrumentation site, never merged. A source line covered by two blocks is
expanded twice.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class CoverageBlock:
    """A contiguous source range covered by one instrumentation site.

    Positions are 1-based. Inverted ranges are not rejected; they expand to
    no lines.
    """

    start_line: int
    start_column: int
    end_line: int
    end_column: int
    statements: int
    hits: int

    @property
    def line_numbers(self) -> range:
        """Every line number from start_line through end_line inclusive."""
        return range(self.start_line, self.end_line + 1)

    @property
    def covered(self) -> bool:
        return self.hits > 0


@dataclass(frozen=True, slots=True)
class FileRecord:
    """Per-file view over the blocks of one resolved path."""

    path: str
    blocks: tuple[CoverageBlock, ...]

    def line_data(self) -> Iterator[tuple[int, int]]:
        """Yield (line, hits) for every expanded line, in block order."""
        for block in self.blocks:
            for line in block.line_numbers:
                yield line, block.hits

    @property
    def lines_found(self) -> int:
        """Number of expanded lines, counting repeats."""
        return sum(len(b.line_numbers) for b in self.blocks)

    @property
    def lines_hit(self) -> int:
        """Number of expanded lines whose block was executed, counting repeats."""
        return sum(len(b.line_numbers) for b in self.blocks if b.covered)


@dataclass(slots=True)
class CoverageGrouping:
    """Blocks grouped by resolved file path, in parse order.

    This is the only thing the aggregator hands to the emitter.
    """

    files: dict[str, list[CoverageBlock]] = field(default_factory=dict)

    def add(self, path: str, block: CoverageBlock) -> None:
        self.files.setdefault(path, []).append(block)

    def records(self) -> Iterator[FileRecord]:
        for path, blocks in self.files.items():
            yield FileRecord(path=path, blocks=tuple(blocks))

    def __len__(self) -> int:
        return len(self.files)

    @property
    def lines_found(self) -> int:
        return sum(r.lines_found for r in self.records())

    @property
    def lines_hit(self) -> int:
        return sum(r.lines_hit for r in self.records())
