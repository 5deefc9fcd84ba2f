# ABOUTME: Aggregation of per-file hashing results into a batch Report.
# ABOUTME: Counts successes and failures, totals bytes, and derives throughput.

from collections.abc import Iterable
from dataclasses import dataclass

from hashpool.core.digest import FileResult


@dataclass(frozen=True)
class Report:
    """Summary of one batch run."""

    attempted: int = 0
    succeeded: int = 0
    total_bytes: int = 0
    elapsed: float = 0.0

    @property
    def failed(self) -> int:
        """Number of files that could not be hashed."""
        return self.attempted - self.succeeded

    @property
    def partial_failure(self) -> bool:
        """True when at least one attempted file failed."""
        return self.succeeded < self.attempted

    @property
    def throughput(self) -> float | None:
        """Successful bytes per second, or None when it would be meaningless."""
        if self.elapsed > 0 and self.total_bytes > 0:
            return self.total_bytes / self.elapsed
        return None


class ReportBuilder:
    """Accumulates results one at a time as they arrive from the pool."""

    def __init__(self) -> None:
        self.attempted = 0
        self.succeeded = 0
        self.total_bytes = 0

    def add(self, result: FileResult) -> None:
        self.attempted += 1
        if result.ok:
            self.succeeded += 1
            self.total_bytes += result.size or 0

    def build(self, elapsed: float) -> Report:
        return Report(
            attempted=self.attempted,
            succeeded=self.succeeded,
            total_bytes=self.total_bytes,
            elapsed=elapsed,
        )


def summarize(results: Iterable[FileResult], elapsed: float) -> Report:
    """Aggregate results into a Report.

    Args:
        results: FileResults in any order.
        elapsed: Wall-clock seconds for the whole batch, measured by the caller.

    Returns:
        A Report. Failed results count as attempted but add no bytes.
    """
    builder = ReportBuilder()
    for result in results:
        builder.add(result)
    return builder.build(elapsed)
