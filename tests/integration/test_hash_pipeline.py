# ABOUTME: Integration tests for the full hash pipeline: pool, digest, and report together.
# ABOUTME: Validates worker-count independence, mixed batches, and report consistency.

import hashlib
import time
from pathlib import Path

import pytest

from hashpool.core.digest import FileOpenError
from hashpool.core.pool import PoolConfig, process_files
from hashpool.core.report import summarize

ONE_MIB = 1024 * 1024


@pytest.fixture()
def mixed_batch(tmp_path: Path) -> tuple[list[Path], Path]:
    """Several real files of varied sizes plus one missing path."""
    files = []
    for i, size in enumerate([0, 1, 13, 65536, 65537, 300_000]):
        path = tmp_path / f"sample_{i}.bin"
        path.write_bytes(bytes((i + j) % 251 for j in range(size)))
        files.append(path)
    return files, tmp_path / "missing.bin"


class TestWorkerCountIndependence:
    """Digests do not depend on how many workers are used."""

    def test_pattern_file_same_digest_with_1_and_8_workers(self, pattern_file: Path) -> None:
        """A 1 MiB patterned file hashes identically with 1 and 8 workers."""
        single = process_files([pattern_file], PoolConfig.resolve(1))
        eight = process_files([pattern_file], PoolConfig.resolve(8))

        expected = hashlib.sha256(pattern_file.read_bytes()).hexdigest()
        assert single[0].digest == eight[0].digest == expected
        assert single[0].size == eight[0].size == ONE_MIB

    def test_batch_digests_match_across_worker_counts(self, mixed_batch) -> None:
        """Each file's digest is the same whatever the pool size."""
        files, _ = mixed_batch
        by_workers = {
            w: {r.path: r.digest for r in process_files(files, w)} for w in (1, 3, 8)
        }
        assert by_workers[1] == by_workers[3] == by_workers[8]


class TestMixedBatch:
    """A batch with successes and a failure, aggregated into a report."""

    def test_results_and_report(self, mixed_batch) -> None:
        """Every path appears once; only successful sizes reach the byte total."""
        files, missing = mixed_batch
        paths = [*files, missing]

        started = time.perf_counter()
        results = process_files(paths, 4)
        report = summarize(results, time.perf_counter() - started)

        assert sorted(r.path for r in results) == sorted(str(p) for p in paths)
        for path in files:
            result = next(r for r in results if r.path == str(path))
            data = path.read_bytes()
            assert result.digest == hashlib.sha256(data).hexdigest()
            assert result.size == len(data)

        failed = [r for r in results if not r.ok]
        assert len(failed) == 1
        assert isinstance(failed[0].error, FileOpenError)

        assert report.attempted == len(paths)
        assert report.succeeded == len(files)
        assert report.total_bytes == sum(p.stat().st_size for p in files)
        assert report.partial_failure
        assert report.elapsed > 0
        assert report.throughput is not None

    def test_file_deleted_before_processing(self, tmp_path: Path) -> None:
        """A file removed after validation but before hashing fails alone."""
        keep = tmp_path / "keep.txt"
        doomed = tmp_path / "doomed.txt"
        keep.write_text("keep")
        doomed.write_text("doomed")
        doomed.unlink()

        results = process_files([keep, doomed], 2)
        report = summarize(results, 1.0)

        assert report.succeeded == 1
        assert report.total_bytes == 4
