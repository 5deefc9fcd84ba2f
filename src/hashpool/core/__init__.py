# ABOUTME: Public API for the hashpool concurrent hashing core.
# ABOUTME: Exports the digest computer, worker pool, and report aggregation.

from hashpool.core.digest import (
    BUFFER_SIZE,
    DigestError,
    FileOpenError,
    FileReadError,
    FileResult,
    SizeQueryError,
    compute_file_result,
    hash_stream,
)
from hashpool.core.pool import DEFAULT_WORKERS, FileProcessor, PoolConfig, process_files
from hashpool.core.report import Report, ReportBuilder, summarize

__all__ = [
    "BUFFER_SIZE",
    "DEFAULT_WORKERS",
    "DigestError",
    "FileOpenError",
    "FileProcessor",
    "FileReadError",
    "FileResult",
    "PoolConfig",
    "Report",
    "ReportBuilder",
    "SizeQueryError",
    "compute_file_result",
    "hash_stream",
    "process_files",
    "summarize",
]
