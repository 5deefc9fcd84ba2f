# ABOUTME: Streaming SHA-256 digest of a single file into a FileResult.
# ABOUTME: Reads in fixed 64KB chunks so memory use is independent of file size.

import hashlib
import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)

BUFFER_SIZE = 64 * 1024  # 64 KB
_EMPTY_READ_DELAY = 0.001  # seconds to wait when a non-blocking read has no data


class DigestError(Exception):
    """Why a file could not be hashed.

    Carries the offending path and the underlying OS error (also chained
    as ``__cause__``).
    """

    reason = "failed to process file"

    def __init__(self, path: str, cause: BaseException | None = None) -> None:
        self.path = path
        self.cause = cause
        message = self.reason if cause is None else f"{self.reason}: {cause}"
        super().__init__(message)


class FileOpenError(DigestError):
    """The file could not be opened (missing, permission denied, directory)."""

    reason = "failed to open file"


class SizeQueryError(DigestError):
    """The size of an opened file could not be determined."""

    reason = "failed to get file stats"


class FileReadError(DigestError):
    """An I/O error interrupted reading the file."""

    reason = "failed to read file"


@dataclass(frozen=True)
class FileResult:
    """Outcome of hashing one file.

    Exactly one of ``digest`` and ``error`` is set. ``size`` accompanies a
    digest and may be 0 for an empty file.
    """

    path: str
    duration: float
    digest: str | None = None
    size: int | None = None
    error: DigestError | None = None

    def __post_init__(self) -> None:
        if (self.digest is None) == (self.error is None):
            raise ValueError("FileResult needs exactly one of digest or error")
        if self.digest is not None and self.size is None:
            raise ValueError("A successful FileResult must carry a size")

    @property
    def ok(self) -> bool:
        """True when the file was hashed successfully."""
        return self.error is None

    @property
    def name(self) -> str:
        """Basename of the hashed path."""
        return os.path.basename(self.path)


def _open_source(path: str) -> BinaryIO:
    # Unbuffered: chunks land directly in our own reusable buffer.
    return open(path, "rb", buffering=0)


def _file_size(handle: BinaryIO) -> int:
    return os.fstat(handle.fileno()).st_size


def hash_stream(stream: BinaryIO, buffer_size: int = BUFFER_SIZE) -> str:
    """Compute the SHA-256 hex digest of a binary stream.

    The stream is read with ``readinto`` into a single preallocated buffer
    that is reused for every chunk. A ``None`` read (no data available yet
    on a non-blocking source) waits briefly and retries; a zero-length read ends
    the stream.

    Args:
        stream: Readable binary stream supporting ``readinto``.
        buffer_size: Chunk size in bytes.

    Returns:
        Lowercase hex digest string (64 characters).

    Raises:
        OSError: If a read fails part way through.
    """
    hasher = hashlib.sha256()
    buffer = bytearray(buffer_size)
    view = memoryview(buffer)
    while True:
        count = stream.readinto(buffer)
        if count is None:
            time.sleep(_EMPTY_READ_DELAY)
            continue
        if count == 0:
            break
        hasher.update(view[:count])
    return hasher.hexdigest()


def compute_file_result(path: str | Path) -> FileResult:
    """Hash a file and report digest, size, and timing as a FileResult.

    Per-file I/O failures never raise; they are captured in the result's
    ``error`` as a FileOpenError, SizeQueryError, or FileReadError. The file
    is always closed before this function returns.

    Args:
        path: Path to the file to hash.

    Returns:
        A FileResult. ``size`` is the size reported by the filesystem when
        the file was opened, and ``duration`` spans open to finalization.
    """
    path = os.fspath(path)
    started = time.perf_counter()

    try:
        source = _open_source(path)
    except OSError as exc:
        return _failed(path, FileOpenError(path, exc), started)

    with source:
        try:
            size = _file_size(source)
        except OSError as exc:
            return _failed(path, SizeQueryError(path, exc), started)

        try:
            digest = hash_stream(source)
        except OSError as exc:
            return _failed(path, FileReadError(path, exc), started)

    return FileResult(
        path=path,
        digest=digest,
        size=size,
        duration=time.perf_counter() - started,
    )


def _failed(path: str, error: DigestError, started: float) -> FileResult:
    """Build a failed FileResult and log the failure."""
    error.__cause__ = error.cause
    logger.warning("%s for %s: %s", error.reason, path, error.cause)
    return FileResult(path=path, error=error, duration=time.perf_counter() - started)
