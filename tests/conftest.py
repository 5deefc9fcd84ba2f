# ABOUTME: Shared pytest fixtures for hashpool tests.
# ABOUTME: Provides a known-content file and a large patterned file for hashing.

from pathlib import Path

import pytest

HELLO = b"Hello, World!"
PATTERN = bytes(range(256))
ONE_MIB = 1024 * 1024


@pytest.fixture()
def hello_file(tmp_path: Path) -> Path:
    """A 13-byte file containing 'Hello, World!'."""
    path = tmp_path / "hello.txt"
    path.write_bytes(HELLO)
    return path


@pytest.fixture()
def pattern_file(tmp_path: Path) -> Path:
    """A 1 MiB file filled with a repeating 256-byte pattern."""
    path = tmp_path / "pattern.bin"
    path.write_bytes(PATTERN * (ONE_MIB // len(PATTERN)))
    return path
