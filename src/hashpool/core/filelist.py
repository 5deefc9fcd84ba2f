# ABOUTME: Input helpers that turn list files and raw arguments into hashable paths.
# ABOUTME: Parses newline-delimited path lists and drops paths that do not exist.

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class FileListError(Exception):
    """Raised when a path list file cannot be opened or read."""


def read_file_list(list_path: str | Path) -> list[str]:
    """Read file paths from a text file, one per line.

    Surrounding whitespace is stripped. Blank lines and lines starting
    with ``#`` are skipped. Order is preserved.

    Args:
        list_path: Path to the list file (UTF-8).

    Returns:
        The listed paths.

    Raises:
        FileListError: If the list cannot be opened or read.
    """
    try:
        handle = open(list_path, encoding="utf-8")
    except OSError as exc:
        raise FileListError(f"failed to open file list: {exc}") from exc

    paths: list[str] = []
    with handle:
        try:
            for line in handle:
                entry = line.strip()
                if entry and not entry.startswith("#"):
                    paths.append(entry)
        except (OSError, UnicodeDecodeError) as exc:
            raise FileListError(f"error reading file list: {exc}") from exc

    logger.debug("Read %d paths from %s", len(paths), list_path)
    return paths


def split_existing(paths: list[str]) -> tuple[list[str], list[str]]:
    """Partition paths into those that exist and those that do not."""
    existing: list[str] = []
    missing: list[str] = []
    for path in paths:
        if os.path.exists(path):
            existing.append(path)
        else:
            logger.debug("Skipping missing path %s", path)
            missing.append(path)
    return existing, missing
