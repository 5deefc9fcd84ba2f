# ABOUTME: Unit tests for reading path lists and filtering missing paths.
# ABOUTME: Validates comment and blank-line handling, ordering, and error reporting.

from pathlib import Path

import pytest

from hashpool.core.filelist import FileListError, read_file_list, split_existing


class TestReadFileList:
    """Tests for read_file_list."""

    def test_skips_comments_and_blanks(self, tmp_path: Path) -> None:
        """Comment lines and blank lines are ignored; order is kept."""
        listing = tmp_path / "files.txt"
        listing.write_text(
            "# This is a comment\n"
            "/tmp/test1.txt\n"
            "/tmp/test2.txt\n"
            "\n"
            "# Another comment\n"
            "/tmp/test3.txt"
        )
        assert read_file_list(listing) == ["/tmp/test1.txt", "/tmp/test2.txt", "/tmp/test3.txt"]

    def test_strips_whitespace(self, tmp_path: Path) -> None:
        """Surrounding whitespace and CRLF endings are stripped."""
        listing = tmp_path / "files.txt"
        listing.write_bytes(b"  a.bin  \r\n\t# indented comment\r\n   \r\nb.bin\r\n")
        assert read_file_list(listing) == ["a.bin", "b.bin"]

    def test_empty_list(self, tmp_path: Path) -> None:
        """An empty list file yields no paths."""
        listing = tmp_path / "files.txt"
        listing.write_text("")
        assert read_file_list(listing) == []

    def test_missing_list_raises(self, tmp_path: Path) -> None:
        """A list file that cannot be opened raises FileListError."""
        with pytest.raises(FileListError, match="failed to open file list"):
            read_file_list(tmp_path / "absent.txt")

    def test_undecodable_list_raises(self, tmp_path: Path) -> None:
        """A list that is not valid UTF-8 raises FileListError."""
        listing = tmp_path / "files.txt"
        listing.write_bytes(b"ok.txt\n\xff\xfe\xfd\n")
        with pytest.raises(FileListError, match="error reading file list"):
            read_file_list(listing)


class TestSplitExisting:
    """Tests for split_existing."""

    def test_partitions_in_order(self, tmp_path: Path) -> None:
        """Existing and missing paths are separated, each keeping input order."""
        a = tmp_path / "a"
        b = tmp_path / "b"
        a.write_text("a")
        b.write_text("b")
        gone = str(tmp_path / "gone")

        existing, missing = split_existing([str(b), gone, str(a)])

        assert existing == [str(b), str(a)]
        assert missing == [gone]
