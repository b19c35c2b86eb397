"""Tests for the filesystem document source."""

from pathlib import Path

import pytest

from keys_lsp.core.errors import DocumentUnreadable
from keys_lsp.documents.filesystem import FilesystemDocuments, uri_to_path


class TestUriToPath:
    def test_file_uri(self) -> None:
        assert uri_to_path("file:///tmp/a%20b.ts") == Path("/tmp/a b.ts")

    def test_plain_path(self) -> None:
        assert uri_to_path("/tmp/a.ts") == Path("/tmp/a.ts")

    def test_rejects_other_schemes(self) -> None:
        with pytest.raises(DocumentUnreadable):
            uri_to_path("untitled:Untitled-1")


class TestFilesystemDocuments:
    def test_reads_requested_line_without_newline(self, tmp_path: Path) -> None:
        path = tmp_path / "app.ts"
        path.write_text('first\r\nt("tr:greeting")\nlast\n', encoding="utf-8")
        assert FilesystemDocuments().read_line(path.as_uri(), 1) == 't("tr:greeting")'

    def test_missing_line(self, tmp_path: Path) -> None:
        path = tmp_path / "app.ts"
        path.write_text("only\n", encoding="utf-8")
        with pytest.raises(DocumentUnreadable, match="Line 3"):
            FilesystemDocuments().read_line(path.as_uri(), 3)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentUnreadable):
            FilesystemDocuments().read_line((tmp_path / "nope.ts").as_uri(), 0)
