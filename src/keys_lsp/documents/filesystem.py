from pathlib import Path
from urllib.parse import unquote, urlparse

from keys_lsp.core.errors import DocumentUnreadable


def uri_to_path(uri: str) -> Path:
    parsed = urlparse(uri)
    if parsed.scheme and parsed.scheme != "file":
        raise DocumentUnreadable(f"Unsupported URI scheme '{parsed.scheme}' in {uri}")
    if not parsed.scheme:
        return Path(uri)
    return Path(unquote(parsed.path))


class FilesystemDocuments:
    """Reads document lines straight from disk.

    Implements the ``DocumentSource`` protocol.
    """

    def read_line(self, uri: str, line: int) -> str:
        path = uri_to_path(uri)
        try:
            with path.open(encoding="utf-8") as handle:
                for number, text in enumerate(handle):
                    if number == line:
                        return text.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentUnreadable(f"Cannot read {path}: {exc}") from exc
        raise DocumentUnreadable(f"Line {line} does not exist in {path}")
