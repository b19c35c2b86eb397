import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from keys_lsp.core.errors import UnknownPrefix

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ","


@dataclass(frozen=True)
class RegistryEntry:
    prefix: str
    location: Path


class DocumentRegistry:
    """Read-only mapping from key prefix to the JSON document it names."""

    def __init__(self, entries: dict[str, Path] | None = None) -> None:
        self._files: dict[str, Path] = dict(entries or {})

    @classmethod
    def from_config(cls, config: str, delimiter: str = DEFAULT_DELIMITER) -> "DocumentRegistry":
        """Build a registry from ``prefix:path`` pairs.

        Entries that do not split into exactly two parts are skipped.
        """
        files: dict[str, Path] = {}
        for raw_entry in config.split(delimiter):
            entry = raw_entry.strip()
            if not entry:
                continue
            parts = entry.split(":")
            if len(parts) != 2:
                logger.debug("Skipping malformed registry entry %r", entry)
                continue
            prefix, path = parts
            files[prefix] = Path(path).expanduser()
        return cls(files)

    def resolve_location(self, prefix: str) -> Path | None:
        return self._files.get(prefix)

    def require_location(self, prefix: str) -> Path:
        location = self.resolve_location(prefix)
        if location is None:
            raise UnknownPrefix(f"No document registered for prefix '{prefix}'")
        return location

    def prefixes(self) -> list[str]:
        return sorted(self._files)

    def __iter__(self) -> Iterator[RegistryEntry]:
        for prefix in self.prefixes():
            yield RegistryEntry(prefix=prefix, location=self._files[prefix])

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._files
