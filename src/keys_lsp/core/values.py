import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from keys_lsp.core.errors import DocumentMalformed, DocumentUnreadable, KeyPathError, PathNotResolved
from keys_lsp.core.walk import walk_path

logger = logging.getLogger(__name__)


class ValueNavigator:
    """Walks the plain ``dict``/``list`` tree produced by ``json.loads``."""

    def has_object_children(self, node: Any) -> bool:
        return isinstance(node, dict)

    def lookup_child_by_key(self, node: Any, key: str) -> Any | None:
        return node.get(key)


def load_json(location: Path) -> Any:
    try:
        text = location.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentUnreadable(f"Cannot read {location}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentMalformed(f"Invalid JSON in {location}: {exc}") from exc


def display_value(value: Any) -> str:
    """Render a resolved value for display: strings verbatim, objects as canonical JSON."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    raise PathNotResolved(f"Value of type {type(value).__name__} has no display form")


def find_value(location: Path, segments: Sequence[str]) -> str:
    document = load_json(location)
    if not segments and not isinstance(document, dict):
        raise PathNotResolved("Document root is not an object")
    value = walk_path(ValueNavigator(), document, segments)
    return display_value(value)


def resolve_value(location: Path, segments: Sequence[str]) -> str | None:
    try:
        return find_value(location, segments)
    except KeyPathError as exc:
        logger.debug("Value lookup for %s in %s failed: %s", list(segments), location, exc)
        return None
