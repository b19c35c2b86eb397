import json
import logging
from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path

from tree_sitter import Language, Node, Parser, Tree, TreeCursor
from tree_sitter_language_pack import get_language

from keys_lsp.core.errors import (
    DocumentMalformed,
    DocumentUnreadable,
    KeyPathError,
    ParserUnavailable,
    PathNotResolved,
)
from keys_lsp.core.walk import PositionedNavigator, walk_path
from keys_lsp.models import Position

logger = logging.getLogger(__name__)

_LANGUAGE = "json"


def goto_next_named_sibling(cursor: TreeCursor) -> bool:
    while cursor.goto_next_sibling():
        if cursor.node is not None and cursor.node.is_named:
            return True
    return False


def goto_first_named_child(cursor: TreeCursor) -> bool:
    if not cursor.goto_first_child():
        return False
    if cursor.node is not None and cursor.node.is_named:
        return True
    return goto_next_named_sibling(cursor)


def string_value(node: Node) -> str:
    """Decode a ``string`` node the way a JSON parser would, escapes included."""
    raw = (node.text or b"").decode("utf-8", errors="replace")
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw[1:-1]


def _object_of(node: Node) -> Node | None:
    if node.type == "object":
        return node
    if node.type == "pair":
        value = node.child_by_field_name("value")
        if value is not None and value.type == "object":
            return value
    return None


class SyntaxNavigator:
    """Walks ``object``/``pair`` nodes of a tree-sitter JSON tree.

    The walk starts on the top-level ``object`` and every matched child is the
    ``pair`` node, so descending continues through the pair's value.
    """

    def __init__(self, source: bytes) -> None:
        self._source = source

    def has_object_children(self, node: Node) -> bool:
        return _object_of(node) is not None

    def lookup_child_by_key(self, node: Node, key: str) -> Node | None:
        container = _object_of(node)
        if container is None:
            return None
        cursor = container.walk()
        if not goto_first_named_child(cursor):
            return None
        while True:
            candidate = cursor.node
            if candidate is not None and candidate.type == "pair":
                pair_key = candidate.child_by_field_name("key")
                if pair_key is not None and string_value(pair_key) == key:
                    return candidate
            if not goto_next_named_sibling(cursor):
                return None

    def position_of(self, node: Node) -> Position:
        target = node.child_by_field_name("key") if node.type == "pair" else node
        if target is None:
            target = node
        row, byte_column = target.start_point[0], target.start_point[1]
        line_start = target.start_byte - byte_column
        column = len(self._source[line_start : target.start_byte].decode("utf-8", errors="replace"))
        return Position(line=row, column=column)


@lru_cache(maxsize=1)
def json_language() -> Language:
    return get_language(_LANGUAGE)


def parse_document(source: bytes) -> Tree:
    try:
        language = json_language()
    except Exception as exc:
        raise ParserUnavailable(f"Cannot load the {_LANGUAGE} grammar: {exc}") from exc
    return Parser(language).parse(source)


def load_tree(location: Path) -> tuple[bytes, Tree]:
    try:
        source = location.read_bytes()
    except OSError as exc:
        raise DocumentUnreadable(f"Cannot read {location}: {exc}") from exc
    tree = parse_document(source)
    if tree.root_node.has_error:
        raise DocumentMalformed(f"Invalid JSON in {location}")
    return source, tree


def root_object(tree: Tree) -> Node:
    """Return the top-level object, or raise if the document does not start with one."""
    cursor = tree.walk()  # document
    if not goto_first_named_child(cursor):
        raise PathNotResolved("Document is empty")
    while cursor.node is not None and cursor.node.type == "comment":
        if not goto_next_named_sibling(cursor):
            raise PathNotResolved("Document is empty")
    root = cursor.node
    if root is None or not cursor.goto_first_child() or cursor.node is None or cursor.node.type != "{":
        raise PathNotResolved("Document root is not an object")
    return root


def find_definition(location: Path, segments: Sequence[str]) -> Position:
    if not segments:
        raise PathNotResolved("An empty path has no key to point to")
    source, tree = load_tree(location)
    navigator: PositionedNavigator[Node] = SyntaxNavigator(source)
    pair = walk_path(navigator, root_object(tree), segments)
    return navigator.position_of(pair)


def resolve_definition(location: Path, segments: Sequence[str]) -> Position | None:
    try:
        return find_definition(location, segments)
    except KeyPathError as exc:
        logger.debug("Definition lookup for %s in %s failed: %s", list(segments), location, exc)
        return None
