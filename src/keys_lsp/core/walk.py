"""Segment matching shared by the value and syntax tree resolvers."""

from collections.abc import Sequence
from typing import Protocol, TypeVar

from keys_lsp.core.errors import PathNotResolved
from keys_lsp.models import Position

NodeT = TypeVar("NodeT")


class TreeNavigator(Protocol[NodeT]):
    def has_object_children(self, node: NodeT) -> bool: ...

    def lookup_child_by_key(self, node: NodeT, key: str) -> NodeT | None: ...


class PositionedNavigator(TreeNavigator[NodeT], Protocol[NodeT]):
    def position_of(self, node: NodeT) -> Position: ...


def walk_path(navigator: TreeNavigator[NodeT], root: NodeT, segments: Sequence[str]) -> NodeT:
    """Follow ``segments`` from ``root`` and return the node matched by the last one.

    Every segment must match; an empty segment list returns ``root``.
    """
    node = root
    for depth, segment in enumerate(segments):
        if not navigator.has_object_children(node):
            consumed = ".".join(segments[:depth]) or "<root>"
            raise PathNotResolved(f"'{consumed}' is not an object, cannot look up '{segment}'")
        child = navigator.lookup_child_by_key(node, segment)
        if child is None:
            raise PathNotResolved(f"Key '{segment}' not found at depth {depth}")
        node = child
    return node
