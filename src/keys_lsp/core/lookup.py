"""Cursor position to resolved key: the entry points used by the server and the CLI."""

import logging
from pathlib import Path

from keys_lsp.core.errors import KeyPathError
from keys_lsp.core.keypath import parse_key_path
from keys_lsp.core.ports.documents import DocumentSource
from keys_lsp.core.registry import DocumentRegistry
from keys_lsp.core.syntax import find_definition
from keys_lsp.core.tokens import extract_token
from keys_lsp.core.values import find_value
from keys_lsp.models import Definition, PathSpec

logger = logging.getLogger(__name__)


def _locate(registry: DocumentRegistry, key: str) -> tuple[PathSpec, Path]:
    spec = parse_key_path(key)
    return spec, registry.require_location(spec.prefix)


def value_for_key(registry: DocumentRegistry, key: str) -> str:
    spec, location = _locate(registry, key)
    logger.debug("Getting value for %s from %s", spec, location)
    return find_value(location, spec.segments)


def definition_for_key(registry: DocumentRegistry, key: str) -> Definition:
    spec, location = _locate(registry, key)
    logger.debug("Getting definition for %s from %s", spec, location)
    return Definition(location=location, position=find_definition(location, spec.segments))


def key_at(documents: DocumentSource, uri: str, line: int, character: int) -> str:
    return extract_token(documents.read_line(uri, line), character)


def hover_value(
    documents: DocumentSource,
    registry: DocumentRegistry,
    uri: str,
    line: int,
    character: int,
) -> str | None:
    try:
        return value_for_key(registry, key_at(documents, uri, line, character))
    except KeyPathError as exc:
        logger.debug("No hover value at %s:%d:%d: %s", uri, line, character, exc)
        return None


def definition_location(
    documents: DocumentSource,
    registry: DocumentRegistry,
    uri: str,
    line: int,
    character: int,
) -> Definition | None:
    try:
        return definition_for_key(registry, key_at(documents, uri, line, character))
    except KeyPathError as exc:
        logger.debug("No definition at %s:%d:%d: %s", uri, line, character, exc)
        return None
