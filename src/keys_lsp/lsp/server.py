"""pygls language server exposing hover and go-to-definition for key paths."""

from __future__ import annotations

import logging
from collections.abc import Callable

from lsprotocol import types
from pygls.lsp.server import LanguageServer
from pygls.workspace import PositionCodec

from keys_lsp.core.errors import DocumentUnreadable, KeyPathError
from keys_lsp.core.lookup import definition_location, hover_value
from keys_lsp.core.ports.documents import DocumentSource
from keys_lsp.core.registry import DocumentRegistry
from keys_lsp.documents.filesystem import FilesystemDocuments

logger = logging.getLogger(__name__)

SERVER_NAME = "keys-lsp"
SERVER_VERSION = "0.1.0"


class WorkspaceDocuments:
    """Reads lines from the server workspace: open buffers first, disk otherwise.

    Implements the ``DocumentSource`` protocol.
    """

    def __init__(self, server: LanguageServer) -> None:
        self._server = server

    def read_line(self, uri: str, line: int) -> str:
        try:
            lines = self._server.workspace.get_text_document(uri).lines
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentUnreadable(f"Cannot read {uri}: {exc}") from exc
        if line >= len(lines):
            raise DocumentUnreadable(f"Line {line} does not exist in {uri}")
        return lines[line].rstrip("\r\n")


def _server_character(documents: DocumentSource, codec: PositionCodec, uri: str, position: types.Position) -> int:
    """Convert a client column (UTF-16 units by default) to a code point index."""
    try:
        text = documents.read_line(uri, position.line)
    except KeyPathError:
        return position.character
    converted = codec.position_from_client_units([text], types.Position(line=0, character=position.character))
    return converted.character


def _client_character(location: str, line: int, column: int, codec: PositionCodec) -> int:
    try:
        text = FilesystemDocuments().read_line(location, line)
    except KeyPathError:
        return column
    converted = codec.position_to_client_units([text], types.Position(line=0, character=column))
    return converted.character


def hover_for(
    documents: DocumentSource,
    registry: DocumentRegistry,
    params: types.HoverParams,
    codec: PositionCodec | None = None,
) -> types.Hover | None:
    codec = codec or PositionCodec()
    uri = params.text_document.uri
    value = hover_value(
        documents,
        registry,
        uri,
        params.position.line,
        _server_character(documents, codec, uri, params.position),
    )
    if value is None:
        return None
    return types.Hover(contents=types.MarkupContent(kind=types.MarkupKind.PlainText, value=value))


def definition_for(
    documents: DocumentSource,
    registry: DocumentRegistry,
    params: types.DefinitionParams,
    codec: PositionCodec | None = None,
) -> types.Location | None:
    codec = codec or PositionCodec()
    uri = params.text_document.uri
    definition = definition_location(
        documents,
        registry,
        uri,
        params.position.line,
        _server_character(documents, codec, uri, params.position),
    )
    if definition is None:
        return None
    line = definition.position.line
    character = _client_character(str(definition.location), line, definition.position.column, codec)
    position = types.Position(line=line, character=character)
    return types.Location(
        uri=definition.location.resolve().as_uri(),
        range=types.Range(start=position, end=position),
    )


def create_language_server(registry: DocumentRegistry, documents: DocumentSource | None = None) -> LanguageServer:
    """Create a language server wired to the given registry."""
    server = LanguageServer(SERVER_NAME, SERVER_VERSION)
    source = documents if documents is not None else WorkspaceDocuments(server)

    @server.feature(types.INITIALIZED)
    def initialized(ls: LanguageServer, params: types.InitializedParams) -> None:
        logger.info("Server initialized with %d registered document(s)", len(registry))
        ls.window_log_message(types.LogMessageParams(type=types.MessageType.Info, message="server initialized!"))

    @server.feature(types.TEXT_DOCUMENT_DID_CHANGE)
    def did_change(ls: LanguageServer, params: types.DidChangeTextDocumentParams) -> None:
        logger.debug("Document changed: %s", params.text_document.uri)
        ls.window_log_message(types.LogMessageParams(type=types.MessageType.Info, message="file changed!"))

    @server.feature(types.TEXT_DOCUMENT_HOVER)
    def hover(ls: LanguageServer, params: types.HoverParams) -> types.Hover | None:
        return hover_for(source, registry, params, ls.workspace.position_codec)

    @server.feature(types.TEXT_DOCUMENT_DEFINITION)
    def definition(ls: LanguageServer, params: types.DefinitionParams) -> types.Location | None:
        return definition_for(source, registry, params, ls.workspace.position_codec)

    return server


def start(server: LanguageServer, start_fn: Callable[[], None] | None = None) -> None:
    """Serve over stdio until the client disconnects."""
    (start_fn or server.start_io)()
