"""Failure taxonomy for key-path resolution.

Core functions raise these; the lookup layer and the language server collapse
them to ``None``.
"""


class KeyPathError(Exception):
    """Base class for every resolution failure."""


class TokenNotFound(KeyPathError):
    """The cursor is not inside a quoted literal."""


class UnknownPrefix(KeyPathError):
    """No document is registered for the key prefix."""


class DocumentUnreadable(KeyPathError):
    """A document could not be read from disk."""


class DocumentMalformed(KeyPathError):
    """A document could not be parsed as JSON."""


class PathNotResolved(KeyPathError):
    """The path segments do not match the document structure."""


class ParserUnavailable(KeyPathError):
    """The JSON grammar could not be loaded."""
