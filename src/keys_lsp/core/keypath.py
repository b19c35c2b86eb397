import re

from keys_lsp.models import PathSpec

_SEPARATORS = re.compile(r"[:.]")


def parse_key_path(token: str) -> PathSpec:
    """Split ``prefix:outer.inner`` into a prefix and its ordered segments."""
    prefix, *segments = _SEPARATORS.split(token)
    return PathSpec(prefix=prefix, segments=tuple(segments))
