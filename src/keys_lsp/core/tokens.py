from keys_lsp.core.errors import TokenNotFound

_QUOTE = '"'


def extract_token(line: str, cursor: int) -> str:
    """Return the text between the quotes enclosing ``cursor`` on ``line``.

    Escaped quotes are not special: a ``\\"`` inside the literal ends the token.
    """
    if cursor < 0 or cursor >= len(line):
        raise TokenNotFound(f"Cursor {cursor} is outside a line of length {len(line)}")

    start = line.rfind(_QUOTE, 0, cursor)
    if start == -1:
        raise TokenNotFound(f"No opening quote before column {cursor}")

    end = line.find(_QUOTE, cursor)
    if end == -1:
        raise TokenNotFound(f"No closing quote after column {cursor}")

    return line[start + 1 : end]
