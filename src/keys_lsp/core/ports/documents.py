from typing import Protocol


class DocumentSource(Protocol):
    def read_line(self, uri: str, line: int) -> str: ...
