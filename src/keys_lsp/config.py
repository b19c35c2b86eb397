import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from keys_lsp.core.registry import DocumentRegistry

FILES_ENV = "KEYS_LSP_FILES"
LOG_FILE_ENV = "KEYS_LSP_LOG_FILE"
LOG_LEVEL_ENV = "KEYS_LSP_LOG_LEVEL"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    files: str = ""
    log_file: Path | None = None
    log_level: str = "INFO"

    def build_registry(self) -> DocumentRegistry:
        return DocumentRegistry.from_config(self.files)


def load_settings(files: str | None = None) -> Settings:
    """Read settings from the environment; an explicit ``files`` value wins."""
    log_file = os.getenv(LOG_FILE_ENV)
    return Settings(
        files=files if files is not None else os.getenv(FILES_ENV, ""),
        log_file=Path(log_file).expanduser() if log_file else None,
        log_level=os.getenv(LOG_LEVEL_ENV, "INFO").upper(),
    )


def configure_logging(settings: Settings) -> None:
    """Log to stderr, and append to ``settings.log_file`` when it can be opened.

    stdout is reserved for the language server protocol.
    """
    root = logging.getLogger("keys_lsp")
    level = logging.getLevelNamesMapping().get(settings.log_level.upper())
    root.setLevel(level if level is not None else logging.INFO)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(_LOG_FORMAT)
    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(formatter)
    root.addHandler(stream)

    if level is None:
        root.warning("Unknown log level %r, using INFO", settings.log_level)

    if settings.log_file is None:
        return
    try:
        file_handler = logging.FileHandler(settings.log_file, mode="a", encoding="utf-8")
    except OSError as exc:
        root.warning("Log file %s is unavailable, logging to stderr only: %s", settings.log_file, exc)
        return
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
