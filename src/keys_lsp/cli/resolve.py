from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from keys_lsp.cli.options import FilesOption
from keys_lsp.config import load_settings
from keys_lsp.core.errors import KeyPathError
from keys_lsp.core.lookup import definition_for_key, key_at, value_for_key
from keys_lsp.core.registry import DocumentRegistry
from keys_lsp.documents.filesystem import FilesystemDocuments

console = Console()
err_console = Console(stderr=True)

KeyArgument = Annotated[str, typer.Argument(help="Key path, e.g. prefix:outer.inner.")]


def _get_registry(files: str | None) -> DocumentRegistry:
    return load_settings(files).build_registry()


def _fail(exc: KeyPathError) -> None:
    err_console.print(f"[red]{type(exc).__name__}[/red]: {exc}")
    raise typer.Exit(code=1)


def value(key: KeyArgument, files: FilesOption = None) -> None:
    """Print the value a key path resolves to."""
    try:
        resolved = value_for_key(_get_registry(files), key)
    except KeyPathError as exc:
        _fail(exc)
        return
    console.print(resolved, markup=False, highlight=False, soft_wrap=True)


def definition(key: KeyArgument, files: FilesOption = None) -> None:
    """Print where a key path is defined, as path:line:column."""
    try:
        found = definition_for_key(_get_registry(files), key)
    except KeyPathError as exc:
        _fail(exc)
        return
    console.print(
        f"{found.location}:{found.position.line + 1}:{found.position.column + 1}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def registry(files: FilesOption = None) -> None:
    """List registered prefixes and their documents."""
    documents = _get_registry(files)
    table = Table(show_lines=False)
    table.add_column("prefix")
    table.add_column("location")
    table.add_column("exists")
    for entry in documents:
        table.add_row(entry.prefix, str(entry.location), "yes" if entry.location.is_file() else "no")
    console.print(table)
    console.print(f"({len(documents)} rows)")


def at(
    path: Annotated[Path, typer.Argument(help="Source file containing the key literal.")],
    line: Annotated[int, typer.Argument(min=1, help="1-based line number.")],
    column: Annotated[int, typer.Argument(min=1, help="1-based column inside the literal.")],
    files: FilesOption = None,
) -> None:
    """Resolve the key literal found at a position in a source file."""
    documents = _get_registry(files)
    try:
        key = key_at(FilesystemDocuments(), str(path), line - 1, column - 1)
        resolved = value_for_key(documents, key)
    except KeyPathError as exc:
        _fail(exc)
        return
    console.print(key, style="bold", markup=False, highlight=False, soft_wrap=True)
    console.print(resolved, markup=False, highlight=False, soft_wrap=True)
