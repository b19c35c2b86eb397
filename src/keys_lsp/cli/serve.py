from rich.console import Console

from keys_lsp.cli.options import FilesOption
from keys_lsp.config import configure_logging, load_settings

# stdout carries the protocol once the server is running.
console = Console(stderr=True)


def serve(files: FilesOption = None) -> None:
    """Start the language server on stdio."""
    from keys_lsp.lsp.server import create_language_server, start

    settings = load_settings(files)
    configure_logging(settings)
    registry = settings.build_registry()
    console.print(f"[green]Starting keys-lsp on stdio[/green] ({len(registry)} document(s) registered)")
    start(create_language_server(registry))
