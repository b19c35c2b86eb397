import typer

from keys_lsp.cli.resolve import at, definition, registry, value
from keys_lsp.cli.serve import serve

app = typer.Typer(
    name="keys-lsp",
    help="Keys LSP — resolve prefix:dotted.key references against JSON documents.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("serve")(serve)
app.command("value")(value)
app.command("definition")(definition)
app.command("registry")(registry)
app.command("at")(at)


def main() -> None:
    app()
