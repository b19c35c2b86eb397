from typing import Annotated

import typer

from keys_lsp.config import FILES_ENV

FilesOption = Annotated[
    str | None,
    typer.Option(
        "--files",
        help=f"Comma separated prefix:path pairs. Defaults to ${FILES_ENV}.",
        show_default=False,
    ),
]
