# textrain/commands/docs.py
from __future__ import annotations

import typer
from rich.table import Table
from rich.text import Text

from ..config import RainConfig
from ..errors import DocumentError
from ..sources import TextSource
from ..util.console import console, info, warn


def main(ctx: typer.Context) -> None:
    """List the documents available to `play`."""
    cfg: RainConfig = ctx.obj
    source = TextSource(cfg.docs_dir)
    names = source.names()
    if not names:
        warn(f"No documents found in {source.root}")
        raise typer.Exit(code=1)

    table = Table(title="Documents", header_style="bold bright_green", border_style="green")
    table.add_column("Name", style="bright_green", no_wrap=True)
    table.add_column("Characters", justify="right")
    for name in names:
        try:
            size = str(len(source.read_document(name)))
        except DocumentError as exc:
            size = Text(exc.reason, style="red")
        table.add_row(name, size)

    console.print(table)
    info(f"{len(names)} document(s) in {source.root}")
