from __future__ import annotations

import sys
from importlib import metadata
from pathlib import Path
from typing import Optional

import typer

from .commands import docs, play
from .config import RainConfig, load_config
from .errors import ConfigError
from .util.console import error
from .util.log import configure_logging

# Create the top-level Typer app
app = typer.Typer(
    name="textrain",
    help="Matrix-style character rain, drawn from the text of a document.",
    add_completion=False,
    no_args_is_help=True,
)

app.command("play")(play.main)
app.command("list")(docs.main)


def _version_string() -> str:
    try:
        return metadata.version("textrain")
    except metadata.PackageNotFoundError:  # pragma: no cover
        from . import __version__

        return __version__


def _show_version(value: Optional[bool]) -> None:
    if value:
        typer.echo(f"textrain {_version_string()}")
        raise typer.Exit(code=0)


@app.callback()
def _global_options(
    ctx: typer.Context,
    docs_dir: Optional[Path] = typer.Option(
        None,
        "--docs-dir",
        help="Read documents from this directory instead of the bundled ones.",
        show_default=False,
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed the random generator for a reproducible rain.",
        show_default=False,
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Write a debug log to this file.",
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log at DEBUG level (needs a log file).",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show textrain version and exit.",
        callback=_show_version,
        is_eager=True,
    ),
) -> None:
    """
    Loads configuration once per process and exposes it to subcommands via ctx.obj.
    Command-line options override the config file and the environment.
    """
    try:
        cfg: RainConfig = load_config()
        cfg.apply_overrides(docs_dir=docs_dir, seed=seed, log_file=log_file)
        configure_logging(cfg.log_file, verbose=verbose)
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=2)

    ctx.obj = cfg


def main() -> None:
    app()


if __name__ == "__main__":
    # When run as a module: python -m textrain
    sys.exit(main())
