# textrain/commands/play.py
from __future__ import annotations

import queue
import random
from typing import Any, Optional

import typer

from ..config import RainConfig
from ..rain.controller import RainController
from ..rain.scheduler import FrameScheduler
from ..sources import TextSource
from ..ui.menu import DocumentMenu
from ..ui.terminal import run_animation
from ..util.console import console, error


def main(
    ctx: typer.Context,
    document: Optional[str] = typer.Argument(
        None, help="Document to rain. Omit to pick one from a menu."
    ),
) -> None:
    """
    Start the rain.

    With DOCUMENT the animation starts straight away and `q` quits; otherwise
    a menu lists the available documents and `b` returns to it.
    """
    cfg: RainConfig = ctx.obj
    source = TextSource(cfg.docs_dir)

    menu: Optional[DocumentMenu] = None
    if document is None:
        names = source.names()
        if not names:
            error(f"No documents found in {source.root}")
            raise typer.Exit(code=1)
        menu = DocumentMenu(names)

    events: "queue.Queue[Any]" = queue.Queue()
    scheduler = FrameScheduler(events.put)
    size = console.size
    controller = RainController(
        source,
        size.width,
        size.height,
        scheduler,
        rng=random.Random(cfg.seed),
        selector=menu,
        palette=cfg.palette,
    )
    run_animation(controller, events, menu=menu, document=document, console=console)
