# textrain/util/console.py
from __future__ import annotations

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def info(msg: str) -> None:
    console.print(f"[cyan]{msg}[/]")


def success(msg: str) -> None:
    console.print(f"[bold green]✓[/] {msg}")


def warn(msg: str) -> None:
    err_console.print(f"[yellow]warning:[/] {msg}")


def error(msg: str) -> None:
    err_console.print(f"[bold red]error:[/] {msg}")
