# textrain/ui/menu.py
from __future__ import annotations

from typing import List, Optional, Sequence

from rich import box
from rich.align import Align
from rich.console import Group
from rich.panel import Panel
from rich.text import Text

HINT = "↑/↓ choose   enter rain   b back   q quit"


class DocumentMenu:
    """List of document names with a wrapping cursor."""

    def __init__(self, names: Sequence[str], title: str = "textrain") -> None:
        self.names: List[str] = list(names)
        self.title = title
        self.index = 0

    def move(self, delta: int) -> None:
        if self.names:
            self.index = (self.index + delta) % len(self.names)

    def current(self) -> Optional[str]:
        if not self.names:
            return None
        return self.names[self.index]

    def __rich__(self) -> Panel:
        body = Text(no_wrap=True, overflow="ellipsis")
        if not self.names:
            body.append("No documents found.", style="bold red")
        for i, name in enumerate(self.names):
            if i:
                body.append("\n")
            if i == self.index:
                body.append(f"▶ {name}", style="bold black on bright_green")
            else:
                body.append(f"  {name}", style="green")

        return Panel(
            Group(Align.center(body), Text(""), Align.center(Text(HINT, style="dim"))),
            title=f"[bold bright_green]{self.title}[/]",
            border_style="bright_green",
            box=box.DOUBLE,
            expand=False,
            padding=(1, 4),
        )
