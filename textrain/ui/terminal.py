# textrain/ui/terminal.py
"""
Full-screen host loop.

Every event (keys from the reader thread, ticks from the scheduler's timer
threads, resizes noticed while polling) goes through one queue and is handed
to the controller on the calling thread, one at a time.
"""

from __future__ import annotations

import logging
import queue
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

import click
from rich.align import Align
from rich.console import Console, RenderableType
from rich.live import Live
from rich.text import Text

from ..rain.controller import DocumentChosen, Intent, Mode, RainController, Resize
from .menu import DocumentMenu

logger = logging.getLogger(__name__)

RESIZE_POLL = 0.25
KEY_JOIN_TIMEOUT = 0.5

KEYS_UP = {"\x1b[A", "\x1bOA", "\xe0H", "\x00H", "k"}
KEYS_DOWN = {"\x1b[B", "\x1bOB", "\xe0P", "\x00P", "j"}
KEYS_SELECT = {"\r", "\n"}
KEYS_BACK = {"\x7f", "\x08", "b"}
KEYS_QUIT = {"q", "Q", "\x03"}


@dataclass(frozen=True)
class KeyPress:
    key: str


def translate_key(key: str, mode: Mode, menu: Optional[DocumentMenu]) -> Optional[Intent]:
    """Map a raw key to an intent; menu navigation is applied directly."""
    if key in KEYS_QUIT:
        return Intent.QUIT
    if key in KEYS_BACK:
        return Intent.BACK
    if key in KEYS_SELECT:
        return Intent.SELECT
    if mode is Mode.SELECTING and menu is not None:
        if key in KEYS_UP:
            menu.move(-1)
        elif key in KEYS_DOWN:
            menu.move(1)
    return None


class KeyReader:
    """
    Background thread posting every key press; Ctrl-C and EOF become QUIT.

    The thread ends by itself after a quit key, so it is never left blocked
    inside `getchar()` (with the terminal in raw mode) once the loop is over.
    """

    def __init__(
        self, post: Callable[[Any], None], getchar: Callable[[], str] = click.getchar
    ) -> None:
        self._post = post
        self._getchar = getchar
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name="textrain-keys", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread.ident is not None:
            self._thread.join(timeout)

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                key = self._getchar()
            except (KeyboardInterrupt, EOFError):
                self._post(Intent.QUIT)
                return
            except Exception as exc:
                logger.error("keyboard input unavailable: %s", exc)
                self._post(Intent.QUIT)
                return
            if self._stop.is_set():
                return
            self._post(KeyPress(key))
            if key in KEYS_QUIT:
                return


@contextmanager
def restored_tty(stream: Any = None) -> Iterator[None]:
    """Put `stream`'s terminal attributes back as they were on entry."""
    stream = sys.stdin if stream is None else stream
    saved = None
    fd = -1
    if sys.platform != "win32":
        import termios

        try:
            if stream is not None and stream.isatty():
                fd = stream.fileno()
                saved = termios.tcgetattr(fd)
        except (OSError, ValueError, termios.error) as exc:
            logger.debug("terminal attributes unavailable: %s", exc)
    try:
        yield
    finally:
        if saved is not None:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _view(controller: RainController, menu: Optional[DocumentMenu]) -> RenderableType:
    frame = controller.frame()
    if frame is not None:
        return frame
    if menu is not None:
        return Align.center(menu, vertical="middle")
    return Text("")


def run_animation(
    controller: RainController,
    events: "queue.Queue[Any]",
    menu: Optional[DocumentMenu] = None,
    document: Optional[str] = None,
    console: Optional[Console] = None,
    key_reader: Optional[KeyReader] = None,
) -> None:
    """
    Drive `controller` until it reaches Quitting.

    `events` must be the queue the controller's scheduler posts its ticks to.
    With `document` the rain starts right away; otherwise the menu is shown.
    """
    console = console or Console()
    reader = key_reader or KeyReader(events.put)

    size = console.size
    controller.handle(Resize(size.width, size.height))
    if document is not None:
        controller.handle(DocumentChosen(document))

    with restored_tty(), Live(
        console=console, screen=True, auto_refresh=False, transient=True
    ) as live:
        live.update(_view(controller, menu), refresh=True)
        reader.start()
        try:
            while controller.mode is not Mode.QUITTING:
                try:
                    event = events.get(timeout=RESIZE_POLL)
                except queue.Empty:
                    event = None

                dirty = event is not None
                size = console.size
                if (size.width, size.height) != (controller.width, controller.height):
                    controller.handle(Resize(size.width, size.height))
                    dirty = True

                if isinstance(event, KeyPress):
                    event = translate_key(event.key, controller.mode, menu)
                if event is not None:
                    controller.handle(event)

                if dirty:
                    live.update(_view(controller, menu), refresh=True)
        except KeyboardInterrupt:
            controller.handle(Intent.QUIT)
        finally:
            reader.stop()
            controller.scheduler.stop()
            reader.join(KEY_JOIN_TIMEOUT)
