# textrain/rain/controller.py
"""
Animation state machine.

`RainController` owns the columns and the loaded document, and is driven one
event at a time through `handle()`:

  - `DocumentChosen(name)`  Selecting -> Animating
  - `Intent.SELECT`         Selecting -> Animating, with the selector's item
  - `Intent.BACK`           Animating -> Selecting (only with a selector)
  - `Intent.QUIT`           any -> Quitting (terminal)
  - `Resize(w, h)`          new geometry; columns rebuilt while animating
  - `Tick(gen)`             one frame step while animating

Every event is handled to completion before the next one is taken, so the
controller never needs a lock.
"""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, Union

from rich.text import Text

from ..errors import DocumentError
from ..sources import TextSource
from . import columns as colmod
from .columns import Column
from .raster import DEFAULT_PALETTE, rasterize_frame
from .scheduler import FrameScheduler, Tick

logger = logging.getLogger(__name__)


class Mode(enum.Enum):
    SELECTING = "selecting"
    ANIMATING = "animating"
    QUITTING = "quitting"


class Intent(enum.Enum):
    SELECT = "select"
    BACK = "back"
    QUIT = "quit"


@dataclass(frozen=True)
class DocumentChosen:
    name: str


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


Event = Union[DocumentChosen, Resize, Tick, Intent]


class Selector(Protocol):
    def current(self) -> Optional[str]: ...


class RainController:
    def __init__(
        self,
        source: TextSource,
        width: int,
        height: int,
        scheduler: FrameScheduler,
        rng: Optional[random.Random] = None,
        selector: Optional[Selector] = None,
        palette: Sequence[str] = DEFAULT_PALETTE,
    ) -> None:
        self.source = source
        self.scheduler = scheduler
        self.rng = rng or random.Random()
        self.selector = selector
        self.palette = tuple(palette)

        self.width = max(0, width)
        self.height = max(0, height)
        self.mode = Mode.SELECTING
        self.columns: List[Column] = []
        self.characters = ""
        self.document: Optional[str] = None

    # ---- event dispatch ----------------------------------------------------
    def handle(self, event: Event) -> None:
        if self.mode is Mode.QUITTING:
            return

        if isinstance(event, Tick):
            self._on_tick(event)
        elif isinstance(event, Resize):
            self._on_resize(event)
        elif isinstance(event, DocumentChosen):
            if self.mode is Mode.SELECTING:
                self._enter_animating(event.name)
        elif event is Intent.QUIT:
            self._quit()
        elif event is Intent.BACK:
            if self.mode is Mode.ANIMATING and self.selector is not None:
                self._enter_selecting()
        elif event is Intent.SELECT:
            if self.mode is Mode.SELECTING and self.selector is not None:
                name = self.selector.current()
                if name is not None:
                    self._enter_animating(name)
        else:
            raise TypeError(f"unsupported event: {event!r}")

    # ---- rendering ---------------------------------------------------------
    def frame(self) -> Optional[Text]:
        """Rendered rain for the current state, or None outside Animating."""
        if self.mode is not Mode.ANIMATING:
            return None
        return rasterize_frame(
            self.columns, self.width, self.height, self.characters, self.rng, self.palette
        )

    # ---- transitions -------------------------------------------------------
    def _enter_animating(self, name: str) -> None:
        try:
            self.characters = self.source.read_document(name)
        except DocumentError as exc:
            logger.warning("%s", exc)
            self.characters = str(exc)

        self.document = name
        self._rebuild()
        self.mode = Mode.ANIMATING
        self.scheduler.start()
        logger.info("animating '%s' (%d characters)", name, len(self.characters))

    def _enter_selecting(self) -> None:
        self.scheduler.stop()
        self.columns = []
        self.characters = ""
        self.document = None
        self.mode = Mode.SELECTING
        logger.info("back to document selection")

    def _quit(self) -> None:
        self.scheduler.stop()
        self.columns = []
        self.mode = Mode.QUITTING
        logger.info("quitting")

    # ---- per-event work ----------------------------------------------------
    def _on_tick(self, tick: Tick) -> None:
        if self.mode is not Mode.ANIMATING or not self.scheduler.accepts(tick):
            logger.debug("dropping stale tick (generation %d)", tick.generation)
            return
        colmod.advance(self.columns, self.height, len(self.characters), self.rng)
        self.scheduler.rearm()

    def _on_resize(self, event: Resize) -> None:
        self.width = max(0, event.width)
        self.height = max(0, event.height)
        if self.mode is Mode.ANIMATING:
            self._rebuild()

    def _rebuild(self) -> None:
        self.columns = colmod.initialize(
            colmod.column_count(self.width),
            self.height,
            len(self.characters),
            self.rng,
        )
