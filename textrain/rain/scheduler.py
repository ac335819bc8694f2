# textrain/rain/scheduler.py
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# 80 ms per frame: smooth enough to read as motion without waking the
# terminal at 60 fps.
FRAME_INTERVAL = 0.08


@dataclass(frozen=True)
class Tick:
    """Frame-advance signal, stamped with the scheduler generation that armed it."""

    generation: int


class FrameScheduler:
    """
    Self-rescheduling heartbeat.

    Each timer fire posts exactly one `Tick`; nothing is armed again until the
    owner has consumed that tick and calls `rearm()`. `stop()` cancels the
    pending timer, and any tick already in flight is rejected by `accepts()`.
    """

    def __init__(
        self,
        post: Callable[[Tick], None],
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
        interval: float = FRAME_INTERVAL,
    ) -> None:
        self._post = post
        self._timer_factory = timer_factory
        self._interval = interval
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def generation(self) -> int:
        return self._generation

    def start(self) -> None:
        if self._running:
            self.stop()
        self._generation += 1
        self._running = True
        logger.debug("scheduler start (generation %d)", self._generation)
        self._arm()

    def rearm(self) -> None:
        if not self._running:
            return
        self._arm()

    def stop(self) -> None:
        if not self._running and self._timer is None:
            return
        self._running = False
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        logger.debug("scheduler stop (generation %d)", self._generation)

    def accepts(self, tick: Tick) -> bool:
        return self._running and tick.generation == self._generation

    def _arm(self) -> None:
        timer = self._timer_factory(self._interval, self._fire, args=(self._generation,))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _fire(self, generation: int) -> None:
        # Runs on the timer thread: only hand the tick over, never touch state.
        self._post(Tick(generation))
