"""Per-question countdown owned by the session controller."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
import logging

from sciquest.constants.quiz_constants import DEFAULT_TIME_LIMIT_SECONDS, TICK_INTERVAL_MS

logger = logging.getLogger(__name__)


class TickHandle(ABC):
    """A running periodic callback that can be stopped."""

    @abstractmethod
    def stop(self) -> None:
        pass


class TickScheduler(ABC):
    """Source of periodic ticks (a QTimer in the app, a manual clock in tests)."""

    @abstractmethod
    def start(self, interval_ms: int, callback: Callable[[], None]) -> TickHandle:
        pass


def effective_time_limit(time_limit_seconds: int | None) -> int:
    if time_limit_seconds is None or time_limit_seconds <= 0:
        return DEFAULT_TIME_LIMIT_SECONDS
    return time_limit_seconds


class QuestionCountdown:
    """Counts down one question's time limit and fires ``on_expired`` at zero.

    Once cancelled or expired the countdown is dead: further ticks from its
    scheduler handle are ignored, so a stale tick cannot grade anything.
    """

    def __init__(
        self,
        question_id: int,
        seconds: int,
        scheduler: TickScheduler,
        on_expired: Callable[[int], None],
        on_tick: Callable[[int], None] | None = None,
    ) -> None:
        self.question_id = question_id
        self._remaining = seconds
        self._scheduler = scheduler
        self._on_expired = on_expired
        self._on_tick = on_tick
        self._handle: TickHandle | None = None
        self._active: bool = False

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def is_active(self) -> bool:
        return self._active

    def start(self) -> None:
        if self._active or self._handle is not None:
            raise RuntimeError("Countdown already started.")
        self._active = True
        self._handle = self._scheduler.start(TICK_INTERVAL_MS, self._tick)

    def cancel(self) -> None:
        self._active = False
        self._release_handle()

    def _tick(self) -> None:
        if not self._active:
            return
        self._remaining = max(0, self._remaining - 1)
        if self._on_tick is not None:
            self._on_tick(self._remaining)
        if self._active and self._remaining == 0:
            self._active = False
            self._release_handle()
            logger.info("Time limit reached for question %s", self.question_id)
            self._on_expired(self.question_id)

    def _release_handle(self) -> None:
        if self._handle is not None:
            self._handle.stop()
            self._handle = None
