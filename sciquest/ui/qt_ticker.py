"""QTimer-backed tick source for question countdowns."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer

from sciquest.core.services.countdown import TickHandle, TickScheduler


class QtTickHandle(TickHandle):
    """Owns one QTimer; stopping it also disconnects the callback."""

    def __init__(self, timer: QTimer) -> None:
        self._timer = timer

    def stop(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.timeout.disconnect()
        self._timer.deleteLater()
        self._timer = None


class QtTickScheduler(TickScheduler):
    """Creates a fresh QTimer per countdown, parented to ``owner``."""

    def __init__(self, owner: QObject) -> None:
        self._owner = owner

    def start(self, interval_ms: int, callback: Callable[[], None]) -> TickHandle:
        timer = QTimer(self._owner)
        timer.setInterval(interval_ms)
        timer.timeout.connect(callback)
        timer.start()
        return QtTickHandle(timer)
