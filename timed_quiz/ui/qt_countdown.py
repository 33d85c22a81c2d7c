"""Countdown scheduler driven by the Qt event loop."""

from __future__ import annotations

from PySide6.QtCore import QObject, QTimer

from timed_quiz.constants.quiz_constants import TICK_INTERVAL_MS
from timed_quiz.core.services.countdown import (
    CountdownHandle,
    CountdownScheduler,
    ExpireCallback,
    TickCallback,
)


class QtCountdownScheduler(CountdownScheduler):
    """Runs each countdown on its own repeating ``QTimer``."""

    def __init__(self, parent: QObject | None = None, interval_ms: int = TICK_INTERVAL_MS) -> None:
        self._parent = parent
        self._interval_ms = interval_ms
        self._timers: dict[int, QTimer] = {}

    def arm(
        self,
        duration_ticks: int,
        on_tick: TickCallback,
        on_expire: ExpireCallback,
    ) -> CountdownHandle:
        handle = CountdownHandle(duration_ticks, on_tick, on_expire)
        timer = QTimer(self._parent)
        timer.setInterval(self._interval_ms)
        timer.timeout.connect(lambda: self._deliver_tick(handle))
        self._timers[handle.handle_id] = timer
        timer.start()
        return handle

    def cancel(self, handle: CountdownHandle) -> None:
        handle.cancel()
        self._release_timer(handle)

    def active_count(self) -> int:
        return len(self._timers)

    def _deliver_tick(self, handle: CountdownHandle) -> None:
        handle.tick()
        if not handle.is_active:
            self._release_timer(handle)

    def _release_timer(self, handle: CountdownHandle) -> None:
        timer = self._timers.pop(handle.handle_id, None)
        if timer is None:
            return
        timer.stop()
        timer.deleteLater()
