"""Cancellable per-question countdowns.

A countdown delivers ``on_tick(remaining)`` once per tick and then
``on_expire()`` after the tick that brings ``remaining`` to zero. Schedulers
decide what a tick is: :class:`ManualCountdownScheduler` advances only when
told to, while the Qt front-end uses a ``QTimer`` (see
``timed_quiz.ui.qt_countdown``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from itertools import count

TickCallback = Callable[[int], None]
ExpireCallback = Callable[[], None]

_handle_ids = count(1)


class CountdownHandle:
    """State of one armed countdown."""

    def __init__(
        self,
        duration_ticks: int,
        on_tick: TickCallback,
        on_expire: ExpireCallback,
    ) -> None:
        if duration_ticks <= 0:
            raise ValueError("Countdown duration must be a positive number of ticks.")
        self.handle_id: int = next(_handle_ids)
        self.duration_ticks = duration_ticks
        self._remaining = duration_ticks
        self._on_tick = on_tick
        self._on_expire = on_expire
        self._active = True

    def __repr__(self) -> str:
        return (
            f"CountdownHandle(id={self.handle_id}, remaining={self._remaining}, "
            f"active={self._active})"
        )

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def is_active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False

    def tick(self) -> None:
        """Deliver one tick; fires ``on_expire`` after the final one."""
        if not self._active:
            return
        self._remaining -= 1
        self._on_tick(self._remaining)
        # on_tick may have cancelled this countdown
        if not self._active:
            return
        if self._remaining <= 0:
            self._active = False
            self._on_expire()


class CountdownScheduler(ABC):
    """Arms and cancels countdowns on some clock."""

    @abstractmethod
    def arm(
        self,
        duration_ticks: int,
        on_tick: TickCallback,
        on_expire: ExpireCallback,
    ) -> CountdownHandle:
        """Start a countdown of ``duration_ticks`` ticks."""

    @abstractmethod
    def cancel(self, handle: CountdownHandle) -> None:
        """Stop ``handle``; no callback of it fires after this returns."""


class ManualCountdownScheduler(CountdownScheduler):
    """Single timer queue advanced explicitly through :meth:`advance`."""

    def __init__(self) -> None:
        self._handles: list[CountdownHandle] = []

    def arm(
        self,
        duration_ticks: int,
        on_tick: TickCallback,
        on_expire: ExpireCallback,
    ) -> CountdownHandle:
        handle = CountdownHandle(duration_ticks, on_tick, on_expire)
        self._handles.append(handle)
        return handle

    def cancel(self, handle: CountdownHandle) -> None:
        handle.cancel()
        if handle in self._handles:
            self._handles.remove(handle)

    def active_handles(self) -> list[CountdownHandle]:
        return [handle for handle in self._handles if handle.is_active]

    def advance(self, ticks: int = 1) -> None:
        """Deliver ``ticks`` ticks to every active countdown.

        Countdowns armed while a tick is being delivered start on the next tick.
        """
        for _ in range(ticks):
            for handle in list(self._handles):
                handle.tick()
            self._handles = [handle for handle in self._handles if handle.is_active]
