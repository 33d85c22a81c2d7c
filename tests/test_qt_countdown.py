import pytest

QtCore = pytest.importorskip("PySide6.QtCore")

from timed_quiz.ui.qt_countdown import QtCountdownScheduler  # noqa: E402


def _run_event_loop(timeout_ms: int, until) -> None:
    loop = QtCore.QEventLoop()
    poll = QtCore.QTimer()
    poll.setInterval(5)
    poll.timeout.connect(lambda: until() and loop.quit())
    deadline = QtCore.QTimer()
    deadline.setSingleShot(True)
    deadline.setInterval(timeout_ms)
    deadline.timeout.connect(loop.quit)
    poll.start()
    deadline.start()
    loop.exec()
    poll.stop()
    deadline.stop()


def test_qt_countdown_ticks_and_expires(qt_app):
    scheduler = QtCountdownScheduler(interval_ms=10)
    ticks: list[int] = []
    expired: list[bool] = []

    handle = scheduler.arm(3, ticks.append, lambda: expired.append(True))
    _run_event_loop(2000, lambda: bool(expired))

    assert ticks == [2, 1, 0]
    assert expired == [True]
    assert not handle.is_active
    assert scheduler.active_count() == 0


def test_qt_countdown_cancel_stops_callbacks(qt_app):
    scheduler = QtCountdownScheduler(interval_ms=10)
    ticks: list[int] = []
    expired: list[bool] = []

    handle = scheduler.arm(50, ticks.append, lambda: expired.append(True))
    _run_event_loop(2000, lambda: len(ticks) >= 2)
    scheduler.cancel(handle)
    seen = len(ticks)
    _run_event_loop(100, lambda: False)

    assert len(ticks) == seen
    assert expired == []
    assert scheduler.active_count() == 0
