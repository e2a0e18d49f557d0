"""QTimer-backed scheduler used by the session engine inside the Qt event loop."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer


class QtTimerHandle:
    """Cancellable wrapper around a single ``QTimer``."""

    def __init__(
        self,
        timer: QTimer,
        callback: Callable[[], None],
        on_release: Callable[[QtTimerHandle], None],
    ) -> None:
        self._timer: QTimer | None = timer
        self._callback = callback
        self._on_release = on_release
        timer.timeout.connect(self._handle_timeout)

    def cancel(self) -> None:
        self._release()

    def is_active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def _handle_timeout(self) -> None:
        timer = self._timer
        if timer is None:
            return
        if timer.isSingleShot():
            self._release()
        self._callback()

    def _release(self) -> None:
        timer = self._timer
        if timer is None:
            return
        self._timer = None
        timer.stop()
        timer.deleteLater()
        self._on_release(self)


class QtScheduler(QObject):
    """Creates one-shot and repeating timers owned by this object."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._handles: set[QtTimerHandle] = set()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> QtTimerHandle:
        return self._start_timer(delay_ms, callback, single_shot=True)

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> QtTimerHandle:
        return self._start_timer(interval_ms, callback, single_shot=False)

    def cancel_all(self) -> None:
        for handle in list(self._handles):
            handle.cancel()

    def active_count(self) -> int:
        return len(self._handles)

    def _start_timer(
        self, interval_ms: int, callback: Callable[[], None], single_shot: bool
    ) -> QtTimerHandle:
        timer = QTimer(self)
        timer.setSingleShot(single_shot)
        timer.setInterval(interval_ms)
        handle = QtTimerHandle(timer, callback, self._handles.discard)
        self._handles.add(handle)
        timer.start()
        return handle
