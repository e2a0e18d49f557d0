"""Timer abstractions the session engine uses for countdowns and delays.

Architecture note:
    The engine never touches Qt directly. The desktop UI passes a
    ``QtScheduler`` backed by ``QTimer``; tests pass a manual scheduler that
    advances virtual time. Both only need to honour ``cancel()`` so that a
    callback belonging to a finished question never fires.
"""

from __future__ import annotations

from typing import Callable, Protocol


class TimerHandle(Protocol):
    """Handle to a pending one-shot or repeating timer."""

    def cancel(self) -> None: ...

    def is_active(self) -> bool: ...


class Scheduler(Protocol):
    """Source of one-shot and repeating timers."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle: ...
