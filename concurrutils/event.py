"""Event synchronisation primitive with optional auto-reset."""

from __future__ import annotations

import threading
from enum import IntEnum


class EventWait(IntEnum):
    """Outcome of waiting on an event."""

    TIMEOUT = 0
    SIGNALED = 1


class Event:
    """Event that one producer signals to one or all waiting consumers."""

    def __init__(self, auto_reset: bool) -> None:
        self._auto_reset = auto_reset
        self._cond = threading.Condition()
        self._signaled = False
        self._waiting: list[int] = []

    def _wait(self, timeout: float | None) -> bool:
        me = threading.get_ident()
        self._waiting.append(me)
        signaled = self._cond.wait_for(lambda: self._signaled, timeout)
        self._waiting = [ident for ident in self._waiting if ident != me]
        if self._auto_reset and not self._waiting:
            self._signaled = False
        return signaled

    def wait_for(self, timeout_ms: float) -> EventWait:
        """Wait until signaled or ``timeout_ms`` milliseconds have passed."""
        with self._cond:
            if self._signaled:
                return EventWait.SIGNALED
            return EventWait.SIGNALED if self._wait(timeout_ms / 1000.0) else EventWait.TIMEOUT

    def wait(self) -> None:
        """Wait until the event is signaled."""
        with self._cond:
            if not self._signaled:
                self._wait(None)

    def notify(self) -> None:
        """Signal the event and wake one waiting thread."""
        with self._cond:
            self._signaled = True
            self._cond.notify()

    def broadcast(self) -> None:
        """Signal the event and wake every waiting thread."""
        with self._cond:
            self._signaled = True
            self._cond.notify_all()

    def reset(self) -> None:
        """Clear the signaled state."""
        with self._cond:
            self._signaled = False