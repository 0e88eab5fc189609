"""Cancellable delayed actions.

The cross-link binder reverts card highlights after a short delay. The delay
is scheduled through a Scheduler so that pending reverts can be cancelled
when a cycle replaces the cards, and so tests can drive time by hand.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class ScheduledAction(Protocol):
    """Handle for a pending delayed callback."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run a callback after a delay and return a handle."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledAction: ...


class ThreadingScheduler:
    """Scheduler backed by ``threading.Timer`` (daemon threads)."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        logger.debug("Scheduled callback in %.2fs", delay)
        return timer
