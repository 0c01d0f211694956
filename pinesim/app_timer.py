"""Application timers that call a handler with a context after a timeout."""

from __future__ import annotations

import threading
from enum import IntEnum
from typing import Any, Callable, Optional

from pinesim.task import CONFIG_TICK_RATE_HZ

_MASK = 0xFFFFFFFF


class TimerMode(IntEnum):
    """Whether a timer expires once or restarts after each expiry."""

    SINGLE_SHOT = 0
    REPEATED = 1


def app_timer_ticks(ms):
    """Convert milliseconds to timer ticks at the RTOS tick rate."""
    return (ms * CONFIG_TICK_RATE_HZ // 1000) & _MASK


def app_timer_init():
    """Prepare the timer module; host threads need no setup."""
    return None


class AppTimer:
    """Timer that calls handler(context) when it expires.

    The timeout passed to start() is taken as milliseconds of host time.
    """

    def __init__(self, mode, handler):
        try:
            self.mode = TimerMode(mode)
        except ValueError:
            raise ValueError(
                "only single-shot or repeated timer modes are supported"
            ) from None
        self.repeating = self.mode is TimerMode.REPEATED
        self.handler: Callable[[Any], Any] = handler
        self.context: Any = None
        self.repeat_period = 0
        self._lock = threading.Lock()
        self._generation = 0
        self._pending: Optional[threading.Timer] = None

    def _schedule(self, generation: int) -> None:
        pending = threading.Timer(
            self.repeat_period / 1000, self._fire, args=(generation,)
        )
        pending.daemon = True
        self._pending = pending
        pending.start()

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            handler, context = self.handler, self.context
        handler(context)
        with self._lock:
            if generation != self._generation:
                return
            if self.repeating:
                self._schedule(generation)
            else:
                self._pending = None

    def start(self, timeout_ticks, context):
        """Start the timer; the handler receives context on each expiry."""
        with self._lock:
            self.context = context
            self.repeat_period = timeout_ticks
            self._generation += 1
            self._schedule(self._generation)

    def stop(self):
        """Stop the timer; return whether a pending expiry was cancelled."""
        with self._lock:
            self._generation += 1
            pending, self._pending = self._pending, None
        if pending is None:
            return False
        pending.cancel()
        return True