"""Software timers of the simulated RTOS, driven by host threads."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

from pinesim.portmacro import PD_TRUE
from pinesim.task import CONFIG_TICK_RATE_HZ, task_get_tick_count

_MASK = 0xFFFFFFFF


def ms_to_ticks(ms):
    """Convert milliseconds to ticks with 32-bit arithmetic."""
    return ((ms * CONFIG_TICK_RATE_HZ) & _MASK) // 1000


def ticks_to_ms(ticks):
    """Convert ticks to milliseconds with 32-bit arithmetic."""
    return ((ticks * 1000) & _MASK) // CONFIG_TICK_RATE_HZ


class Timer:
    """One-shot or auto-reloading timer that calls callback(timer) on expiry.

    The timer_id attribute is free for the caller to use as timer-local data.
    """

    def __init__(self, name, period_ticks, auto_reload, timer_id, callback):
        self.name = name
        self.period_ms = ticks_to_ms(period_ticks)
        self.auto_reload = auto_reload == PD_TRUE
        self.timer_id: Any = timer_id
        self.callback: Optional[Callable[["Timer"], Any]] = callback
        self._running = False
        self._expiry = 0
        self._lock = threading.Lock()
        self._generation = 0
        self._pending: Optional[threading.Timer] = None

    def _schedule(self, generation: int) -> None:
        pending = threading.Timer(self.period_ms / 1000, self._fire, args=(generation,))
        pending.daemon = True
        self._pending = pending
        pending.start()

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or not self._running:
                return
            callback = self.callback
        callback(self)
        with self._lock:
            if generation != self._generation:
                return
            if self.auto_reload and self._running:
                self._schedule(generation)
            else:
                self._running = False
                self._pending = None

    def start(self, ticks_to_wait):
        """Activate the timer; it expires one period from now."""
        if self.callback is None:
            raise RuntimeError("timer started without a callback")
        with self._lock:
            self._running = True
            self._expiry = (task_get_tick_count() + ms_to_ticks(self.period_ms)) & _MASK
            self._generation += 1
            self._schedule(self._generation)
        return True

    def stop(self, ticks_to_wait):
        """Deactivate the timer; return whether a pending expiry was cancelled."""
        with self._lock:
            self._running = False
            self._generation += 1
            pending, self._pending = self._pending, None
        if pending is None:
            return False
        pending.cancel()
        return True

    def reset(self, ticks_to_wait):
        """Restart the timer so that it expires one period from now."""
        if self._running:
            self.stop(ticks_to_wait)
        return self.start(ticks_to_wait)

    def change_period(self, new_period, ticks_to_wait):
        """Set a new period in ticks, restarting the timer if it is active."""
        if self._running:
            self.stop(ticks_to_wait)
            self.period_ms = ticks_to_ms(new_period)
            self.start(ticks_to_wait)
        else:
            self.period_ms = ticks_to_ms(new_period)
        return True

    def expiry_time(self):
        """Return the tick count at which the timer was last due to expire."""
        return self._expiry

    def is_active(self):
        """Return whether the timer is running."""
        return self._running