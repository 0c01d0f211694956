"""Task utilities of the simulated RTOS, backed by threads and the host clock."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Optional

from pinesim.portmacro import PD_PASS

CONFIG_TICK_RATE_HZ = 1024
_TICK_MASK = 0xFFFFFFFF


class TaskState(IntEnum):
    """State of a task as reported by the scheduler."""

    RUNNING = 0
    READY = 1
    BLOCKED = 2
    SUSPENDED = 3
    DELETED = 4
    INVALID = 5


class NotifyAction(IntEnum):
    """Actions that a task notification can perform."""

    NO_ACTION = 0
    SET_BITS = 1
    INCREMENT = 2
    SET_VALUE_WITH_OVERWRITE = 3
    SET_VALUE_WITHOUT_OVERWRITE = 4


class SchedulerState(IntEnum):
    """States returned by task_get_scheduler_state()."""

    SUSPENDED = 0
    NOT_STARTED = 1
    RUNNING = 2


@dataclass
class TaskHandle:
    """Reference to a created task."""

    thread: Optional[threading.Thread] = None
    task_fn: Optional[Callable[[Any], Any]] = None
    instance: Any = None

    def join(self, timeout=None):
        """Wait for the task to finish; return True if it is no longer running."""
        if self.thread is None:
            return True
        self.thread.join(timeout)
        return not self.thread.is_alive()


@dataclass
class TaskStatus:
    """Snapshot of one task's state."""

    handle: TaskHandle
    name: str
    task_number: int
    current_state: TaskState
    current_priority: int
    base_priority: int
    run_time_counter: int
    stack_high_water_mark: int


class _TickClock:
    """Tick counter that starts on its first reading."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._start: Optional[int] = None

    def ticks(self) -> int:
        now = time.monotonic_ns()
        with self._lock:
            if self._start is None:
                self._start = now
            elapsed = now - self._start
        return (elapsed * CONFIG_TICK_RATE_HZ // 1_000_000_000) & _TICK_MASK


_clock = _TickClock()


def task_get_tick_count():
    """Return the number of ticks elapsed since the first call."""
    return _clock.ticks()


def task_delay(ticks_to_delay):
    """Block the calling thread; the simulator treats one tick as one millisecond."""
    time.sleep(ticks_to_delay / 1000)


def task_create(task_fn, name, stack_depth, parameters, priority):
    """Start task_fn(parameters) on a new thread and return its handle.

    The stack depth and priority have no meaning on the host and are ignored.
    """
    handle = TaskHandle(task_fn=task_fn, instance=parameters)
    handle.thread = threading.Thread(
        target=task_fn, args=(parameters,), name=name, daemon=True
    )
    handle.thread.start()
    return handle


def task_notify_give(task):
    """Notify a task; always succeeds."""
    return PD_PASS


def task_get_current_task_handle():
    """Return an empty handle; the simulator does not track the calling task."""
    return TaskHandle()


def task_get_scheduler_state():
    """Return the scheduler state, which is never started in the simulator."""
    return SchedulerState.NOT_STARTED


def task_get_system_state():
    """Return status records for all tasks; none are tracked."""
    return []