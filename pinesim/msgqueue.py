"""Byte message queue shared between simulated tasks and interrupt handlers."""

from __future__ import annotations

import threading
from collections import deque
from typing import Optional

_POLL_TICKS = 25


class MessageQueue:
    """FIFO queue of single-byte items.

    The length given at creation is only a capacity hint; the queue grows
    as needed.
    """

    def __init__(self, length, item_size):
        if item_size != 1:
            raise ValueError("item_size must be 1")
        self.length = length
        self._items: deque[int] = deque()
        self._cond = threading.Condition()

    def send(self, item, ticks_to_wait):
        """Append an item to the back of the queue; always succeeds."""
        value = int(item)
        if not 0 <= value <= 0xFF:
            raise ValueError(f"queue item must fit in one byte: {value}")
        with self._cond:
            self._items.append(value)
            self._cond.notify()
        return True

    def send_from_isr(self, item):
        """Append an item from an interrupt handler.

        No higher-priority task is ever woken in the simulator.
        """
        return self.send(item, 0)

    def receive(self, ticks_to_wait) -> Optional[int]:
        """Remove and return the front item, or None if none arrives in time.

        While the queue is empty the wait proceeds in steps of 25 ticks
        (milliseconds); a remaining wait of 25 ticks or less gives up.
        """
        remaining = ticks_to_wait
        with self._cond:
            while not self._items:
                if remaining <= _POLL_TICKS:
                    return None
                self._cond.wait(_POLL_TICKS / 1000)
                remaining -= _POLL_TICKS
            return self._items.popleft()

    def __len__(self):
        with self._cond:
            return len(self._items)