"""Simulated two-wire (I2C) bus master.

Each device on the bus is modelled as a bank of byte registers. Writing
stores bytes at consecutive registers, reading returns them, and registers
that were never written read as zero.
"""

from __future__ import annotations

import threading
from typing import Any

MAX_DATA_SIZE = 16
"""Largest payload, in bytes, of a single register write."""

REGISTER_SIZE = 1
HW_FREEZED_DELAY = 161000


class TwiError(Exception):
    """A bus transaction failed."""


class TwiMaster:
    """Bus master holding the register contents of every simulated device."""

    def __init__(self, module, frequency, pin_sda, pin_scl):
        self.module: Any = module
        self.frequency = frequency
        self.pin_sda = pin_sda
        self.pin_scl = pin_scl
        self.enabled = False
        self._registers: dict[tuple[int, int], int] = {}
        self._lock = threading.Lock()

    def init(self):
        """Configure and enable the bus."""
        self.enabled = True

    def read(self, device_address, register_address, size):
        """Read size bytes starting at register_address of a device."""
        if size < 0:
            raise ValueError(f"read size must not be negative: {size}")
        with self._lock:
            return bytes(
                self._registers.get((device_address, (register_address + offset) & 0xFF), 0)
                for offset in range(size)
            )

    def write(self, device_address, register_address, data):
        """Write data to consecutive registers starting at register_address."""
        payload = bytes(data)
        if len(payload) > MAX_DATA_SIZE:
            raise ValueError(
                f"write of {len(payload)} bytes exceeds the limit of {MAX_DATA_SIZE}"
            )
        with self._lock:
            for offset, value in enumerate(payload):
                self._registers[(device_address, (register_address + offset) & 0xFF)] = value

    def sleep(self):
        """Disable the bus."""
        self.enabled = False

    def wakeup(self):
        """Re-enable the bus."""
        self.enabled = True