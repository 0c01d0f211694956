"""Simulated watchdog; it never fires and always reports a pin reset."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ResetReason(Enum):
    """Cause of the last system reset."""

    RESET_PIN = "Reset pin"
    WATCHDOG = "Watchdog"
    SOFT_RESET = "Soft reset"
    CPU_LOCKUP = "CPU Lock-up"
    SYSTEM_OFF = "System OFF"
    LP_COMP = "LPCOMP"
    DEBUG_INTERFACE = "Debug interface"
    NFC = "NFC"
    HARD_RESET = "Hard reset"


def reset_reason_to_string(reason):
    """Return a readable name for a reset reason, "Unknown" for anything else."""
    if isinstance(reason, ResetReason):
        return reason.value
    return "Unknown"


class Watchdog:
    """Watchdog timer that records its configuration and kicks."""

    def __init__(self):
        self._reset_reason: Optional[ResetReason] = None
        self.timeout_seconds = 0
        self.started = False
        self.kicks = 0

    def setup(self, timeout_seconds):
        """Configure the timeout and latch the reason of the last reset."""
        self.timeout_seconds = timeout_seconds
        self._reset_reason = self._actual_reset_reason()

    def start(self):
        """Start the watchdog."""
        self.started = True

    def kick(self):
        """Feed the watchdog."""
        self.kicks += 1

    def reset_reason(self):
        """Return the reset reason latched by setup(), or None before it."""
        return self._reset_reason

    @staticmethod
    def _actual_reset_reason() -> ResetReason:
        return ResetReason.RESET_PIN


class WatchdogView:
    """Read-only view of a watchdog."""

    def __init__(self, watchdog):
        self._watchdog: Watchdog = watchdog

    def reset_reason(self):
        """Return the reset reason of the viewed watchdog."""
        return self._watchdog.reset_reason()