"""Port-level constants and helpers for the simulated RTOS layer."""

PORT_MAX_DELAY = 0xFFFFFFFF
"""Tick count meaning "wait forever"."""

PD_FALSE = 0
PD_TRUE = 1
PD_PASS = PD_TRUE

PORT_NRF_RTC_REG = 1
"""Identifier of the simulated RTC register."""


def port_yield_from_isr(higher_priority_task_woken):
    """Request a context switch from an interrupt handler.

    The simulator has no scheduler to switch, so nothing happens; the
    return value tells whether a switch would have been requested.
    """
    return bool(higher_priority_task_woken)