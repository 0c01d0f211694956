"""Simulated real-time counter register."""

from pinesim.portmacro import PORT_NRF_RTC_REG
from pinesim.task import task_get_tick_count


def rtc_counter_get(register):
    """Return the counter of the given RTC register.

    Only the register used by the RTOS port is simulated; it counts ticks.
    """
    if register == PORT_NRF_RTC_REG:
        return task_get_tick_count()
    raise ValueError(f"rtc_counter_get: unhandled register: {register}")