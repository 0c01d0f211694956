"""Busy-free millisecond delay."""

import time


def delay_ms(ms_time):
    """Block the calling thread for ms_time milliseconds."""
    time.sleep(ms_time / 1000)