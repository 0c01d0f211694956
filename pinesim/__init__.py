"""Simulated smartwatch peripherals and RTOS primitives for desktop use."""

__version__ = "0.1.0"