"""Simulated GPIO pins: a mouse button stands in for the side button, and the
vibration motor is tracked as a flag."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Optional

GPIO_PIN_CNF_PULL_PULLDOWN = 1
GPIO_PIN_CNF_PULL_PULLUP = 3
NRF_GPIOTE_POLARITY_HITOLO = 2
NRF_GPIOTE_POLARITY_TOGGLE = 3
GPIO_PIN_CNF_SENSE_LOW = 3

MOUSE_BUTTON_LMASK = 1 << 0
MOUSE_BUTTON_RMASK = 1 << 2


class PinPull(IntEnum):
    """Pull resistor configuration of an input pin."""

    NOPULL = 0
    PULLDOWN = 1
    PULLUP = 3


@dataclass
class GpioteInConfig:
    """Configuration of a GPIO task/event input."""

    skip_gpio_setup: bool = False
    hi_accuracy: bool = False
    is_watcher: bool = False
    sense: int = 0
    pull: PinPull = PinPull.NOPULL


class GpioSimulator:
    """GPIO port whose button reads the right mouse button.

    mouse_buttons is a callable returning the current mouse button mask.
    The motor pin is active low: clearing it or resetting its configuration
    starts the motor, setting it stops the motor.
    """

    def __init__(self, button_pin, motor_pin, mouse_buttons=None):
        self.button_pin = button_pin
        self.motor_pin = motor_pin
        self._mouse_buttons: Callable[[], int] = mouse_buttons or (lambda: 0)
        self.motor_running = False
        self.outputs: set[int] = set()
        self.inputs: dict[int, PinPull] = {}
        self.sense: dict[int, int] = {}
        self.gpiote_handlers: dict[int, tuple[GpioteInConfig, Optional[Callable[..., Any]]]] = {}
        self.gpiote_enabled: set[int] = set()
        self.gpiote_max_users = 0

    def cfg_default(self, pin):
        """Reset a pin to its default configuration."""
        self.outputs.discard(pin)
        self.inputs.pop(pin, None)
        self.sense.pop(pin, None)
        if pin == self.motor_pin:
            self.motor_running = True

    def pin_set(self, pin):
        """Drive a pin high."""
        if pin == self.motor_pin:
            self.motor_running = False

    def pin_clear(self, pin):
        """Drive a pin low."""
        if pin == self.motor_pin:
            self.motor_running = True

    def pin_read(self, pin):
        """Read a pin as 0 or 1; only the button and motor pins exist."""
        if pin == self.button_pin:
            return int(self._mouse_buttons() & MOUSE_BUTTON_RMASK != 0)
        if pin == self.motor_pin:
            return int(self.motor_running)
        raise ValueError(f"pin_read: unhandled pin number: {pin}")

    def cfg_output(self, pin):
        """Configure a pin as an output."""
        self.inputs.pop(pin, None)
        self.outputs.add(pin)

    def cfg_input(self, pin, pull):
        """Configure a pin as an input with the given pull resistor."""
        self.outputs.discard(pin)
        self.inputs[pin] = PinPull(pull)

    def range_cfg_input(self, start, end, pull):
        """Configure pins start to end, both included, as inputs."""
        for pin in range(start, end + 1):
            self.cfg_input(pin, pull)

    def cfg_sense_input(self, pin, pull, sense):
        """Configure a pin as an input that senses the given level."""
        self.cfg_input(pin, pull)
        self.sense[pin] = sense

    def gpiote_in_init(self, pin, config, handler):
        """Register an event handler for an input pin."""
        self.gpiote_handlers[pin] = (config, handler)

    def gpiote_in_event_enable(self, pin, enable):
        """Enable event generation on a registered input pin."""
        if enable:
            self.gpiote_enabled.add(pin)
        else:
            self.gpiote_enabled.discard(pin)

    def gpiote_init(self, max_users):
        """Initialise the GPIO task/event module."""
        self.gpiote_max_users = max_users