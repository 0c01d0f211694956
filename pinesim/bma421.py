"""Driver for the BMA421/BMA425 accelerometer with step counter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from pinesim.twi_master import TwiMaster

DEFAULT_ADDRESS = 0x18

_CHIP_ID_REGISTER = 0x00
_COMMAND_REGISTER = 0x7E
_SOFT_RESET_COMMAND = 0xB6
_BMA421_CHIP_ID = 0x11
_BMA425_CHIP_ID = 0x13


class DeviceType(IntEnum):
    """Variant of the accelerometer found on the bus."""

    UNKNOWN = 0
    BMA421 = 1
    BMA425 = 2


@dataclass
class AccelValues:
    """Step count and acceleration on the three axes."""

    steps: int = 0
    x: int = 0
    y: int = 0
    z: int = 0


class Bma421:
    """Accelerometer reached over a two-wire bus.

    The simulated sensor reports no motion; its step count is the public
    steps attribute, which the caller may change freely.
    """

    def __init__(self, twi_master, twi_address=DEFAULT_ADDRESS):
        self.twi_master: TwiMaster = twi_master
        self.device_address = twi_address
        self.steps = 0
        self._ok = True
        self._reset_ok = False
        self._device_type = DeviceType.UNKNOWN

    def soft_reset(self):
        """Send the soft-reset command.

        The simulated chip never confirms the reset, so a following init()
        leaves the device type unknown.
        """
        self._reset()

    def init(self):
        """Identify the chip; does nothing unless a soft reset succeeded."""
        if not self._reset_ok:
            return
        chip_id = self.read(_CHIP_ID_REGISTER, 1)[0]
        if chip_id == _BMA421_CHIP_ID:
            self._device_type = DeviceType.BMA421
        elif chip_id == _BMA425_CHIP_ID:
            self._device_type = DeviceType.BMA425
        else:
            self._device_type = DeviceType.UNKNOWN
        self._ok = True

    def process(self):
        """Return the current step count and acceleration."""
        if not self._ok:
            return AccelValues()
        return AccelValues(self.steps, 0, 0, 0)

    def reset_step_counter(self):
        """Set the step count back to zero."""
        self.steps = 0

    def read(self, register_address, size):
        """Read size bytes starting at register_address."""
        return self.twi_master.read(self.device_address, register_address, size)

    def write(self, register_address, data):
        """Write data starting at register_address."""
        self.twi_master.write(self.device_address, register_address, data)

    def is_ok(self):
        """Return whether the sensor is usable."""
        return self._ok

    def device_type(self):
        """Return the detected chip variant."""
        return self._device_type

    def _reset(self) -> None:
        self.write(_COMMAND_REGISTER, bytes([_SOFT_RESET_COMMAND]))