"""Driver for the HRS3300 heart rate sensor."""

from __future__ import annotations

from enum import IntEnum

from pinesim.nrflog import log_info
from pinesim.twi_master import TwiError, TwiMaster

_MAX_GAIN = 64


class Registers(IntEnum):
    """Register addresses of the HRS3300."""

    ID = 0x00
    ENABLE = 0x01
    ENABLE_HEN = 0x80
    C1_DATA_M = 0x08
    C0_DATA_M = 0x09
    C0_DATA_H = 0x0A
    PDRIVER = 0x0C
    C1_DATA_H = 0x0D
    C1_DATA_L = 0x0E
    C0_DATA_L = 0x0F
    RES = 0x16
    HGAIN = 0x17


class Hrs3300:
    """Heart rate sensor reached over a two-wire bus."""

    def __init__(self, twi_master, twi_address):
        self.twi_master: TwiMaster = twi_master
        self.twi_address = twi_address

    def init(self):
        """Put the sensor into its default measuring configuration, disabled."""
        self.disable()
        # HRS disabled, 12.5 ms wait time between cycles, (partly) 20 mA drive
        self._write_register(Registers.ENABLE, 0x60)
        # (partly) 20 mA drive, power on, low nibble 0xe
        self._write_register(Registers.PDRIVER, 0x6E)
        # HRS and ALS both in 16-bit mode
        self._write_register(Registers.RES, 0x88)
        # 64x gain
        self._write_register(Registers.HGAIN, 0x10)

    def enable(self):
        """Start heart rate sensing."""
        log_info("ENABLE")
        value = self._read_register(Registers.ENABLE)
        self._write_register(Registers.ENABLE, value | 0x80)

    def disable(self):
        """Stop heart rate sensing."""
        log_info("DISABLE")
        value = self._read_register(Registers.ENABLE)
        self._write_register(Registers.ENABLE, value & 0x7F)

    def read_hrs(self):
        """Return the 16-bit heart rate channel value."""
        m = self._read_register(Registers.C0_DATA_M)
        h = self._read_register(Registers.C0_DATA_H)
        low = self._read_register(Registers.C0_DATA_L)
        value = (m << 8) | ((h & 0x0F) << 4) | (low & 0x0F) | ((low & 0x30) << 12)
        return value & 0xFFFF

    def read_als(self):
        """Return the 16-bit ambient light channel value."""
        m = self._read_register(Registers.C1_DATA_M)
        h = self._read_register(Registers.C1_DATA_H)
        low = self._read_register(Registers.C1_DATA_L)
        return ((m << 3) | ((h & 0x3F) << 11) | (low & 0x07)) & 0xFFFF

    def set_gain(self, gain):
        """Set the gain to the smallest power of two not below gain, at most 64."""
        gain = min(gain & 0xFF, _MAX_GAIN)
        hgain = 0
        while (1 << hgain) < gain:
            hgain += 1
        self._write_register(Registers.HGAIN, hgain << 2)

    def set_drive(self, drive):
        """Set the LED drive current from the two low bits of drive."""
        en = self._read_register(Registers.ENABLE)
        pd = self._read_register(Registers.PDRIVER)
        en = (en & 0xF7) | ((drive & 2) << 2)
        pd = (pd & 0xBF) | ((drive & 1) << 6)
        self._write_register(Registers.ENABLE, en)
        self._write_register(Registers.PDRIVER, pd)

    def _write_register(self, reg: int, data: int) -> None:
        try:
            self.twi_master.write(self.twi_address, int(reg), bytes([data & 0xFF]))
        except TwiError:
            log_info("WRITE ERROR")

    def _read_register(self, reg: int) -> int:
        try:
            return self.twi_master.read(self.twi_address, int(reg), 1)[0]
        except TwiError:
            log_info("READ ERROR")
            return 0