"""Simulated SPI bus master; every transfer succeeds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from pinesim.nrflog import log_info


class SpiModule(IntEnum):
    """SPI peripheral instance."""

    SPI0 = 0
    SPI1 = 1


class BitOrder(IntEnum):
    """Order in which the bits of a byte are shifted out."""

    MSB_LSB = 0
    LSB_MSB = 1


class SpiMode(IntEnum):
    """Clock polarity and phase mode."""

    MODE0 = 0
    MODE1 = 1
    MODE2 = 2
    MODE3 = 3


class Frequency(IntEnum):
    """Bus clock frequency."""

    FREQ_8MHZ = 0


@dataclass
class SpiParameters:
    """Bus configuration."""

    bit_order: BitOrder
    mode: SpiMode
    frequency: Frequency
    pin_sck: int
    pin_mosi: int
    pin_miso: int


class SpiMaster:
    """SPI master that accepts every transfer; reads return zero bytes."""

    def __init__(self, spi, params):
        self.spi = SpiModule(spi)
        self.params: SpiParameters = params
        self.pin_csn = 0
        self.current_buffer_addr = 0
        self.current_buffer_size = 0
        self.transfer_started = False

    def init(self):
        """Configure the bus; always succeeds."""
        return True

    def write(self, pin_csn, data):
        """Send data to the device selected by pin_csn."""
        self.pin_csn = pin_csn
        return True

    def read(self, pin_csn, cmd, data_size):
        """Send cmd, then return data_size bytes read back."""
        if data_size < 0:
            raise ValueError(f"read size must not be negative: {data_size}")
        self.pin_csn = pin_csn
        return bytes(data_size)

    def write_cmd_and_buffer(self, pin_csn, cmd, data):
        """Send cmd followed by data in one selection of the device."""
        self.pin_csn = pin_csn
        return True

    def on_started_event(self):
        """Handle the transfer-started event by marking a transfer as running."""
        self.transfer_started = True

    def on_end_event(self):
        """Handle the transfer-end event; no transfer is ever left pending."""
        self.transfer_started = False
        if self.current_buffer_addr == 0:
            return
        self.current_buffer_addr = 0
        self.current_buffer_size = 0

    def sleep(self):
        """Disable the bus."""
        log_info("[SPIMASTER] sleep")

    def wakeup(self):
        """Re-initialise the bus."""
        self.init()
        log_info("[SPIMASTER] Wakeup")