"""Simulated SPI NOR flash memory backed by a file on the host."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO, Optional

from pinesim.nrflog import log_info

MEMORY_SIZE = 0x400000
"""Capacity of the flash chip in bytes."""

PAGE_SIZE = 256


class _Command(IntEnum):
    PAGE_PROGRAM = 0x02
    READ = 0x03
    READ_STATUS_REGISTER = 0x05
    WRITE_ENABLE = 0x06
    READ_CONFIGURATION_REGISTER = 0x15
    SECTOR_ERASE = 0x20
    READ_SECURITY_REGISTER = 0x2B
    READ_IDENTIFICATION = 0x9F
    RELEASE_FROM_DEEP_POWER_DOWN = 0xAB
    DEEP_POWER_DOWN = 0xB9


@dataclass
class Identification:
    """JEDEC identification of the flash chip."""

    manufacturer: int = 0
    type: int = 0
    density: int = 0


class SpiNorFlash:
    """Flash memory whose contents live in a file.

    A missing file is created with the full memory size; an existing file
    is used as it is.
    """

    def __init__(self, memory_file_path):
        self.memory_file_path = os.fspath(memory_file_path)
        self.device_id = Identification()
        self._file: Optional[BinaryIO]
        if os.path.exists(self.memory_file_path):
            self._file = open(self.memory_file_path, "r+b")
        else:
            self._file = open(self.memory_file_path, "w+b")
            self._file.seek(MEMORY_SIZE - 1)
            self._file.write(b"\0")
            self._file.flush()

    def close(self):
        """Close the backing file."""
        if self._file is not None and not self._file.closed:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def closed(self):
        """Whether the backing file is closed."""
        return self._file is None or self._file.closed

    def _handle(self) -> BinaryIO:
        if self._file is None or self._file.closed:
            raise ValueError("flash memory file is closed")
        return self._file

    def init(self):
        """Read and log the chip identification."""
        self.device_id = self.read_identification()
        log_info(
            "[SpiNorFlash] Manufacturer : %d, Memory type : %d, memory density : %d",
            self.device_id.manufacturer,
            self.device_id.type,
            self.device_id.density,
        )

    def uninit(self):
        """Release the chip, flushing any buffered data to the backing file."""
        if not self.closed:
            self._handle().flush()

    def sleep(self):
        """Put the chip into deep power-down."""
        log_info("[SpiNorFlash] Sleep")

    def wakeup(self):
        """Release the chip from deep power-down."""
        log_info("[SpiNorFlash] Wakeup")

    def read_identification(self):
        """Return the chip identification; all fields are zero."""
        return Identification()

    def read_status_register(self):
        """Return the status register."""
        return 0

    def write_in_progress(self):
        """Return whether a write is still running; writes complete at once."""
        return False

    def write_enabled(self):
        """Return whether the write-enable latch is set."""
        return False

    def read_configuration_register(self):
        """Return the configuration register."""
        return 0

    def read(self, address, size):
        """Return size bytes starting at address."""
        if size < 0:
            raise ValueError(f"read size must not be negative: {size}")
        if address < 0 or address + size > MEMORY_SIZE:
            raise IndexError("SpiNorFlash.read out of bounds")
        handle = self._handle()
        handle.seek(address)
        data = handle.read(size)
        return data + bytes(size - len(data))

    def write(self, address, data):
        """Store data starting at address and flush it to the file."""
        payload = bytes(data)
        if address < 0 or address + len(payload) > MEMORY_SIZE:
            raise IndexError("SpiNorFlash.write out of bounds")
        handle = self._handle()
        handle.seek(address)
        handle.write(payload)
        handle.flush()

    def write_enable(self):
        """Set the write-enable latch; requires the backing file to be open."""
        self._handle()

    def sector_erase(self, sector_address):
        """Erase a sector; the simulated chip keeps its contents.

        The address is still checked against the memory size.
        """
        if sector_address < 0 or sector_address >= MEMORY_SIZE:
            raise IndexError("SpiNorFlash.sector_erase out of bounds")
        self._handle()

    def read_security_register(self):
        """Return the security register."""
        return 0

    def program_failed(self):
        """Return whether the last program operation failed."""
        return False

    def erase_failed(self):
        """Return whether the last erase operation failed."""
        return False