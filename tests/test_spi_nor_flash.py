import os

import pytest

from pinesim.spi_nor_flash import MEMORY_SIZE, Identification, SpiNorFlash


@pytest.fixture
def flash_path(tmp_path):
    return tmp_path / "spiNorFlash.raw"


def test_new_file_has_full_size(flash_path):
    with SpiNorFlash(flash_path):
        pass
    assert os.path.getsize(flash_path) == 0x400000


def test_write_read_round_trip(flash_path):
    with SpiNorFlash(flash_path) as flash:
        flash.write(4096, b"hello flash")
        assert flash.read(4096, 11) == b"hello flash"


def test_unwritten_memory_reads_zero(flash_path):
    with SpiNorFlash(flash_path) as flash:
        assert flash.read(100, 8) == bytes(8)


def test_contents_persist_across_reopen(flash_path):
    with SpiNorFlash(flash_path) as flash:
        flash.write(0, b"\x01\x02\x03")
    with SpiNorFlash(flash_path) as flash:
        assert flash.read(0, 3) == b"\x01\x02\x03"


def test_write_at_end_of_memory(flash_path):
    with SpiNorFlash(flash_path) as flash:
        flash.write(MEMORY_SIZE - 2, b"ab")
        assert flash.read(MEMORY_SIZE - 2, 2) == b"ab"


def test_read_out_of_bounds(flash_path):
    with SpiNorFlash(flash_path) as flash:
        with pytest.raises(IndexError):
            flash.read(MEMORY_SIZE - 1, 2)


def test_write_out_of_bounds(flash_path):
    with SpiNorFlash(flash_path) as flash:
        with pytest.raises(IndexError):
            flash.write(MEMORY_SIZE, b"x")


def test_context_manager_closes(flash_path):
    with SpiNorFlash(flash_path) as flash:
        assert flash.closed is False
    assert flash.closed is True
    with pytest.raises(ValueError):
        flash.read(0, 1)


def test_identification_and_registers(flash_path):
    with SpiNorFlash(flash_path) as flash:
        assert flash.read_identification() == Identification(0, 0, 0)
        assert flash.read_status_register() == 0
        assert flash.read_configuration_register() == 0
        assert flash.read_security_register() == 0
        assert flash.write_in_progress() is False
        assert flash.write_enabled() is False
        assert flash.program_failed() is False
        assert flash.erase_failed() is False


def test_init_logs_identification(flash_path, capsys):
    with SpiNorFlash(flash_path) as flash:
        flash.init()
        assert flash.device_id == Identification()
    out = capsys.readouterr().out
    assert out == "info:  [SpiNorFlash] Manufacturer : 0, Memory type : 0, memory density : 0\n"


def test_sleep_and_wakeup_log(flash_path, capsys):
    with SpiNorFlash(flash_path) as flash:
        flash.sleep()
        flash.wakeup()
    assert capsys.readouterr().out == "info:  [SpiNorFlash] Sleep\ninfo:  [SpiNorFlash] Wakeup\n"


def test_sector_erase_keeps_contents(flash_path):
    with SpiNorFlash(flash_path) as flash:
        flash.write(0, b"keep")
        flash.write_enable()
        flash.sector_erase(0)
        assert flash.read(0, 4) == b"keep"