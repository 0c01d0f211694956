import pytest

from pinesim.hrs3300 import Hrs3300, Registers
from pinesim.twi_master import TwiError, TwiMaster

ADDRESS = 0x44


@pytest.fixture
def twi():
    master = TwiMaster(None, 250000, 6, 7)
    master.init()
    return master


@pytest.fixture
def sensor(twi):
    return Hrs3300(twi, ADDRESS)


def reg(twi, register):
    return twi.read(ADDRESS, register, 1)[0]


def test_init_writes_default_configuration(twi, sensor):
    sensor.init()
    assert reg(twi, Registers.ENABLE) == 0x60
    assert reg(twi, Registers.PDRIVER) == 0x6E
    assert reg(twi, Registers.RES) == 0x88
    assert reg(twi, Registers.HGAIN) == 0x10


def test_enable_and_disable_toggle_high_bit(twi, sensor, capsys):
    sensor.init()
    sensor.enable()
    assert reg(twi, Registers.ENABLE) == 0x60 | 0x80
    sensor.disable()
    assert reg(twi, Registers.ENABLE) == 0x60
    out = capsys.readouterr().out
    assert "info:  ENABLE\n" in out
    assert "info:  DISABLE\n" in out


def test_read_hrs_uses_middle_byte_as_high_part(twi, sensor):
    twi.write(ADDRESS, Registers.C0_DATA_M, bytes([0x5A]))
    assert sensor.read_hrs() == 0x5A << 8


def test_read_hrs_drops_bits_beyond_sixteen(twi, sensor):
    twi.write(ADDRESS, Registers.C0_DATA_M, bytes([0x12]))
    twi.write(ADDRESS, Registers.C0_DATA_H, bytes([0x03]))
    twi.write(ADDRESS, Registers.C0_DATA_L, bytes([0x05]))
    without_high_bits = sensor.read_hrs()
    twi.write(ADDRESS, Registers.C0_DATA_L, bytes([0x35]))
    assert sensor.read_hrs() == without_high_bits
    assert 0 <= without_high_bits <= 0xFFFF


def test_read_hrs_low_nibble(twi, sensor):
    twi.write(ADDRESS, Registers.C0_DATA_L, bytes([0x0F]))
    assert sensor.read_hrs() == 0x0F


def test_read_als_components(twi, sensor):
    twi.write(ADDRESS, Registers.C1_DATA_M, bytes([0x01]))
    assert sensor.read_als() == 0x01 << 3
    twi.write(ADDRESS, Registers.C1_DATA_M, bytes([0x00]))
    twi.write(ADDRESS, Registers.C1_DATA_L, bytes([0xFF]))
    assert sensor.read_als() == 0x07


def test_read_als_is_sixteen_bits(twi, sensor):
    twi.write(ADDRESS, Registers.C1_DATA_M, bytes([0xFF]))
    twi.write(ADDRESS, Registers.C1_DATA_H, bytes([0xFF]))
    twi.write(ADDRESS, Registers.C1_DATA_L, bytes([0xFF]))
    assert 0 <= sensor.read_als() <= 0xFFFF


def test_set_gain_one_is_zero(twi, sensor):
    sensor.set_gain(1)
    assert reg(twi, Registers.HGAIN) == 0


def test_set_gain_is_capped(twi, sensor):
    sensor.set_gain(64)
    capped = reg(twi, Registers.HGAIN)
    sensor.set_gain(200)
    assert reg(twi, Registers.HGAIN) == capped


def test_set_gain_rounds_up_to_power_of_two(twi, sensor):
    sensor.set_gain(8)
    exact = reg(twi, Registers.HGAIN)
    sensor.set_gain(5)
    assert reg(twi, Registers.HGAIN) == exact


def test_set_drive_sets_bits(twi, sensor):
    sensor.init()
    sensor.set_drive(3)
    assert reg(twi, Registers.ENABLE) & 0x08 == 0x08
    assert reg(twi, Registers.PDRIVER) & 0x40 == 0x40
    sensor.set_drive(0)
    assert reg(twi, Registers.ENABLE) & 0x08 == 0
    assert reg(twi, Registers.PDRIVER) & 0x40 == 0


class _FailingBus(TwiMaster):
    def read(self, device_address, register_address, size):
        raise TwiError("bus stuck")

    def write(self, device_address, register_address, data):
        raise TwiError("bus stuck")


def test_bus_errors_are_logged(capsys):
    sensor = Hrs3300(_FailingBus(None, 0, 0, 0), ADDRESS)
    assert sensor.read_hrs() == 0
    sensor.set_gain(4)
    out = capsys.readouterr().out
    assert "info:  READ ERROR\n" in out
    assert "info:  WRITE ERROR\n" in out