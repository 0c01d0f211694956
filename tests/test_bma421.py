import pytest

from pinesim.bma421 import AccelValues, Bma421, DeviceType
from pinesim.twi_master import TwiMaster


@pytest.fixture
def bus():
    twi = TwiMaster(None, 400000, 6, 7)
    twi.init()
    return twi


def test_process_reports_steps(bus):
    sensor = Bma421(bus, 0x18)
    sensor.steps = 1234
    assert sensor.process() == AccelValues(1234, 0, 0, 0)


def test_reset_step_counter(bus):
    sensor = Bma421(bus, 0x18)
    sensor.steps = 42
    sensor.reset_step_counter()
    assert sensor.process().steps == 0


def test_is_ok_by_default(bus):
    assert Bma421(bus, 0x18).is_ok() is True


def test_init_without_reset_keeps_unknown_type(bus):
    sensor = Bma421(bus, 0x18)
    sensor.soft_reset()
    sensor.init()
    assert sensor.device_type() is DeviceType.UNKNOWN
    assert sensor.is_ok() is True


def test_soft_reset_sends_reset_command(bus):
    sensor = Bma421(bus, 0x18)
    sensor.soft_reset()
    assert bus.read(0x18, 0x7E, 1) == bytes([0xB6])


def test_read_write_round_trip(bus):
    sensor = Bma421(bus, 0x18)
    sensor.write(0x40, b"\x01\x02\x03")
    assert sensor.read(0x40, 3) == b"\x01\x02\x03"


def test_devices_use_their_own_address(bus):
    first = Bma421(bus, 0x18)
    second = Bma421(bus, 0x19)
    first.write(0x10, b"\x05")
    assert second.read(0x10, 1) == b"\x00"
    assert first.read(0x10, 1) == b"\x05"