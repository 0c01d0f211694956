import pytest

from pinesim.cst816s import Cst816S, Gesture, TouchInfo

LEFT = 1


class FakeMouse:
    def __init__(self):
        self.x = 0
        self.y = 0
        self.buttons = 0

    def __call__(self):
        return self.x, self.y, self.buttons

    def move(self, x, y, pressed):
        self.x, self.y = x, y
        self.buttons = LEFT if pressed else 0


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def mouse():
    return FakeMouse()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def panel(mouse, clock):
    return Cst816S(mouse, 1, clock)


def test_press_reports_touch_without_gesture(panel, mouse):
    mouse.move(100, 120, True)
    assert panel.get_touch_info() == TouchInfo(100, 120, Gesture.NONE, True, True)


def test_single_tap_on_release(panel, mouse):
    mouse.move(100, 100, True)
    panel.get_touch_info()
    mouse.move(105, 100, False)
    info = panel.get_touch_info()
    assert info.gesture == Gesture.SINGLE_TAP
    assert info.touching is False


@pytest.mark.parametrize(
    "end, gesture",
    [
        ((50, 100), Gesture.SLIDE_LEFT),
        ((150, 100), Gesture.SLIDE_RIGHT),
        ((100, 50), Gesture.SLIDE_UP),
        ((100, 150), Gesture.SLIDE_DOWN),
    ],
)
def test_swipes(panel, mouse, end, gesture):
    mouse.move(100, 100, True)
    panel.get_touch_info()
    mouse.move(*end, True)
    assert panel.get_touch_info().gesture == gesture


def test_swipe_reported_once_and_no_tap(panel, mouse):
    mouse.move(100, 100, True)
    panel.get_touch_info()
    mouse.move(50, 100, True)
    panel.get_touch_info()
    mouse.move(40, 100, True)
    assert panel.get_touch_info().gesture == Gesture.NONE
    mouse.move(100, 100, False)
    assert panel.get_touch_info().gesture == Gesture.NONE


def test_long_press(panel, mouse, clock):
    mouse.move(100, 100, True)
    panel.get_touch_info()
    clock.now = 0.5
    assert panel.get_touch_info().gesture == Gesture.NONE
    clock.now = 1.5
    assert panel.get_touch_info().gesture == Gesture.LONG_PRESS
    mouse.move(100, 100, False)
    assert panel.get_touch_info().gesture == Gesture.NONE


def test_outside_panel_is_invalid(panel, mouse):
    mouse.move(0, 100, True)
    info = panel.get_touch_info()
    assert info.is_valid is False
    assert info.gesture == Gesture.NONE
    mouse.move(100, 241, True)
    assert panel.get_touch_info().is_valid is False


def test_zoom_scales_coordinates(mouse, clock):
    panel = Cst816S(mouse, 2, clock)
    mouse.move(200, 100, False)
    info = panel.get_touch_info()
    assert (info.x, info.y) == (100, 50)
    assert info.is_valid is True


def test_device_ids(panel):
    assert panel.chip_id() == 0xB4
    assert panel.vendor_id() == 0
    assert panel.fw_version() == 1
    assert panel.init() is True


def test_sleep_and_wakeup_log(panel, capsys):
    panel.sleep()
    panel.wakeup()
    assert capsys.readouterr().out == "info:  [TOUCHPANEL] Sleep\ninfo:  [TOUCHPANEL] Wakeup\n"